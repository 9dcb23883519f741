import pytest
from decimal import Decimal
from apps.floorplans.services import archive_floor_plan
from apps.inventory.models import SalesStatus, Vehicle
from apps.inventory.services import (
    SaleEvent,
    derive_vehicle_sales_status,
    apply_sale_event,
    create_vehicle,
    get_vehicle,
    update_vehicle,
    update_vehicle_costs,
    mark_completed,
    delete_vehicle,
    get_sold_vehicles,
    get_available_vehicles,
    get_vehicle_by_sale,
    get_sale_by_vehicle,
    VehicleNotFoundError,
    InvalidFloorPlanError,
)
from apps.sales.services import create_sale, add_sales_details, update_sale, delete_sale
from apps.vendors.models import Vendor


class TestDeriveVehicleSalesStatus:

    @pytest.mark.parametrize('event,is_reserved,expected', [
        (SaleEvent.CREATED, False, SalesStatus.PENDING),
        (SaleEvent.DETAILS_ADDED, False, SalesStatus.SOLD),
        (SaleEvent.DETAILS_ADDED, True, SalesStatus.RESERVED),
        (SaleEvent.DELETED, False, SalesStatus.AVAILABLE),
        (SaleEvent.RELEASED, False, SalesStatus.AVAILABLE),
    ])
    def test_transitions(self, event, is_reserved, expected):
        assert derive_vehicle_sales_status(event, is_reserved=is_reserved) == expected

    def test_unknown_event(self):
        with pytest.raises(ValueError):
            derive_vehicle_sales_status('repossessed')


@pytest.mark.django_db
class TestSalesStatusLifecycle:

    def _sale_for(self, vehicle, customer):
        return create_sale(
            customer_info={'is_existing_customer': True, 'customer_id': customer.customer_id},
            vehicle_id=vehicle.pk,
        ).value

    def test_created_sale_marks_pending(self, vehicle, customer):
        sale = self._sale_for(vehicle, customer)

        vehicle.refresh_from_db()
        assert vehicle.sales_status == SalesStatus.PENDING
        assert vehicle.sales_id == sale.pk

    def test_details_mark_sold(self, vehicle, customer):
        sale = self._sale_for(vehicle, customer)

        add_sales_details(pk=sale.pk, data={'is_cash_sale': True, 'sales_type': 'Cash Sales'})

        vehicle.refresh_from_db()
        assert vehicle.sales_status == SalesStatus.SOLD

    def test_reserved_details_mark_reserved(self, vehicle, customer):
        sale = self._sale_for(vehicle, customer)

        add_sales_details(pk=sale.pk, data={'is_cash_sale': True, 'is_reserved': True})

        vehicle.refresh_from_db()
        assert vehicle.sales_status == SalesStatus.RESERVED

    def test_deleted_sale_releases_vehicle(self, vehicle, customer):
        sale = self._sale_for(vehicle, customer)
        add_sales_details(pk=sale.pk, data={'is_cash_sale': True})

        delete_sale(pk=sale.pk)

        vehicle.refresh_from_db()
        assert vehicle.sales_status == SalesStatus.AVAILABLE
        assert vehicle.sales_id is None

    def test_vehicle_swap_releases_previous(self, make_vehicle, customer):
        first = make_vehicle()
        second = make_vehicle(vehicle_type='Sedan')
        sale = self._sale_for(first, customer)

        result = update_sale(pk=sale.pk, vehicle_id=second.pk)

        first.refresh_from_db()
        second.refresh_from_db()
        assert result.ok
        assert first.sales_status == SalesStatus.AVAILABLE
        assert first.sales_id is None
        assert second.sales_status == SalesStatus.PENDING
        assert second.sales_id == sale.pk

    def test_deleting_superseded_sale_keeps_current_one(self, vehicle, customer):
        old = self._sale_for(vehicle, customer)
        live = self._sale_for(vehicle, customer)

        result = delete_sale(pk=old.pk)

        vehicle.refresh_from_db()
        assert result.ok
        assert vehicle.sales_id == live.pk
        assert vehicle.sales_status == SalesStatus.PENDING
        assert vehicle not in get_available_vehicles()

    def test_moving_superseded_sale_keeps_current_one(self, make_vehicle, customer):
        vehicle = make_vehicle()
        other = make_vehicle(vehicle_type='Sedan')
        old = self._sale_for(vehicle, customer)
        live = self._sale_for(vehicle, customer)

        update_sale(pk=old.pk, vehicle_id=other.pk)

        vehicle.refresh_from_db()
        assert vehicle.sales_id == live.pk
        assert vehicle.sales_status == SalesStatus.PENDING

    def test_other_vehicles_untouched(self, make_vehicle, customer):
        sold = make_vehicle()
        bystander = make_vehicle()

        self._sale_for(sold, customer)

        bystander.refresh_from_db()
        assert bystander.sales_status == SalesStatus.AVAILABLE

    def test_missing_vehicle_is_ignored(self, db):
        assert apply_sale_event(
            vehicle_id='00000000-0000-0000-0000-000000000000', event=SaleEvent.DELETED,
        ) is None


@pytest.mark.django_db
class TestVehicleManagement:

    def test_stock_id_from_vendor_category_and_type(self, vehicle):
        assert vehicle.stock_id == 'AU-SUV-0001'
        assert vehicle.sales_status == SalesStatus.AVAILABLE

    def test_new_vendor_created_inline(self, db):
        vehicle = create_vehicle(
            vendor_info={
                'category': 'Dealer - DL',
                'name': 'Lone Star Motors',
                'email': 'buying@lonestar.example.com',
            },
            vehicle_type='Pick Up',
            make='Ford',
        )

        assert vehicle.stock_id == 'DL-PICKUP-0001'
        assert Vendor.objects.filter(email='buying@lonestar.example.com').exists()

    def test_type_change_mints_new_stock_id(self, vehicle):
        updated = update_vehicle(pk=vehicle.pk, data={'vehicle_type': 'Sedan'})

        assert updated.stock_id == 'AU-SEDAN-0001'

    def test_same_prefix_keeps_stock_id(self, vehicle):
        updated = update_vehicle(pk=vehicle.pk, data={'vehicle_type': 'suv', 'make': 'Honda'})

        assert updated.stock_id == 'AU-SUV-0001'
        assert updated.make == 'Honda'

    def test_costs_recalculated(self, vehicle):
        result = update_vehicle_costs(pk=vehicle.pk, costs={
            'purchase_price': Decimal('10000.00'),
            'added_costs': [
                {'category': 'Repair', 'cost': Decimal('500.00')},
                {'category': 'Detailing', 'cost': '250.50'},
            ],
        })

        assert result.ok
        assert result.value.added_costs_total == Decimal('750.50')
        assert result.value.total_cost == Decimal('10750.50')

    def test_curtailments_merged(self, vehicle):
        update_vehicle_costs(pk=vehicle.pk, curtailments={'first': {'amount': '100'}})
        update_vehicle_costs(pk=vehicle.pk, curtailments={'second': {'amount': '200'}})

        vehicle.refresh_from_db()
        assert set(vehicle.curtailments) == {'first', 'second'}

    def test_attach_missing_floor_plan(self, vehicle):
        with pytest.raises(InvalidFloorPlanError):
            update_vehicle_costs(
                pk=vehicle.pk,
                floor_plan={'floor_plan': '00000000-0000-0000-0000-000000000000', 'is_floor_planned': True},
            )

    def test_attach_archived_floor_plan(self, vehicle, floor_plan):
        archive_floor_plan(pk=floor_plan.pk)

        with pytest.raises(InvalidFloorPlanError):
            update_vehicle_costs(pk=vehicle.pk, floor_plan={'floor_plan': floor_plan.pk})

    def test_detach_clears_flag(self, vehicle, floor_plan, attach):
        attach(vehicle, floor_plan)

        result = update_vehicle_costs(pk=vehicle.pk, floor_plan={'floor_plan': None})

        assert result.value.floor_plan_id is None
        assert result.value.is_floor_planned is False

    def test_mark_completed(self, vehicle):
        assert mark_completed(pk=vehicle.pk).mark_as_completed is True
        assert mark_completed(pk=vehicle.pk, completed=False).mark_as_completed is False

    def test_delete_is_soft(self, vehicle, floor_plan, attach):
        attach(vehicle, floor_plan)

        result = delete_vehicle(pk=vehicle.pk)

        assert result.ok
        row = Vehicle.objects.get(pk=vehicle.pk)
        assert row.is_deleted is True
        assert row.floor_plan_id is None
        with pytest.raises(VehicleNotFoundError):
            get_vehicle(pk=vehicle.pk)

    def test_delete_twice(self, vehicle):
        delete_vehicle(pk=vehicle.pk)

        with pytest.raises(VehicleNotFoundError):
            delete_vehicle(pk=vehicle.pk)


@pytest.mark.django_db
class TestVehicleQueries:

    def test_sold_and_available(self, make_vehicle, make_financed_sale):
        sold = make_vehicle()
        available = make_vehicle()
        make_financed_sale(sold)

        assert list(get_sold_vehicles()) == [sold]
        assert list(get_available_vehicles()) == [available]

    def test_lookup_by_sale_and_vehicle(self, vehicle, make_financed_sale):
        sale = make_financed_sale(vehicle)

        assert get_vehicle_by_sale(sale_id=sale.pk) == vehicle
        assert get_sale_by_vehicle(vehicle_id=vehicle.pk) == sale

    def test_lookups_without_sale(self, vehicle):
        assert get_sale_by_vehicle(vehicle_id=vehicle.pk) is None
        assert get_vehicle_by_sale(sale_id='00000000-0000-0000-0000-000000000000') is None
