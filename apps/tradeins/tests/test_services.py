import pytest
from decimal import Decimal
from apps.inventory.models import Vehicle
from apps.sales.models import Sales
from apps.sales.services import set_net_trade_in
from apps.tradeins.services import (
    create_trade_in,
    get_trade_in,
    update_trade_in,
    delete_trade_in,
    NetTradeInNotFoundError,
    MissingVehicleInfoError,
)


TRADE_IN_VENDOR = {
    'category': 'Trade-In - TI',
    'name': 'Walk-in trade',
    'email': 'tradein@example.com',
}


@pytest.mark.django_db
class TestCreateTradeIn:

    def test_added_to_inventory(self, db):
        trade_in = create_trade_in(
            amount_allowed=Decimal('4000.00'),
            vendor_info=TRADE_IN_VENDOR,
            vehicle_info={'vehicle_type': 'Sedan', 'make': 'Honda', 'model': 'Civic'},
            add_to_inventory=True,
        )

        vehicle = Vehicle.objects.get(pk=trade_in.linked_vehicle_id)
        assert vehicle.stock_id == 'TI-SEDAN-0001'
        assert vehicle.make == 'Honda'

    def test_not_added_to_inventory(self, db):
        trade_in = create_trade_in(
            amount_allowed=Decimal('4000.00'),
            vehicle_info={'vehicle_type': 'Sedan'},
        )

        assert trade_in.linked_vehicle_id is None
        assert not Vehicle.objects.exists()

    def test_inventory_needs_vehicle_type(self, db):
        with pytest.raises(MissingVehicleInfoError):
            create_trade_in(vendor_info=TRADE_IN_VENDOR, vehicle_info={'make': 'Honda'}, add_to_inventory=True)

    def test_payoff_dropped_when_not_applicable(self, db):
        trade_in = create_trade_in(
            amount_allowed=Decimal('4000.00'),
            payoff_applicable=False,
            payoff_information={'payoff_amount': '1500.00'},
        )

        assert trade_in.payoff_information == {}
        assert trade_in.net_value == Decimal('4000.00')

    def test_net_value_subtracts_payoff(self, db):
        trade_in = create_trade_in(
            amount_allowed=Decimal('4000.00'),
            payoff_applicable=True,
            payoff_information={'payoff_amount': '1500.00', 'payoff_to_lender_name': 'Ally'},
        )

        assert get_trade_in(pk=trade_in.pk).net_value == Decimal('2500.00')


@pytest.mark.django_db
class TestUpdateTradeIn:

    def test_enable_inventory_later(self, db):
        trade_in = create_trade_in(
            vendor_info=TRADE_IN_VENDOR,
            vehicle_info={'vehicle_type': 'Truck', 'make': 'Ford'},
        )

        updated = update_trade_in(pk=trade_in.pk, data={'add_to_inventory': True})

        assert updated.linked_vehicle_id is not None

    def test_vehicle_details_pushed_to_inventory(self, db):
        trade_in = create_trade_in(
            vendor_info=TRADE_IN_VENDOR,
            vehicle_info={'vehicle_type': 'Truck', 'make': 'Ford'},
            add_to_inventory=True,
        )

        update_trade_in(pk=trade_in.pk, data={'vehicle_info': {'vehicle_type': 'Truck', 'make': 'Chevrolet'}})

        assert Vehicle.objects.get(pk=trade_in.linked_vehicle_id).make == 'Chevrolet'

    def test_turning_payoff_off_clears_it(self, db):
        trade_in = create_trade_in(payoff_applicable=True, payoff_information={'payoff_amount': '800'})

        updated = update_trade_in(pk=trade_in.pk, data={'payoff_applicable': False})

        assert updated.payoff_information == {}

    def test_missing(self, db):
        with pytest.raises(NetTradeInNotFoundError):
            update_trade_in(pk='00000000-0000-0000-0000-000000000000', data={})


@pytest.mark.django_db
class TestDeleteTradeIn:

    def test_clears_sale_reference(self, make_vehicle, make_financed_sale):
        sale = make_financed_sale(make_vehicle())
        trade_in = create_trade_in(amount_allowed=Decimal('1200.00'))
        set_net_trade_in(pk=sale.pk, enabled=True, net_trade_in_id=trade_in.pk)

        delete_trade_in(pk=trade_in.pk)

        sale = Sales.objects.get(pk=sale.pk)
        assert sale.net_trade_in_id is None
        assert sale.net_trade_in_enabled is False

    def test_missing(self, db):
        with pytest.raises(NetTradeInNotFoundError):
            delete_trade_in(pk='00000000-0000-0000-0000-000000000000')
