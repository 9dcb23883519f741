"""Services for vehicle inventory business logic."""

from .exceptions import InventoryServiceError, VehicleNotFoundError, InvalidFloorPlanError
from .sales_status import SaleEvent, derive_vehicle_sales_status, apply_sale_event
from .vehicle_management import (
    stock_prefix_for,
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
)

__all__ = [
    # Exceptions
    'InventoryServiceError',
    'VehicleNotFoundError',
    'InvalidFloorPlanError',
    # Sales status
    'SaleEvent',
    'derive_vehicle_sales_status',
    'apply_sale_event',
    # Vehicles
    'stock_prefix_for',
    'create_vehicle',
    'get_vehicle',
    'update_vehicle',
    'update_vehicle_costs',
    'mark_completed',
    'delete_vehicle',
    'get_sold_vehicles',
    'get_available_vehicles',
    'get_vehicle_by_sale',
    'get_sale_by_vehicle',
]
