from .setup import configure_logging, setup_observability
from .metrics import (
    ecomm_orders_created_total,
    ecomm_order_items_per_order,
    ecomm_order_transitions_total,
    ecomm_auth_failures_total,
)
