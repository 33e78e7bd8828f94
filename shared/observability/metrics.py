from prometheus_client import Counter, Histogram

# Business Metrics
ecomm_orders_created_total = Counter(
    "ecomm_orders_created_total",
    "Total orders placed",
)

ecomm_order_items_per_order = Histogram(
    "ecomm_order_items_per_order",
    "Number of line items per placed order",
    buckets=(1, 2, 3, 5, 10, 20, 50),
)

ecomm_order_transitions_total = Counter(
    "ecomm_order_transitions_total",
    "Order lifecycle transitions",
    ["transition"]  # Labels: 'paid', 'delivered'
)

ecomm_auth_failures_total = Counter(
    "ecomm_auth_failures_total",
    "Rejected requests at the auth gate",
    ["reason"]  # Labels: 'missing', 'expired', 'invalid', 'failed', 'user_not_found', 'not_admin'
)
