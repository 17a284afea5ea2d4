"""
Prometheus Metrics for Product Registry Service.

Defines all metrics for monitoring request traffic and registry size.
"""

from prometheus_client import Counter, Histogram, Gauge

# API metrics
HTTP_REQUESTS_TOTAL = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

HTTP_REQUEST_DURATION = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)

# Registry metrics
PRODUCTS_TOTAL = Gauge(
    'products_total',
    'Number of products currently held in the registry'
)

PRODUCT_MUTATIONS = Counter(
    'product_mutations_total',
    'Successful registry mutations',
    ['operation']  # create, update, delete
)
