__all__ = [
    "ACCEPT_VERSION_HEADER",
    "AUTHORIZATION_HEADER",
    "DEFAULT_API_URL",
    "DEFAULT_API_VERSION",
    "DEFAULT_METHOD",
    "TOTAL_RESPONSE_HEADER",
]

DEFAULT_API_URL = "https://api.unsplash.com"
DEFAULT_API_VERSION = "v1"
DEFAULT_METHOD = "GET"

ACCEPT_VERSION_HEADER = "Accept-Version"
AUTHORIZATION_HEADER = "Authorization"

# Paginated list endpoints report the full item count here
TOTAL_RESPONSE_HEADER = "x-total"
