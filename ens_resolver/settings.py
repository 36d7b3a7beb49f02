import sys

# Bounds applied to TTLs read from the registry, in milliseconds
DEFAULT_MIN_TTL = 60 * 60 * 1000
DEFAULT_MAX_TTL = sys.maxsize

DEFAULT_NETWORK = "mainnet"
INFURA_URL_TEMPLATE = "https://{network}.infura.io/v3/{credential}"
DEFAULT_HTTP_REQUEST_TIMEOUT = 10
