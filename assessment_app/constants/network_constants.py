"""Network configuration constants for the bundled resource server."""

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8765
DEFAULT_FETCH_TIMEOUT_SECONDS: float = 10.0
RESOURCE_ROUTE_PREFIX: str = "/data"
