"""Server configuration constants."""

DEFAULT_API_PORT = 8000  # Default port for the FastAPI decision service
DEFAULT_LOG_LEVEL = "INFO"
