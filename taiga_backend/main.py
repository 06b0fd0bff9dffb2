"""Decision service entry point for uvicorn."""

import os

import uvicorn

from taiga.config.server import DEFAULT_API_PORT
from taiga_backend.app_factory import create_app

# The global 'app' is what uvicorn looks for
app = create_app()


def main() -> None:
    """Run the service using uvicorn when executed directly."""
    port = int(os.getenv("TAIGA_API_PORT", str(DEFAULT_API_PORT)))
    uvicorn.run("taiga_backend.main:app", host="0.0.0.0", port=port, log_level="info")


if __name__ == "__main__":
    main()
