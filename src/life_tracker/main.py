"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from life_tracker.api.app import create_app
from life_tracker.config import Settings
from life_tracker.containers import build_container


def main() -> None:
    """Run the API server."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
