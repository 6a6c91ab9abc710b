"""Entry point for running the image host.

Usage:
    python -m imagehost
"""

import uvicorn

from imagehost.config import get_settings


def main() -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "imagehost.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
