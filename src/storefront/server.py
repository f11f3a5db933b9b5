"""Storefront HTTP server runner.

Usage:
    python -m storefront.server                  # Host/port from settings
    python -m storefront.server --port 8080 --reload
"""

import argparse

import uvicorn

from storefront.shared.config import get_settings


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Storefront HTTP server")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    args = parser.parse_args()

    uvicorn.run(
        "storefront.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
