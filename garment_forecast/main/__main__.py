"""
Main module entry point.

This allows running the API as: python -m garment_forecast.main
"""

import uvicorn

from garment_forecast.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "garment_forecast.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
    )


if __name__ == "__main__":
    main()
