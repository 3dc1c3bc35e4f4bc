# This project was developed with assistance from AI tools.
"""Run the API with uvicorn: ``python -m mortgage_api`` or ``bc-mortgage-api``."""

import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "mortgage_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
