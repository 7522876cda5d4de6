"""Entry point for running the XO game via ``python -m xogame``."""

from __future__ import annotations

import logging
import os

import uvicorn


def main() -> None:
    """Start the FastAPI-powered XO web server."""

    host = os.environ.get("XO_HOST", "0.0.0.0")
    port = int(os.environ.get("XO_PORT", "8000"))
    log_level = os.environ.get("XO_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("xogame.ui:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
