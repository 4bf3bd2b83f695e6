"""Run the API server: ``python -m xrpl_credentials``."""

from __future__ import annotations

import logging

import uvicorn

from xrpl_credentials.api import create_app
from xrpl_credentials.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    logging.getLogger("xrpl_credentials").info(
        "API listening on http://localhost:%s", settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
