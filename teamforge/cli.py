"""Command line entry for TeamForge."""

from __future__ import annotations

import uvicorn

from teamforge.core.config import settings
from teamforge.core.logging_config import configure_logging


def run_server() -> None:
    configure_logging()
    uvicorn.run("teamforge.api.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
