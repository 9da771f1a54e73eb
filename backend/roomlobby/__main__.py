"""Run the lobby API with uvicorn using configured host/port."""

from __future__ import annotations

import uvicorn

from roomlobby.core.config import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        "roomlobby.main:app",
        host=settings.lobby_app_host,
        port=settings.lobby_app_port,
        log_level=settings.lobby_log_level.lower(),
    )


if __name__ == "__main__":
    main()
