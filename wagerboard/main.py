"""Entry point for the wagerboard service."""

from __future__ import annotations

import logging


def main() -> None:
    import uvicorn

    from wagerboard.config import load_settings
    from wagerboard.server import create_app

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.api_key:
        logging.getLogger(__name__).warning(
            "No API key! Add RAINBET_API_KEY to .env"
        )

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
