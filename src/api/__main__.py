"""Run the destinations API with uvicorn: ``python -m src.api``."""
from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv


def main() -> None:
    load_dotenv()

    from src.api.dependencies import get_settings

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("src.api.app:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
