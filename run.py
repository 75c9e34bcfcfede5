"""Entry point for the Risale reading bot (local console)."""

import asyncio
import logging
import sys
from pathlib import Path

from risalebot.config import load_config
from risalebot.models.response import RenderedResponse
from risalebot.reading.handler import ReadingHandler

logger = logging.getLogger(__name__)


def _print_response(response: RenderedResponse) -> None:
    print(response.text)
    if response.buttons:
        print()
        print(" | ".join(f"[{button.title}]" for button in response.buttons))
    print()


async def _answer(handler: ReadingHandler, messages: list[str]) -> None:
    for message in messages:
        _print_response(await handler.handle_text(message))


async def _interactive(handler: ReadingHandler) -> None:
    while line := await asyncio.to_thread(sys.stdin.readline):
        message = line.strip()
        if message:
            _print_response(await handler.handle_text(message))


def main() -> None:
    """Load configuration and answer messages from argv or stdin."""
    config = load_config()

    logging.basicConfig(
        level=getattr(logging, config.app.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not Path(config.storage.data_dir).exists():
        logger.warning("Data directory %s does not exist", config.storage.data_dir)

    handler = ReadingHandler.from_config(config)

    if len(sys.argv) > 1:
        asyncio.run(_answer(handler, [" ".join(sys.argv[1:])]))
    else:
        asyncio.run(_interactive(handler))


if __name__ == "__main__":
    main()
