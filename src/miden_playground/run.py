# run.py
# Entry point. Config and wiring only, no logic lives here.
#
# Point PLAYGROUND_ENGINE at the module that exposes the engine's
# init()/execute(), e.g. in a .env file:
#
#   PLAYGROUND_ENGINE=miden_wasm
#   PLAYGROUND_INIT_POLICY=once
#   PLAYGROUND_LOG_LEVEL=DEBUG

import asyncio
import logging

from rich.logging import RichHandler

from miden_playground import display
from miden_playground.config import PlaygroundConfig
from miden_playground.console import PlaygroundConsole


def main() -> None:
    config = PlaygroundConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=display.console, rich_tracebacks=True)],
    )
    asyncio.run(PlaygroundConsole(config).run())


if __name__ == "__main__":
    main()
