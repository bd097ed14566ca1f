import asyncio
import logging
import os
import sys
from aiohttp import web

from servnt.dispatch import Dispatcher
from servnt.libs.config import CONFIG_FILE_NAME, Config
from servnt.libs.errors import ConfigException
from servnt.router import create_app

logger = logging.getLogger("servnt.server")

async def main(root: str | None = None):
    root = root or os.getcwd()
    config = Config.from_file(os.path.join(root, CONFIG_FILE_NAME))

    print(f"Serving app '{config.app.name} (v{config.app.version})'")

    # fails before any socket is opened
    dispatcher = Dispatcher.from_config(config, root)
    app = create_app(dispatcher)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, config.server.hostname, config.server.port)
    await site.start()

    logger.info("listening on http://%s:%d", config.server.hostname, config.server.port)

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()

def log_level(name: str | None) -> int:
    return logging.getLevelNamesMapping().get((name or "").upper(), logging.INFO)

def run():
    logging.basicConfig(
        level=log_level(os.environ.get("SERVNT_LOG_LEVEL")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        asyncio.run(main())
    except ConfigException as error:
        logger.error("invalid configuration: %s", error)
        sys.exit(1)
    except KeyboardInterrupt:
        pass

if __name__ == "__main__":
    run()
