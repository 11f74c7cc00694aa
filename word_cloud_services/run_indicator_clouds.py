""" Draws the configured indicator clouds once

Usage:
    python -m word_cloud_services.run_indicator_clouds [cloud names...]
"""
import asyncio
import logging
import sys
from logging import Logger
from typing import List, Optional


def create_logger():
    logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                        datefmt="%Y-%m-%dT%H:%M:%S")
    logger = logging.getLogger(__name__)
    logger.setLevel(logging.DEBUG)
    return logger


async def run_clouds(app_config: dict,
                     cloud_names: Optional[List[str]] = None,
                     logger: Optional[Logger] = None):
    logger = logger or create_logger()
    from .indicator_cloud.app.container import Application

    container = Application()
    container.config.from_dict(app_config)
    await container.init_resources()
    try:
        cloud_service = await container.services.indicator_cloud_service.async_()
        rendered = await cloud_service.run(cloud_names)
        for name, items in rendered.items():
            logger.info(f"{name}: {len(items)} words")
        return rendered
    finally:
        await container.shutdown_resources()


def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    from .indicator_cloud.app.config import config

    asyncio.run(run_clouds(config, argv or None))


if __name__ == "__main__":
    main()
