import logging

import uvicorn
from fastapi import FastAPI

from . import controller
from .config import config
from .container import Application

logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                    datefmt="%Y-%m-%dT%H:%M:%S%z")
server_logger = logging.getLogger(__name__)
server_logger.setLevel(logging.DEBUG)


def create_app(app_config: dict = config) -> FastAPI:
    container = Application()
    container.config.from_dict(app_config)
    container.wire(modules=[controller])

    app = FastAPI()
    app.container = container
    app.include_router(controller.cloud_controller)

    @app.on_event("startup")
    async def startup_event():
        await container.init_resources()
        server_logger.info("Resources initialized.")

    @app.on_event("shutdown")
    async def shutdown_event():
        await container.shutdown_resources()

    return app


if __name__ == "__main__":
    log_config = uvicorn.config.LOGGING_CONFIG
    log_config["formatters"]["access"]["fmt"] = "%(asctime)s | %(levelname)s | %(funcName)s | %(message)s"
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s | %(levelname)s | %(funcName)s | %(message)s"
    uvicorn.run(create_app(), log_config=log_config, port=8086)
