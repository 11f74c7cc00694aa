import logging
import traceback
from logging import Logger

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, BackgroundTasks, Depends

from word_cloud_services.common.models.request_models import RenderTaskArgs
from word_cloud_services.common.models.response_models import Response
from .container import Application
from .service import IndicatorCloudService


def create_logger():
    logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                        datefmt="%Y-%m-%dT%H:%M:%S")
    cloud_logger = logging.getLogger(__name__)
    cloud_logger.setLevel(logging.DEBUG)
    return cloud_logger


cloud_controller = APIRouter()


@cloud_controller.get("/indicator-cloud-service/status", tags=["indicator-cloud"], response_model=Response)
async def check_status():
    return Response(message="I am alive", statusCode=200, status="success")


@cloud_controller.post("/indicator-cloud/render-task", tags=["indicator-cloud"], response_model=Response)
@inject
async def render_clouds(args: RenderTaskArgs,
                        background_tasks: BackgroundTasks,
                        cloud_service: IndicatorCloudService = Depends(Provide[
                            Application.services.indicator_cloud_service]),
                        cloud_logger: Logger = Depends(create_logger)):
    try:
        known_clouds = [spec.name for spec in cloud_service.cloud_specs]
        unknown_clouds = [name for name in (args.clouds or []) if name not in known_clouds]
        if len(unknown_clouds):
            return Response(message=f"unknown clouds: {', '.join(unknown_clouds)}",
                            status="failed",
                            statusCode=412)

        cloud_logger.info(f"Drawing clouds: {args.clouds or known_clouds}")
        background_tasks.add_task(cloud_service.run, args.clouds)
        cloud_logger.info("Running in background ...")

        return Response(message="ok", statusCode=200, status="success")

    except Exception as e:
        traceback.print_exc()
        cloud_logger.error(f"Error: {e}")
        return Response(message=f"error: {e}", statusCode=500, status="failed")
