from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from figma2html.convert_html.web.router import router as convert_html_router
from figma2html.core.exception.exceptions import ServiceException
from figma2html.core.log.logging import get_logging

logger = get_logging()

router = APIRouter()
router.include_router(convert_html_router)


async def service_exception_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.error_code.name, "message": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceException, service_exception_handler)
