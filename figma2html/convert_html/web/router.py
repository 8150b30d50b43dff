from fastapi import APIRouter

from figma2html.convert_html.controller.convert_html_controller import (
    router as convert_html_router,
)
from figma2html.convert_html.controller.health_controller import (
    router as health_router,
)

router = APIRouter()
router.include_router(convert_html_router)
router.include_router(health_router)
