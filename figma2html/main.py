from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from figma2html import __version__
from figma2html.core.config import get_setting
from figma2html.core.log.logging import get_logging
from figma2html.web.router import register_exception_handlers, router

settings = get_setting()

logger = get_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"{settings.APP_NAME} starting (environment={settings.ENVIRONMENT})")
    yield
    logger.info(f"{settings.APP_NAME} shutting down")


app = FastAPI(
    title="Figma2Html",
    description="Convert Figma documents into HTML and CSS",
    version=__version__,
    lifespan=lifespan,
)

# CORS 미들웨어 추가
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 및 예외 핸들러 등록
app.include_router(router)
register_exception_handlers(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        access_log=False,
    )
