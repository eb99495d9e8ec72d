import logging

from fastapi import FastAPI
from app.core.config import get_settings
from app.core.errors import MissingParameterError, missing_parameter_handler
from app.core.logging_config import setup_logging
from app.core.middleware import AllowOriginMiddleware
from app.api import endpoints
from app.services.hierarchy_service import hierarchy_service

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    # 初始化学校层级数据集
    logger.info("[Startup] 初始化学校层级数据集...")
    hierarchy_service.initialize()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json"
    )

    app.add_exception_handler(MissingParameterError, missing_parameter_handler)

    # 跨域响应头
    app.add_middleware(AllowOriginMiddleware, allow_origin=settings.CORS_ALLOW_ORIGIN)

    # 注册路由
    app.include_router(endpoints.router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.VERSION,
            "docs": "/docs",
            "status": "running"
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
