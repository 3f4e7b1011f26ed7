"""
FastAPI 应用主入口
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coursepath.core.config import settings, get_cors_config
from coursepath.api.v1 import api_router


def configure_logging() -> None:
    """根据配置初始化日志格式和级别"""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def create_application() -> FastAPI:
    """
    创建并配置 FastAPI 应用

    Returns:
        配置好的 FastAPI 应用实例
    """
    configure_logging()

    # 创建 FastAPI 应用
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Merton 课程路径提取与对比 API",
        debug=settings.debug,
    )

    # 配置 CORS
    app.add_middleware(
        CORSMiddleware,
        **get_cors_config()
    )

    # 注册 API v1 路由
    app.include_router(api_router)

    @app.get("/")
    async def root():
        """根路径"""
        return {"message": "Merton 课程路径提取与对比 API"}

    @app.get("/health")
    async def health():
        """健康检查"""
        return {"status": "ok"}

    return app


# 创建应用实例
app = create_application()
