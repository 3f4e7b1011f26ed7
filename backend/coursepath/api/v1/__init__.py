"""
API v1 版本路由
统一导出所有 v1 版本的路由
"""

from fastapi import APIRouter

from coursepath.api.v1.endpoints import paths

# 创建 API v1 路由器
api_router = APIRouter()

# 注册所有端点路由
api_router.include_router(paths.router)

__all__ = ["api_router"]
