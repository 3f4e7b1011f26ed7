"""
应用配置模块
使用 pydantic-settings 管理环境变量和配置
"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


DEFAULT_MERTON_API_BASE = "https://tms-mx.xueqiulearning.com/merton-backend/arrangement/detail"


class Settings(BaseSettings):
    """应用配置类"""

    # 应用基础配置
    app_name: str = Field(default="Merton 课程路径提取器", description="应用名称")
    app_version: str = Field(default="1.0.0", description="应用版本")
    debug: bool = Field(default=False, description="调试模式")
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="日志级别"
    )

    # Merton 接口配置（支持环境变量 MERTON_API_BASE, MERTON_REQUEST_TIMEOUT）
    merton_api_base: str = Field(
        default=DEFAULT_MERTON_API_BASE,
        alias="MERTON_API_BASE",
        description="路径详情接口地址，请求时在末尾拼接路径 ID"
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        alias="MERTON_REQUEST_TIMEOUT",
        description="单次路径请求超时时间（秒）"
    )
    accepted_codes: str = Field(
        default="0,200",
        description="视为成功的业务状态码列表，多个用逗号分隔"
    )

    # 上传配置
    max_upload_size: int = Field(
        default=50 * 1024 * 1024,
        description="本地 JSON 文件最大上传大小（字节）"
    )

    # CORS 配置
    cors_allow_origins: str = Field(
        default="http://localhost:3000",
        description="允许的 CORS 源列表，多个源用逗号分隔"
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="是否允许 CORS 凭证"
    )
    cors_allow_methods: List[str] = Field(
        default=["*"],
        description="允许的 HTTP 方法列表"
    )
    cors_allow_headers: List[str] = Field(
        default=["*"],
        description="允许的 HTTP 头列表"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,  # 允许同时使用字段名和别名
        extra="ignore"
    )

    @field_validator("accepted_codes", "cors_allow_origins", mode="before")
    @classmethod
    def parse_comma_list(cls, v):
        """列表形式的配置统一转成逗号分隔字符串"""
        if isinstance(v, (list, tuple)):
            return ",".join(str(item) for item in v)
        return v

    @field_validator("merton_api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def get_accepted_codes(self) -> List[int]:
        """获取视为成功的业务状态码列表"""
        codes = []
        for code in self.accepted_codes.split(","):
            code = code.strip()
            if code:
                codes.append(int(code))
        return codes

    def get_cors_origins_list(self) -> List[str]:
        """获取 CORS 源列表"""
        return [origin.strip() for origin in self.cors_allow_origins.split(",")]


# 创建全局配置实例
settings = Settings()


def get_cors_config() -> dict:
    """
    获取 CORS 配置字典

    Returns:
        CORS 配置字典，可直接用于 FastAPI 的 CORSMiddleware
    """
    return {
        "allow_origins": settings.get_cors_origins_list(),
        "allow_credentials": settings.cors_allow_credentials,
        "allow_methods": settings.cors_allow_methods,
        "allow_headers": settings.cors_allow_headers,
    }
