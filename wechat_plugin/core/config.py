"""
应用配置文件
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """应用配置"""
    
    # 应用基本配置
    APP_NAME: str = "WeChat Plugin"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True
    
    # 微信公众号配置
    WECHAT_TOKEN: Optional[str] = None  # 服务器配置中的Token
    WECHAT_CALLBACK_PATH: str = "/api/wechat/callback"  # 公众平台中填写的服务器地址路径
    
    # 调试日志文件路径，为空时不写入日志
    WECHAT_LOG_FILE: Optional[str] = None
    
    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
