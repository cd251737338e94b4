"""
微信公众平台回调插件 - FastAPI应用主入口

回调地址由 WECHAT_CALLBACK_PATH 配置，Token 由 WECHAT_TOKEN 配置，
宿主应用通过 app.dependency_overrides[get_wechat_hooks] 注入自己的消息钩子。
"""
from fastapi import FastAPI
from wechat_plugin.core.config import settings
from wechat_plugin.api import wechat_callback

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="微信公众平台消息回调服务：签名验证、网址接入验证、消息分发与被动回复",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None
)

app.include_router(wechat_callback.router)


@app.get("/")
async def root():
    """服务信息，返回公众平台中应填写的回调路径"""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "callback": settings.WECHAT_CALLBACK_PATH
    }


@app.get("/health")
async def health_check():
    """健康检查，未配置Token时回调无法工作"""
    return {
        "status": "healthy" if settings.WECHAT_TOKEN else "degraded",
        "token_configured": bool(settings.WECHAT_TOKEN)
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
