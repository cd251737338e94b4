"""
微信公众平台回调API
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.responses import PlainTextResponse
from wechat_plugin.core.config import settings
from wechat_plugin.schemas.wechat_message import WechatRequest
from wechat_plugin.schemas.wechat_outcome import OutcomeKind, WechatOutcome
from wechat_plugin.services.wechat_handler import WechatMessageHandler
from wechat_plugin.services.wechat_hooks import WechatHooks

router = APIRouter(tags=["微信回调"])

# 处理结果 -> HTTP状态码
OUTCOME_STATUS = {
    OutcomeKind.DENIED: status.HTTP_403_FORBIDDEN,
    OutcomeKind.MISSING_PAYLOAD: status.HTTP_400_BAD_REQUEST,
    OutcomeKind.OWNERSHIP_ECHO: status.HTTP_200_OK,
    OutcomeKind.RESPONDED: status.HTTP_200_OK,
    OutcomeKind.NO_ACTION: status.HTTP_200_OK,
}


def get_wechat_hooks() -> WechatHooks:
    """
    获取消息钩子依赖
    
    宿主应用通过 app.dependency_overrides[get_wechat_hooks] 替换为自己的钩子对象
    """
    return WechatHooks()


def get_wechat_handler(hooks=Depends(get_wechat_hooks)) -> WechatMessageHandler:
    """获取回调处理对象依赖"""
    if not settings.WECHAT_TOKEN:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="微信Token未配置"
        )
    return WechatMessageHandler(settings.WECHAT_TOKEN, hooks=hooks, log_file_path=settings.WECHAT_LOG_FILE)


def to_http_response(outcome: WechatOutcome) -> PlainTextResponse:
    """将处理结果转换为HTTP响应"""
    media_type = "application/xml" if outcome.kind == OutcomeKind.RESPONDED else "text/plain"
    return PlainTextResponse(
        content=outcome.body,
        status_code=OUTCOME_STATUS[outcome.kind],
        media_type=media_type
    )


def build_wechat_request(request: Request, body: Optional[bytes] = None) -> WechatRequest:
    """从查询参数和请求体构造回调请求"""
    query_params = request.query_params
    return WechatRequest(
        signature=query_params.get("signature"),
        timestamp=query_params.get("timestamp"),
        nonce=query_params.get("nonce"),
        echostr=query_params.get("echostr"),
        body=body
    )


@router.get(settings.WECHAT_CALLBACK_PATH)
async def wechat_callback_verify(
    request: Request,
    handler: WechatMessageHandler = Depends(get_wechat_handler)
):
    """
    微信服务器配置验证（GET请求）
    微信首次配置时会调用此接口进行验证
    """
    wechat_request = build_wechat_request(request)
    return to_http_response(handler.handle(wechat_request))


@router.post(settings.WECHAT_CALLBACK_PATH)
async def wechat_callback_message(
    request: Request,
    handler: WechatMessageHandler = Depends(get_wechat_handler)
):
    """
    接收微信消息和事件推送（POST请求）
    """
    body = await request.body()
    wechat_request = build_wechat_request(request, body or None)
    return to_http_response(handler.handle(wechat_request))
