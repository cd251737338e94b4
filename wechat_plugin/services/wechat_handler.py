"""
微信公众平台回调处理服务

处理流程：验证签名 -> 网址接入验证 -> 解析XML -> 按消息类型分发给钩子。
每一步的终止都以 WechatOutcome 返回，由HTTP层决定如何结束请求。
"""
from typing import Any, Optional

from wechat_plugin.core.logging import create_debug_logger
from wechat_plugin.schemas.wechat_message import IncomingMessage, WechatRequest
from wechat_plugin.schemas.wechat_outcome import WechatOutcome
from wechat_plugin.services.wechat_hooks import WechatContext, WechatHooks
from wechat_plugin.utils.wechat_signature import verify_signature
from wechat_plugin.utils.xml_parser import MissingPayloadError, parse_message

# 事件推送 Event 字段 -> 钩子方法名，值区分大小写
EVENT_HOOKS = {
    "subscribe": "on_subscribe",
    "unsubscribe": "on_unsubscribe",
    "SCAN": "on_scan",
    "LOCATION": "on_event_location",
    "CLICK": "on_click",
}

# 普通消息 MsgType 字段 -> 钩子方法名
MESSAGE_HOOKS = {
    "text": "on_text",
    "image": "on_image",
    "location": "on_location",
    "link": "on_link",
    "voice": "on_voice",
}


class WechatMessageHandler:
    """微信回调处理类"""
    
    def __init__(self, token: str, hooks: Optional[Any] = None, log_file_path: Optional[str] = None):
        """
        Args:
            token: 签名秘钥
            hooks: 宿主提供的钩子对象，默认使用 WechatHooks
            log_file_path: 调试日志文件路径，为None时不写入日志
        """
        self.token = token
        self.hooks = hooks if hooks is not None else WechatHooks()
        self.debug_log = create_debug_logger(log_file_path)
    
    def handle(self, request: WechatRequest) -> WechatOutcome:
        """
        处理一次回调请求
        
        Args:
            request: 回调请求的查询参数和请求体
        
        Returns:
            WechatOutcome: 处理结果
        """
        if not verify_signature(self.token, request.timestamp, request.nonce, request.signature):
            self.log("Signature fail!")
            return WechatOutcome.denied()
        
        if request.echostr is not None:
            self.log("Valid URL requested.")
            return WechatOutcome.ownership_echo(request.echostr)
        
        try:
            message = parse_message(request.body)
        except MissingPayloadError as e:
            self.log(f"No POST datas: {e}")
            return WechatOutcome.missing_payload()
        
        return self.dispatch(message)
    
    def dispatch(self, message: IncomingMessage) -> WechatOutcome:
        """
        分析消息类型，并分发给对应的钩子
        
        event 类型按 Event 字段再次分发，未识别的事件不触发任何钩子；
        其余未识别的消息类型交给 on_unknown。
        """
        msg_type = message.get("msgtype")
        
        if msg_type == "event":
            event = message.get("event")
            hook_name = EVENT_HOOKS.get(event)
            if hook_name is None:
                self.log(f"Unhandled event: {event}")
                return WechatOutcome.no_action()
        else:
            hook_name = MESSAGE_HOOKS.get(msg_type, "on_unknown")
        
        self.log(f"Dispatch {msg_type} to {hook_name}")
        
        hook = getattr(self.hooks, hook_name, None)
        if hook is None:
            return WechatOutcome.no_action()
        
        response = hook(WechatContext(message))
        if response is None:
            return WechatOutcome.no_action()
        
        return WechatOutcome.responded(response.render())
    
    def log(self, msg: str):
        """写入调试日志，未配置日志文件时忽略"""
        if self.debug_log is not None:
            self.debug_log.info(msg)
