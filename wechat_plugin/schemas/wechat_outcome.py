"""
回调处理结果Schema
"""
from enum import Enum

from pydantic import BaseModel

DENIED_BODY = "签名验证失败"
MISSING_PAYLOAD_BODY = "缺少数据"


class OutcomeKind(str, Enum):
    """处理结果类型"""
    DENIED = "denied"                  # 签名验证失败
    OWNERSHIP_ECHO = "ownership_echo"  # 网址接入验证，原样返回echostr
    MISSING_PAYLOAD = "missing_payload"
    RESPONDED = "responded"            # 钩子返回了被动回复
    NO_ACTION = "no_action"


class WechatOutcome(BaseModel):
    """一次回调的处理结果，由HTTP层决定如何结束请求"""
    kind: OutcomeKind
    body: str = ""
    
    @classmethod
    def denied(cls) -> "WechatOutcome":
        return cls(kind=OutcomeKind.DENIED, body=DENIED_BODY)
    
    @classmethod
    def ownership_echo(cls, echostr: str) -> "WechatOutcome":
        return cls(kind=OutcomeKind.OWNERSHIP_ECHO, body=echostr)
    
    @classmethod
    def missing_payload(cls) -> "WechatOutcome":
        return cls(kind=OutcomeKind.MISSING_PAYLOAD, body=MISSING_PAYLOAD_BODY)
    
    @classmethod
    def responded(cls, body: str) -> "WechatOutcome":
        return cls(kind=OutcomeKind.RESPONDED, body=body)
    
    @classmethod
    def no_action(cls) -> "WechatOutcome":
        return cls(kind=OutcomeKind.NO_ACTION)
