"""
微信推送消息相关Schema
"""
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Tuple

from pydantic import BaseModel


class IncomingMessage(Mapping):
    """
    微信推送的消息字段，键名不区分大小写
    
    构造后只读，存储时键名统一转为小写，查询时同样转为小写，
    不存在的字段通过 get() 返回 None。
    """
    
    def __init__(self, fields: Iterable[Tuple[str, str]] = ()):
        self._fields: Dict[str, str] = {}
        for name, value in fields:
            self._fields[name.lower()] = value
    
    def __getitem__(self, name: str) -> str:
        if not isinstance(name, str):
            raise KeyError(name)
        return self._fields[name.lower()]
    
    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._fields
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)
    
    def __len__(self) -> int:
        return len(self._fields)
    
    def __repr__(self) -> str:
        return f"IncomingMessage({self._fields!r})"
    
    def to_dict(self) -> Dict[str, str]:
        """返回全部字段的副本"""
        return dict(self._fields)


class WechatRequest(BaseModel):
    """微信服务器回调请求（查询参数 + 原始请求体）"""
    signature: Optional[str] = None
    timestamp: Optional[str] = None
    nonce: Optional[str] = None
    echostr: Optional[str] = None
    body: Optional[bytes] = None
