"""
微信推送XML解析
"""
import xml.etree.ElementTree as ET
from typing import Optional, Union

from wechat_plugin.schemas.wechat_message import IncomingMessage


class MissingPayloadError(ValueError):
    """请求体缺失或无法解析"""


def _declares_doctype(body: bytes) -> bool:
    """只检查根节点之前的序言部分，CDATA 中的同名文本不受影响"""
    rest = body.lstrip(b"\xef\xbb\xbf").lstrip()
    while rest.startswith(b"<?") or rest.startswith(b"<!--"):
        end_marker = b"?>" if rest.startswith(b"<?") else b"-->"
        end = rest.find(end_marker)
        if end == -1:
            # 交给解析器报错
            return False
        rest = rest[end + len(end_marker):].lstrip()
    return rest[:9].upper() == b"<!DOCTYPE"


def parse_message(body: Optional[Union[bytes, str]]) -> IncomingMessage:
    """
    将微信推送的XML解析为字段映射
    
    根节点下的每个子节点对应一个字段，键名转为小写，
    CDATA 按普通文本处理，空节点的值为空字符串。
    
    Args:
        body: 原始请求体
    
    Returns:
        IncomingMessage: 字段映射
    
    Raises:
        MissingPayloadError: 请求体为空、不是合法XML或包含DOCTYPE声明
    """
    if body is None:
        raise MissingPayloadError("empty_body")
    
    if isinstance(body, str):
        body = body.encode('utf-8')
    
    if not body.strip():
        raise MissingPayloadError("empty_body")
    
    # 拒绝DTD，不做任何实体展开
    if _declares_doctype(body):
        raise MissingPayloadError("doctype_not_allowed")
    
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise MissingPayloadError(f"malformed_xml: {e}") from e
    
    return IncomingMessage((child.tag, child.text or "") for child in root)
