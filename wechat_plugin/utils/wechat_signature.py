"""
微信签名验证工具
"""
import hashlib
from typing import List, Optional


def make_signature(token: str, timestamp: str, nonce: str) -> str:
    """
    按微信规则计算签名
    
    Args:
        token: 服务器配置中的Token
        timestamp: 时间戳
        nonce: 随机字符串
    
    Returns:
        str: sha1签名（小写十六进制）
    """
    # 将token、timestamp、nonce按字典序排序
    tmp_arr: List[str] = [token, timestamp, nonce]
    tmp_arr.sort()
    
    # 拼接字符串并sha1加密
    tmp_str = ''.join(tmp_arr)
    return hashlib.sha1(tmp_str.encode('utf-8')).hexdigest()


def verify_signature(
    token: str,
    timestamp: Optional[str],
    nonce: Optional[str],
    signature: Optional[str]
) -> bool:
    """
    验证微信服务器请求的签名
    
    Args:
        token: 服务器配置中的Token
        timestamp: 时间戳
        nonce: 随机字符串
        signature: 微信传来的签名
    
    Returns:
        bool: 验证是否通过，缺少任一签名参数时返回False
    """
    if signature is None or timestamp is None or nonce is None:
        return False
    
    # 与signature比对
    return make_signature(token, timestamp, nonce) == signature
