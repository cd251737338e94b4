"""
测试微信签名验证
"""
import hashlib

import pytest

from wechat_plugin.utils.wechat_signature import make_signature, verify_signature

TOKEN = "shoplist_token"
TIMESTAMP = "1380000000"
NONCE = "nonce123"


def test_make_signature_matches_sorted_sha1():
    """签名为字典序排序后拼接的sha1"""
    expected = hashlib.sha1("".join(sorted([TOKEN, TIMESTAMP, NONCE])).encode("utf-8")).hexdigest()
    assert make_signature(TOKEN, TIMESTAMP, NONCE) == expected


def test_make_signature_independent_of_argument_order():
    assert make_signature("b", "a", "c") == hashlib.sha1(b"abc").hexdigest()


def test_verify_signature_accepts_valid_signature():
    signature = make_signature(TOKEN, TIMESTAMP, NONCE)
    assert verify_signature(TOKEN, TIMESTAMP, NONCE, signature) is True


@pytest.mark.parametrize("field", ["token", "timestamp", "nonce"])
def test_verify_signature_rejects_single_character_change(field):
    """任一输入改动一个字符即验证失败"""
    signature = make_signature(TOKEN, TIMESTAMP, NONCE)
    values = {"token": TOKEN, "timestamp": TIMESTAMP, "nonce": NONCE}
    values[field] = values[field][:-1] + ("x" if values[field][-1] != "x" else "y")
    assert verify_signature(values["token"], values["timestamp"], values["nonce"], signature) is False


def test_verify_signature_is_case_sensitive():
    signature = make_signature(TOKEN, TIMESTAMP, NONCE)
    assert verify_signature(TOKEN, TIMESTAMP, NONCE, signature.upper()) is False


@pytest.mark.parametrize(
    "timestamp, nonce, signature",
    [
        (None, NONCE, "sig"),
        (TIMESTAMP, None, "sig"),
        (TIMESTAMP, NONCE, None),
        (None, None, None),
    ]
)
def test_verify_signature_missing_params_returns_false(timestamp, nonce, signature):
    """缺少签名参数时返回False而不是抛出异常"""
    assert verify_signature(TOKEN, timestamp, nonce, signature) is False
