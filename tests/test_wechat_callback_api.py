"""
测试微信回调API
"""
import pytest
from fastapi.testclient import TestClient

from main import app
from wechat_plugin.api.wechat_callback import get_wechat_hooks
from wechat_plugin.core.config import settings
from wechat_plugin.services.wechat_hooks import WechatHooks
from wechat_plugin.utils.wechat_signature import make_signature

TOKEN = "shoplist_token"
TIMESTAMP = "1380000000"
NONCE = "nonce123"
CALLBACK = settings.WECHAT_CALLBACK_PATH

TEXT_XML = (
    "<xml><ToUserName>A</ToUserName><FromUserName>B</FromUserName>"
    "<MsgType>text</MsgType><Content>hi</Content></xml>"
)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "WECHAT_TOKEN", TOKEN)
    monkeypatch.setattr(settings, "WECHAT_LOG_FILE", None)
    yield TestClient(app)
    app.dependency_overrides.clear()


def signed_params(**extra):
    params = {
        "signature": make_signature(TOKEN, TIMESTAMP, NONCE),
        "timestamp": TIMESTAMP,
        "nonce": NONCE,
    }
    params.update(extra)
    return params


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "token_configured": True}


def test_health_degraded_without_token(client, monkeypatch):
    monkeypatch.setattr(settings, "WECHAT_TOKEN", None)
    assert client.get("/health").json() == {"status": "degraded", "token_configured": False}


def test_root_reports_callback_path(client):
    assert client.get("/").json()["callback"] == CALLBACK


def test_get_echoes_echostr(client):
    response = client.get(CALLBACK, params=signed_params(echostr="challenge-123"))
    assert response.status_code == 200
    assert response.text == "challenge-123"


def test_get_with_bad_signature_is_forbidden(client):
    params = signed_params(echostr="challenge-123")
    params["signature"] = "bad"
    response = client.get(CALLBACK, params=params)
    assert response.status_code == 403
    assert response.text == "签名验证失败"


def test_post_without_signature_params_is_forbidden(client):
    response = client.post(CALLBACK, content=TEXT_XML)
    assert response.status_code == 403


def test_post_text_message_gets_welcome_reply(client):
    response = client.post(CALLBACK, params=signed_params(), content=TEXT_XML)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert "<ToUserName><![CDATA[B]]></ToUserName>" in response.text
    assert "<FromUserName><![CDATA[A]]></FromUserName>" in response.text
    assert "<Content><![CDATA[Welcome to shoplist!]]></Content>" in response.text


def test_post_without_body_is_missing_data(client):
    response = client.post(CALLBACK, params=signed_params())
    assert response.status_code == 400
    assert response.text == "缺少数据"


def test_post_unhandled_message_returns_empty_body(client):
    body = "<xml><MsgType>event</MsgType><Event>bogus</Event></xml>"
    response = client.post(CALLBACK, params=signed_params(), content=body)
    assert response.status_code == 200
    assert response.text == ""


def test_host_hooks_via_dependency_override(client):
    class SubscribeHooks(WechatHooks):
        def on_subscribe(self, ctx):
            return ctx.response_text("欢迎关注")
    
    app.dependency_overrides[get_wechat_hooks] = SubscribeHooks
    body = (
        "<xml><ToUserName>gh_shop</ToUserName><FromUserName>user_1</FromUserName>"
        "<MsgType>event</MsgType><Event>subscribe</Event></xml>"
    )
    response = client.post(CALLBACK, params=signed_params(), content=body.encode("utf-8"))
    assert response.status_code == 200
    assert "<Content><![CDATA[欢迎关注]]></Content>" in response.text
    assert "<ToUserName><![CDATA[user_1]]></ToUserName>" in response.text


def test_missing_token_configuration(client, monkeypatch):
    monkeypatch.setattr(settings, "WECHAT_TOKEN", None)
    response = client.get(CALLBACK, params=signed_params(echostr="x"))
    assert response.status_code == 500
    assert response.json()["detail"] == "微信Token未配置"
