"""
消息钩子

WechatHooks 是宿主应用提供给 WechatMessageHandler 的能力对象，
每种消息/事件对应一个钩子方法，入参为 WechatContext，返回被动回复或 None。
宿主可以继承 WechatHooks 重写需要的方法，也可以提供任何实现了部分钩子方法的对象，
未实现的钩子视为空操作。
"""
from typing import Dict, List, Optional, Union

from wechat_plugin.schemas.wechat_message import IncomingMessage
from wechat_plugin.schemas.wechat_response import (
    MusicResponse,
    NewsResponse,
    NewsResponseItem,
    TextResponse,
    WechatResponse,
)

WELCOME_TEXT = "Welcome to shoplist!"


class WechatContext:
    """钩子可用的请求数据访问和回复构造接口"""
    
    def __init__(self, message: IncomingMessage):
        self.message = message
    
    def get_request_data(self, param: Optional[str] = None) -> Union[Dict[str, str], str, None]:
        """
        获取本次请求中的参数，不区分大小写
        
        Args:
            param: 参数名，为None时返回完整的请求数据
        
        Returns:
            参数值，参数不存在时返回None
        """
        if param is None:
            return self.message.to_dict()
        return self.message.get(param)
    
    def response_text(self, content: str, func_flag: int = 0) -> TextResponse:
        """回复文本消息"""
        return TextResponse(
            to_user=self._reply_to_user(),
            from_user=self._reply_from_user(),
            content=content,
            func_flag=func_flag
        )
    
    def response_music(
        self,
        title: str,
        description: str,
        music_url: str,
        hq_music_url: str,
        func_flag: int = 0
    ) -> MusicResponse:
        """
        回复音乐消息
        
        Args:
            title: 音乐标题
            description: 音乐描述
            music_url: 音乐链接
            hq_music_url: 高质量音乐链接，Wi-Fi 环境下优先使用
            func_flag: 默认为0，设为1时星标刚才收到的消息
        """
        return MusicResponse(
            to_user=self._reply_to_user(),
            from_user=self._reply_from_user(),
            title=title,
            description=description,
            music_url=music_url,
            hq_music_url=hq_music_url,
            func_flag=func_flag
        )
    
    def response_news(self, items: List[NewsResponseItem], func_flag: int = 0) -> NewsResponse:
        """回复图文消息，items 按顺序组成图文列表"""
        return NewsResponse(
            to_user=self._reply_to_user(),
            from_user=self._reply_from_user(),
            items=list(items),
            func_flag=func_flag
        )
    
    # 回复时收发双方互换
    def _reply_to_user(self) -> str:
        return self.message.get("fromusername") or ""
    
    def _reply_from_user(self) -> str:
        return self.message.get("tousername") or ""


class WechatHooks:
    """默认钩子实现，除 on_text 外均为空操作"""
    
    def on_subscribe(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """用户关注时触发"""
        return None
    
    def on_unsubscribe(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """用户取消关注时触发"""
        return None
    
    def on_scan(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """已关注用户扫描带参数二维码时触发"""
        return None
    
    def on_event_location(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """上报地理位置事件时触发"""
        return None
    
    def on_click(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """点击自定义菜单时触发"""
        return None
    
    def on_text(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """收到文本消息时触发"""
        return ctx.response_text(WELCOME_TEXT)
    
    def on_image(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """收到图片消息时触发"""
        return None
    
    def on_location(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """收到地理位置消息时触发"""
        return None
    
    def on_link(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """收到链接消息时触发"""
        return None
    
    def on_voice(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """收到语音消息时触发"""
        return None
    
    def on_unknown(self, ctx: WechatContext) -> Optional[WechatResponse]:
        """收到未知类型消息时触发"""
        return None
