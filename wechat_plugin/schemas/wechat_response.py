"""
被动回复消息Schema

各类型回复按固定XML模板渲染，CreateTime 取渲染时的时间。
字段值原样填入 CDATA，不做转义，调用方需自行保证内容中不含 "]]>"。
"""
import time
from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel

TEXT_TEMPLATE = """<xml>
  <ToUserName><![CDATA[{to_user}]]></ToUserName>
  <FromUserName><![CDATA[{from_user}]]></FromUserName>
  <CreateTime>{create_time}</CreateTime>
  <MsgType><![CDATA[text]]></MsgType>
  <Content><![CDATA[{content}]]></Content>
  <FuncFlag>{func_flag}</FuncFlag>
</xml>"""

MUSIC_TEMPLATE = """<xml>
  <ToUserName><![CDATA[{to_user}]]></ToUserName>
  <FromUserName><![CDATA[{from_user}]]></FromUserName>
  <CreateTime>{create_time}</CreateTime>
  <MsgType><![CDATA[music]]></MsgType>
  <Music>
    <Title><![CDATA[{title}]]></Title>
    <Description><![CDATA[{description}]]></Description>
    <MusicUrl><![CDATA[{music_url}]]></MusicUrl>
    <HQMusicUrl><![CDATA[{hq_music_url}]]></HQMusicUrl>
  </Music>
  <FuncFlag>{func_flag}</FuncFlag>
</xml>"""

NEWS_TEMPLATE = """<xml>
  <ToUserName><![CDATA[{to_user}]]></ToUserName>
  <FromUserName><![CDATA[{from_user}]]></FromUserName>
  <CreateTime>{create_time}</CreateTime>
  <MsgType><![CDATA[news]]></MsgType>
  <ArticleCount>{article_count}</ArticleCount>
  <Articles>
    {articles}
  </Articles>
  <FuncFlag>{func_flag}</FuncFlag>
</xml>"""

NEWS_ITEM_TEMPLATE = """<item>
  <Title><![CDATA[{title}]]></Title>
  <Description><![CDATA[{description}]]></Description>
  <PicUrl><![CDATA[{pic_url}]]></PicUrl>
  <Url><![CDATA[{url}]]></Url>
</item>"""


class WechatResponse(BaseModel, ABC):
    """被动回复消息基类"""
    to_user: str
    from_user: str
    func_flag: int = 0  # 设为1时星标刚收到的消息
    
    @abstractmethod
    def render(self) -> str:
        """渲染为回复给微信服务器的XML"""
    
    def __str__(self) -> str:
        return self.render()


class TextResponse(WechatResponse):
    """文本消息"""
    content: str
    
    def render(self) -> str:
        return TEXT_TEMPLATE.format(
            to_user=self.to_user,
            from_user=self.from_user,
            create_time=int(time.time()),
            content=self.content,
            func_flag=self.func_flag
        )


class MusicResponse(WechatResponse):
    """音乐消息"""
    title: str
    description: str
    music_url: str
    hq_music_url: str  # 高质量音乐链接，Wi-Fi 环境下优先使用
    
    def render(self) -> str:
        return MUSIC_TEMPLATE.format(
            to_user=self.to_user,
            from_user=self.from_user,
            create_time=int(time.time()),
            title=self.title,
            description=self.description,
            music_url=self.music_url,
            hq_music_url=self.hq_music_url,
            func_flag=self.func_flag
        )


class NewsResponseItem(BaseModel):
    """单条图文，只能组合进 NewsResponse 发送"""
    title: str
    description: str
    pic_url: str
    url: str
    
    def render(self) -> str:
        return NEWS_ITEM_TEMPLATE.format(
            title=self.title,
            description=self.description,
            pic_url=self.pic_url,
            url=self.url
        )
    
    def __str__(self) -> str:
        return self.render()


class NewsResponse(WechatResponse):
    """图文消息"""
    items: List[NewsResponseItem] = []
    
    def render(self) -> str:
        return NEWS_TEMPLATE.format(
            to_user=self.to_user,
            from_user=self.from_user,
            create_time=int(time.time()),
            article_count=len(self.items),
            articles=''.join(item.render() for item in self.items),
            func_flag=self.func_flag
        )
