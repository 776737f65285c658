"""
HTTP 传输层

只负责一次 POST 交换: 发送请求体，返回原始响应文本。
连接/超时/I/O 错误统一转换为 TransportError，不做重试。
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlparse

import aiohttp
from aiohttp_socks import ProxyConnector

from core.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionPolicy:
    """连接策略 (由调用方提供)"""
    keep_alive: bool = False  # False = 每个请求新建连接
    proxy_url: Optional[str] = None  # http:// 或 socks5://

    @property
    def proxy_display(self) -> str:
        """用于日志的代理地址 (隐藏账号密码)"""
        if not self.proxy_url:
            return "DIRECT"
        parsed = urlparse(self.proxy_url)
        return f"{parsed.hostname}:{parsed.port}"


class AiohttpTransport:
    """
    基于 aiohttp 的传输实现

    会话在第一次请求时创建，close() 释放。
    任何提供相同 post()/close() 协程的对象都可以替代它。
    """

    def __init__(self, policy: Optional[ConnectionPolicy] = None):
        self.policy = policy or ConnectionPolicy()
        self._session: Optional[aiohttp.ClientSession] = None

    def _create_connector(self) -> aiohttp.BaseConnector:
        force_close = not self.policy.keep_alive
        if self.policy.proxy_url:
            return ProxyConnector.from_url(self.policy.proxy_url, force_close=force_close)
        return aiohttp.TCPConnector(force_close=force_close)

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(connector=self._create_connector())
            logger.debug(f"创建 HTTP 会话 (代理: {self.policy.proxy_display})")
        return self._session

    async def post(
        self,
        url: str,
        headers: Dict[str, str],
        body: bytes,
        timeout: float,
    ) -> str:
        """
        发送 POST 请求

        Returns:
            原始响应文本

        Raises:
            TransportError: 连接失败、超时或其他 I/O 错误
        """
        session = self._get_session()
        try:
            async with session.post(
                url,
                data=body,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as resp:
                # 非 UTF-8 字节替换为 U+FFFD，交给分类器判定
                text = (await resp.read()).decode("utf-8", errors="replace")
                if resp.status != 200:
                    logger.warning(f"HTTP {resp.status}: {url}")
                return text

        except asyncio.TimeoutError:
            raise TransportError(f"请求超时 ({timeout}s): {url}", timeout=True)
        except (aiohttp.ClientError, OSError) as e:
            raise TransportError(f"网络错误: {e}")

    async def close(self) -> None:
        """关闭会话"""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
