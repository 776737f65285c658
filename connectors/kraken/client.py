"""
Kraken REST 客户端

封装 Kraken 公共/私有 REST API:
- 方法名校验 (封闭集合)
- nonce 生成 + HMAC-SHA512 签名
- 响应/错误归一化

不做限流、重试和缓存，重试策略由调用方决定。

API 文档: https://docs.kraken.com/rest/
"""
import logging
from typing import Any, Dict, Mapping, Optional, Union

from connectors.kraken.auth import KrakenAuth
from connectors.kraken.methods import (
    PrivateMethod,
    PublicMethod,
    resolve_method,
    resolve_private,
    resolve_public,
)
from connectors.kraken.nonce import NonceGenerator
from connectors.kraken.request import RequestBuilder, RequestEnvelope
from connectors.kraken.response import ApiOutcome, classify
from connectors.kraken.transport import AiohttpTransport, ConnectionPolicy

logger = logging.getLogger(__name__)


class KrakenClient:
    """
    Kraken REST API 客户端

    使用示例:
    ```python
    async with KrakenClient("your_key", "your_base64_secret") as kraken:
        server_time = await kraken.api("Time")
        balance = await kraken.api("Balance")
        ticker = await kraken.api("Ticker", {"pair": "XBTUSD"})
    ```

    每次调用要么返回 result，要么抛出一个 KrakenError 子类:
    UnknownMethodError / ConfigurationError / TransportError /
    MalformedResponseError / ApiError
    """

    # 固定值，不允许调用方覆盖
    BASE_URL = "https://api.kraken.com"
    API_VERSION = "0"

    DEFAULT_TIMEOUT = 5.0  # 秒

    def __init__(
        self,
        key: str = "",
        secret: str = "",
        otp: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connection_policy: Optional[ConnectionPolicy] = None,
        transport: Any = None,
    ):
        """
        Args:
            key: API Key
            secret: API Secret (Base64)
            otp: 两步验证密码 (可选)
            timeout: 请求超时 (秒)
            connection_policy: 连接策略 (keep-alive / 代理)
            transport: 自定义传输层 (需提供 post()/close() 协程)
        """
        self._timeout = timeout
        self._auth = KrakenAuth(api_key=key, api_secret=secret)
        self._nonces = NonceGenerator()
        self._builder = RequestBuilder(
            base_url=self.BASE_URL,
            version=self.API_VERSION,
            auth=self._auth,
            nonces=self._nonces,
            otp=otp,
        )
        self._transport = transport or AiohttpTransport(connection_policy)

    @classmethod
    def from_settings(cls, settings) -> "KrakenClient":
        """从 Settings 创建客户端"""
        policy = ConnectionPolicy(
            keep_alive=settings.KRAKEN_KEEP_ALIVE,
            proxy_url=settings.KRAKEN_PROXY or None,
        )
        return cls(
            key=settings.KRAKEN_API_KEY,
            secret=settings.KRAKEN_API_SECRET,
            otp=settings.KRAKEN_OTP,
            timeout=settings.KRAKEN_TIMEOUT_SECONDS,
            connection_policy=policy,
        )

    @property
    def timeout(self) -> float:
        """请求超时 (秒)，构造后不可修改"""
        return self._timeout

    # ==================== 对外接口 ====================

    async def api(
        self,
        method: Union[str, PublicMethod, PrivateMethod],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        调用公共或私有 API

        Args:
            method: API 方法名 (如 "Time", "Balance")
            params: 请求参数

        Returns:
            响应中的 result 字段

        Raises:
            UnknownMethodError: 方法名无效 (不会发出请求)
        """
        resolved = resolve_method(method)
        if isinstance(resolved, PublicMethod):
            return await self.public_method(resolved, params)
        return await self.private_method(resolved, params)

    async def public_method(
        self,
        method: Union[str, PublicMethod],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """调用公共 API"""
        envelope = self._builder.build_public(resolve_public(method), params)
        outcome = await self._send(envelope)
        return outcome.unwrap()

    async def private_method(
        self,
        method: Union[str, PrivateMethod],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """调用私有 API (需要 key/secret)"""
        envelope = self._builder.build_private(resolve_private(method), params)
        outcome = await self._send(envelope)
        return outcome.unwrap()

    # ==================== HTTP 请求 ====================

    async def _send(self, envelope: RequestEnvelope) -> ApiOutcome:
        """发送请求并分类响应"""
        logger.debug(
            f"POST {envelope.path} params={list(envelope.params)} "
            f"headers={headers_for_log(envelope.headers)}"
        )
        raw = await self._transport.post(
            envelope.url,
            envelope.headers,
            envelope.body,
            self._timeout,
        )

        outcome = classify(raw)
        if not outcome.ok:
            logger.warning(f"Kraken {envelope.path} 失败: {outcome.error.message}")
        return outcome

    # ==================== 连接管理 ====================

    async def close(self) -> None:
        """释放传输层资源"""
        await self._transport.close()

    async def __aenter__(self) -> "KrakenClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    def __repr__(self) -> str:
        # 不输出 secret
        key = self._auth.api_key
        masked = f"{key[:4]}***" if key else ""
        return f"KrakenClient(key={masked!r}, timeout={self._timeout})"


def headers_for_log(headers: Dict[str, str]) -> Dict[str, str]:
    """隐藏签名头后的请求头 (用于调试输出)"""
    return {
        k: ("***" if k in ("API-Key", "API-Sign") else v)
        for k, v in headers.items()
    }
