"""
请求构造

组装 URL、请求头和表单编码的请求体，不做任何网络 I/O。
"""
import logging
import platform
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from connectors.kraken.auth import KrakenAuth, encode_params
from connectors.kraken.methods import PrivateMethod, PublicMethod
from connectors.kraken.nonce import NonceGenerator

logger = logging.getLogger(__name__)


USER_AGENT = (
    f"Mozilla/4.0 (compatible; Kraken Python bot; {sys.platform}; "
    f"Python/{platform.python_version()})"
)


@dataclass
class RequestEnvelope:
    """单次请求 (每次调用新建，不复用)"""
    url: str
    path: str
    params: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class RequestBuilder:
    """
    Kraken 请求构造器

    公共请求: /{version}/public/{method}
    私有请求: /{version}/private/{method}，附带 nonce/otp 与签名头
    """

    def __init__(
        self,
        base_url: str,
        version: str,
        auth: KrakenAuth,
        nonces: NonceGenerator,
        otp: Optional[str] = None,
    ):
        self._base_url = base_url
        self._version = version
        self._auth = auth
        self._nonces = nonces
        self._otp = otp

    def _path(self, scope: str, method: str) -> str:
        return f"/{self._version}/{scope}/{method}"

    def _envelope(
        self,
        path: str,
        params: Dict[str, Any],
        headers: Dict[str, str],
    ) -> RequestEnvelope:
        body = encode_params(params).encode("utf-8")
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/x-www-form-urlencoded",
            "Content-Length": str(len(body)),
            **headers,
        }
        return RequestEnvelope(
            url=f"{self._base_url}{path}",
            path=path,
            params=params,
            headers=headers,
            body=body,
        )

    def build_public(
        self,
        method: PublicMethod,
        params: Optional[Mapping[str, Any]] = None,
    ) -> RequestEnvelope:
        """构造公共请求"""
        path = self._path("public", method.value)
        return self._envelope(path, dict(params or {}), {})

    def build_private(
        self,
        method: PrivateMethod,
        params: Optional[Mapping[str, Any]] = None,
    ) -> RequestEnvelope:
        """
        构造私有请求

        调用方未提供 nonce 时自动注入；配置了 otp 时一并注入。
        签名覆盖完整参数 (含 nonce 和 otp)。

        Raises:
            ConfigurationError: Secret 无法解码
        """
        params = dict(params or {})
        path = self._path("private", method.value)

        if not params.get("nonce"):
            params["nonce"] = self._nonces.generate()

        if self._otp is not None:
            params["otp"] = self._otp

        signature = self._auth.sign(path, params, params["nonce"])
        logger.debug(f"签名请求 {path} nonce={params['nonce']}")

        return self._envelope(path, params, self._auth.get_headers(signature))
