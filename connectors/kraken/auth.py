"""
Kraken 认证和签名工具

签名算法 (HMAC-SHA512):
    API-Sign = Base64(HMAC-SHA512(Base64Decode(secret), path + SHA256(nonce + postdata)))
"""
import base64
import binascii
import hashlib
import hmac
import logging
from typing import Any, Dict, Mapping, Union
from urllib.parse import urlencode

from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def encode_params(params: Mapping[str, Any]) -> str:
    """表单编码 (保持插入顺序)"""
    return urlencode(params)


class KrakenAuth:
    """
    Kraken API 认证管理器

    需要: api_key, api_secret (Base64 编码，Kraken 控制台生成)

    使用示例:
    ```python
    auth = KrakenAuth(api_key="your_key", api_secret="your_base64_secret")
    signature = auth.sign("/0/private/Balance", {"nonce": nonce}, nonce)
    headers = auth.get_headers(signature)
    ```
    """

    def __init__(self, api_key: str, api_secret: str):
        self.api_key = api_key
        self.api_secret = api_secret

    def _secret_bytes(self) -> bytes:
        """解码 Base64 Secret"""
        if not self.api_secret:
            raise ConfigurationError("API Secret 未配置")
        try:
            return base64.b64decode(self.api_secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConfigurationError(f"API Secret 不是有效的 Base64: {e}")

    def sign(self, path: str, params: Mapping[str, Any], nonce: Union[str, int]) -> str:
        """
        生成请求签名

        Args:
            path: 请求路径 (如 "/0/private/Balance")
            params: POST 参数 (应已包含 nonce)
            nonce: 本次请求的 nonce

        Returns:
            Base64 编码的签名

        Raises:
            ConfigurationError: Secret 无法解码
        """
        secret = self._secret_bytes()
        postdata = encode_params(params)

        hash_digest = hashlib.sha256((str(nonce) + postdata).encode("utf-8")).digest()
        signature = hmac.new(
            secret,
            path.encode("utf-8") + hash_digest,
            hashlib.sha512,
        ).digest()

        return base64.b64encode(signature).decode()

    def get_headers(self, signature: str) -> Dict[str, str]:
        """获取认证请求头"""
        return {
            "API-Key": self.api_key,
            "API-Sign": signature,
        }
