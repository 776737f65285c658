"""
Kraken 客户端异常类

分层异常设计，每种失败都有独立类型，调用方据此决定是否重试。
核心层不做任何自动重试。
"""
from typing import Any, List, Optional


class KrakenError(Exception):
    """Kraken 客户端基础异常类"""

    def __init__(self, message: str, raw: Any = None, retryable: bool = False):
        super().__init__(message)
        self.message = message
        self.raw = raw
        self.retryable = retryable


# ==================== 本地错误 ====================

class ConfigurationError(KrakenError):
    """配置错误

    触发条件: API Secret 不是有效的 Base64
    恢复策略: 无，需修正配置
    """

    def __init__(self, message: str = "API Secret 配置无效"):
        super().__init__(message, retryable=False)


class UnknownMethodError(KrakenError):
    """未知 API 方法

    触发条件: 方法名不在公共/私有方法集合中
    恢复策略: 无，不会发出网络请求
    """

    def __init__(self, method: str):
        super().__init__(f"{method} is not a valid API method.", retryable=False)
        self.method = method


# ==================== 网络/响应错误 ====================

class TransportError(KrakenError):
    """传输层错误

    触发条件: 连接失败、超时或其他 I/O 错误
    恢复策略: 由调用方决定 (核心层不重试)
    """

    def __init__(self, message: str, timeout: bool = False):
        super().__init__(message, retryable=True)
        self.timeout = timeout


class MalformedResponseError(KrakenError):
    """响应不是有效 JSON

    raw 保存原始响应文本，便于排查。
    """

    def __init__(self, raw: str, message: str = "Kraken 返回了无法解析的响应"):
        super().__init__(message, raw=raw, retryable=False)


class ApiError(KrakenError):
    """Kraken API 返回的业务错误

    code: 第一个以 'E' 开头的错误码 (去掉前缀 'E')，没有则为 None
    errors: 完整的 error 列表
    """

    def __init__(self, message: str, errors: List[str], code: Optional[str] = None):
        super().__init__(message, raw=errors, retryable=False)
        self.code = code
        self.errors = errors
