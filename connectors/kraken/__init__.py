"""
Kraken 连接器模块

支持 Kraken REST 公共/私有 API。
"""
from connectors.kraken.client import KrakenClient
from connectors.kraken.methods import PublicMethod, PrivateMethod
from connectors.kraken.response import ApiOutcome
from connectors.kraken.transport import AiohttpTransport, ConnectionPolicy

__all__ = [
    "KrakenClient",
    "PublicMethod",
    "PrivateMethod",
    "ApiOutcome",
    "AiohttpTransport",
    "ConnectionPolicy",
]
