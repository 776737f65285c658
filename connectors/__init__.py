"""Connectors package"""
from connectors.kraken import (
    KrakenClient,
    PublicMethod, PrivateMethod,
    ApiOutcome,
    AiohttpTransport, ConnectionPolicy,
)

__all__ = [
    "KrakenClient",
    "PublicMethod", "PrivateMethod",
    "ApiOutcome",
    "AiohttpTransport", "ConnectionPolicy",
]
