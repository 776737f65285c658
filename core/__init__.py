"""Core module - 异常和日志"""
from core.exceptions import (
    KrakenError,
    ConfigurationError,
    UnknownMethodError,
    TransportError,
    MalformedResponseError,
    ApiError,
)
from core.log_setup import setup_logging

__all__ = [
    "KrakenError",
    "ConfigurationError",
    "UnknownMethodError",
    "TransportError",
    "MalformedResponseError",
    "ApiError",
    "setup_logging",
]
