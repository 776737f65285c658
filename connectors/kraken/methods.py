"""
Kraken REST API 方法集合

公共/私有方法均为封闭枚举，不在集合内的方法名一律拒绝。
"""
from enum import Enum
from typing import Union

from core.exceptions import UnknownMethodError


class PublicMethod(str, Enum):
    TIME = "Time"
    SYSTEM_STATUS = "SystemStatus"
    ASSETS = "Assets"
    ASSET_PAIRS = "AssetPairs"
    TICKER = "Ticker"
    DEPTH = "Depth"
    TRADES = "Trades"
    SPREAD = "Spread"
    OHLC = "OHLC"


class PrivateMethod(str, Enum):
    # 账户
    BALANCE = "Balance"
    BALANCE_EX = "BalanceEx"
    TRADE_BALANCE = "TradeBalance"
    OPEN_ORDERS = "OpenOrders"
    CLOSED_ORDERS = "ClosedOrders"
    QUERY_ORDERS = "QueryOrders"
    TRADES_HISTORY = "TradesHistory"
    QUERY_TRADES = "QueryTrades"
    OPEN_POSITIONS = "OpenPositions"
    LEDGERS = "Ledgers"
    QUERY_LEDGERS = "QueryLedgers"
    TRADE_VOLUME = "TradeVolume"

    # 交易
    ADD_ORDER = "AddOrder"
    EDIT_ORDER = "EditOrder"
    CANCEL_ORDER = "CancelOrder"
    CANCEL_ALL = "CancelAll"
    CANCEL_ALL_ORDERS_AFTER = "CancelAllOrdersAfter"

    # 充提
    DEPOSIT_METHODS = "DepositMethods"
    DEPOSIT_ADDRESSES = "DepositAddresses"
    DEPOSIT_STATUS = "DepositStatus"
    WITHDRAW_INFO = "WithdrawInfo"
    WITHDRAW = "Withdraw"
    WITHDRAW_STATUS = "WithdrawStatus"
    WITHDRAW_CANCEL = "WithdrawCancel"

    GET_WEBSOCKETS_TOKEN = "GetWebSocketsToken"


ApiMethod = Union[PublicMethod, PrivateMethod]

_PUBLIC = {m.value: m for m in PublicMethod}
_PRIVATE = {m.value: m for m in PrivateMethod}


def resolve_method(method: Union[str, ApiMethod]) -> ApiMethod:
    """
    把方法名解析为枚举成员

    Raises:
        UnknownMethodError: 方法名不在任何集合中
    """
    if isinstance(method, (PublicMethod, PrivateMethod)):
        return method

    name = str(method)
    if name in _PUBLIC:
        return _PUBLIC[name]
    if name in _PRIVATE:
        return _PRIVATE[name]
    raise UnknownMethodError(name)


def resolve_public(method: Union[str, PublicMethod]) -> PublicMethod:
    """只接受公共方法"""
    resolved = resolve_method(method)
    if not isinstance(resolved, PublicMethod):
        raise UnknownMethodError(resolved.value)
    return resolved


def resolve_private(method: Union[str, PrivateMethod]) -> PrivateMethod:
    """只接受私有方法"""
    resolved = resolve_method(method)
    if not isinstance(resolved, PrivateMethod):
        raise UnknownMethodError(resolved.value)
    return resolved
