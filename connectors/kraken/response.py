"""
响应分类

解析 → 扫描 error 列表 → 成功，三步严格按顺序执行。
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from core.exceptions import ApiError, KrakenError, MalformedResponseError

logger = logging.getLogger(__name__)


@dataclass
class ApiOutcome:
    """单次调用的结果: result 与 error 二选一"""
    result: Any = None
    error: Optional[KrakenError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """返回结果，失败时抛出对应异常"""
        if self.error is not None:
            raise self.error
        return self.result


def classify(raw: str) -> ApiOutcome:
    """
    把原始响应文本映射为 ApiOutcome

    1. JSON 解析失败 -> MalformedResponseError (保留原始文本)
    2. error 列表非空 -> ApiError
       - 第一个以 'E' 开头的条目为错误码 (去掉 'E')
       - 没有 'E' 条目时，消息为整个列表的 JSON
    3. 否则成功，结果为 result 字段
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return ApiOutcome(error=MalformedResponseError(raw))

    if not isinstance(data, dict):
        return ApiOutcome(error=MalformedResponseError(raw, "Kraken 响应不是 JSON 对象"))

    errors = data.get("error")
    if errors is None:
        errors = []
    elif isinstance(errors, str):
        errors = [errors] if errors else []
    elif not isinstance(errors, list):
        return ApiOutcome(error=MalformedResponseError(raw, "Kraken 响应的 error 字段不是列表"))

    if errors:
        code = next(
            (e[1:] for e in errors if isinstance(e, str) and e.startswith("E")),
            None,
        )
        if code is not None:
            return ApiOutcome(error=ApiError(code, errors=errors, code=code))
        return ApiOutcome(error=ApiError(json.dumps(errors), errors=errors))

    return ApiOutcome(result=data.get("result"))
