#!/usr/bin/env python3
"""
Kraken 公共 API 测试脚本

依次调用公共 API 并打印结果或错误信息。

使用:
    python scripts/run_public_apis.py

可选 .env:
    KRAKEN_PROXY=socks5://127.0.0.1:1080
    LOG_LEVEL=DEBUG
"""
import asyncio
import json
import logging
import os
import sys
from typing import Any, Dict, Optional

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import settings
from connectors.kraken import KrakenClient
from core.exceptions import KrakenError
from core.log_setup import setup_logging

logger = logging.getLogger(__name__)

PAIR = "GNOETH"

NO_PARAM_METHODS = ["Time", "SystemStatus", "Assets", "AssetPairs"]
PAIR_METHODS = ["Ticker", "OHLC", "Depth", "Trades", "Spread"]


async def call_api(kraken: KrakenClient, method: str, params: Optional[Dict[str, Any]] = None) -> bool:
    """调用单个方法并打印结果"""
    try:
        result = await kraken.api(method, params)
        print(f"\n[Success] API method \"{method}\" returned the following response:")
        print(json.dumps(result)[:500])
        return True
    except KrakenError as e:
        print(f"\n[Error] API method \"{method}\" produced the following error message:")
        print(f"{type(e).__name__}: {e.message}")
        return False


async def main():
    """主函数"""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)

    async with KrakenClient.from_settings(settings) as kraken:
        results = await asyncio.gather(
            *[call_api(kraken, m) for m in NO_PARAM_METHODS],
            *[call_api(kraken, m, {"pair": PAIR}) for m in PAIR_METHODS],
        )

    logger.info(f"完成: {sum(results)}/{len(results)} 成功")


if __name__ == "__main__":
    asyncio.run(main())
