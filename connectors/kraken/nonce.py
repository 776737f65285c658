"""
Nonce 生成器

Kraken 要求同一 API Key 的 nonce 严格递增。
格式: 毫秒时间戳 + 3 位子计数器 (同一毫秒内递增)。
"""
import threading
import time
from typing import Callable, Optional


def _now_ms() -> int:
    return int(time.time() * 1000)


class NonceGenerator:
    """
    线程安全的 Nonce 生成器

    每个客户端实例持有一个独立的生成器，不共享全局状态。

    使用:
        nonces = NonceGenerator()
        nonce = nonces.generate()  # "1616492376594000"
    """

    # 子计数器位数 (000-999)
    COUNTER_WIDTH = 3

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _now_ms
        self._lock = threading.Lock()
        self._last_ms = -1
        self._counter = 0
        self._last_nonce = 0

    def generate(self) -> str:
        """获取下一个 nonce (字符串形式)"""
        with self._lock:
            now_ms = self._clock()

            if now_ms == self._last_ms:
                self._counter += 1
            else:
                self._counter = 0
                self._last_ms = now_ms

            nonce = now_ms * 10 ** self.COUNTER_WIDTH + self._counter

            # 计数器溢出或时钟回拨时继续 +1，保证不回退
            if nonce <= self._last_nonce:
                nonce = self._last_nonce + 1

            self._last_nonce = nonce
            return str(nonce)
