"""
Counter Store: 프로세스 전역 카운터.

규칙:
- 값은 0 이상, 증가만 가능 (increment 1회당 +1)
- read-modify-write는 락 안에서만
- 락은 렌더 호출 전에 해제 (store 메서드 밖으로 락을 들고 나가지 않음)
"""

import asyncio
import logging

logger = logging.getLogger(__name__)


class CounterStore:
    """
    asyncio.Lock으로 보호되는 단일 카운터.

    Usage:
        store = CounterStore()
        value = await store.increment()
    """

    def __init__(self, initial: int = 0) -> None:
        if initial < 0:
            raise ValueError(f"counter must start at a non-negative value: {initial}")
        self._value = initial
        self._lock = asyncio.Lock()

    async def read(self) -> int:
        """현재 값 (변경 없음)."""
        async with self._lock:
            return self._value

    async def increment(self) -> int:
        """
        값을 1 증가시키고 새 값을 반환.

        Returns:
            이 호출이 만든 값 (직렬화 순서와 일치)
        """
        async with self._lock:
            self._value += 1
            value = self._value

        logger.debug(f"Counter incremented to {value}")
        return value
