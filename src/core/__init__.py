"""
Core layer: 공유 가변 상태.

역할:
- 카운터, 연락처 목록 소유
- 모든 접근은 store 메서드를 통해서만 (락 내부)
- 두 store를 동시에 잠그는 연산 없음
"""

from .contact_store import ContactStore
from .counter_store import CounterStore

__all__ = [
    "CounterStore",
    "ContactStore",
]
