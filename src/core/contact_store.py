"""
Contact Store: 중복 없는 연락처 목록.

규칙:
- 저장 순서 = 제출 순서 (append only, 재정렬 없음)
- email 유일성: 대소문자 구분, 정확히 일치할 때만 중복
- 중복 검사 + 추가는 하나의 임계 구역 (check-then-insert)
- 중복이면 저장소 변경 없음, id도 소비하지 않음
- id는 카운터와 별개의 단조 증가 시퀀스에서 발급
"""

import asyncio
import itertools
import logging
from collections.abc import Iterable, Iterator

from src.domain.errors import DuplicateEmailError
from src.domain.schemas import Contact

logger = logging.getLogger(__name__)


class ContactStore:
    """
    asyncio.Lock으로 보호되는 연락처 컬렉션.

    Usage:
        store = ContactStore(seed=[("John Doe", "johndoe@hotmail.com")])
        contact = await store.insert_if_absent("Jane Roe", "jane@example.com")
    """

    def __init__(
        self,
        seed: Iterable[tuple[str, str]] = (),
        id_sequence: Iterator[int] | None = None,
    ) -> None:
        """
        Args:
            seed: 초기 (name, email) 목록. 같은 중복 규칙 적용
            id_sequence: id 발급기 (기본: 1부터 시작)
        """
        self._contacts: list[Contact] = []
        self._ids = id_sequence if id_sequence is not None else itertools.count(1)
        self._lock = asyncio.Lock()

        # 생성 시점에는 경합 없음 → 락 없이 직접 추가
        for name, email in seed:
            if self._find_by_email(email) is None:
                self._append(name, email)
            else:
                logger.warning(f"Skipping duplicate seed contact: {email}")

    def _find_by_email(self, email: str) -> Contact | None:
        """락 보유 상태에서만 호출."""
        for contact in self._contacts:
            if contact.email == email:
                return contact
        return None

    def _append(self, name: str, email: str) -> Contact:
        """락 보유 상태에서만 호출."""
        contact = Contact(id=next(self._ids), name=name, email=email)
        self._contacts.append(contact)
        return contact

    async def list_all(self) -> list[Contact]:
        """
        현재 목록의 스냅샷 (저장 순서, 오래된 것 먼저).

        표시 순서(최신 먼저)는 핸들러가 결정.
        """
        async with self._lock:
            return list(self._contacts)

    async def insert_if_absent(self, name: str, email: str) -> Contact:
        """
        email이 없을 때만 연락처 추가.

        Args:
            name: 이름
            email: 이메일 (정확히 일치 비교)

        Returns:
            새로 추가된 Contact

        Raises:
            DuplicateEmailError: 같은 email이 이미 존재
        """
        async with self._lock:
            existing = self._find_by_email(email)
            if existing is not None:
                logger.info(
                    f"Rejected contact: email {email!r} already used by id={existing.id}"
                )
                raise DuplicateEmailError(email)
            contact = self._append(name, email)

        logger.info(f"Added contact id={contact.id} email={contact.email!r}")
        return contact
