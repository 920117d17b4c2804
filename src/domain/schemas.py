"""
Data schemas for the fragment server.

규칙:
- Contact는 생성 후 불변 (frozen)
- FormValidationState는 요청마다 새로 만들고 저장하지 않음
- 렌더 컨텍스트는 호출 지점마다 전용 dataclass (untyped dict 금지)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, fields
from typing import Any

# =============================================================================
# Entities
# =============================================================================


@dataclass(frozen=True)
class Contact:
    """연락처. id는 저장소가 발급, email은 살아있는 집합 안에서 유일."""
    id: int
    name: str
    email: str


# =============================================================================
# Form Validation State
# =============================================================================


@dataclass(frozen=True)
class FormValidationState:
    """
    폼 거절 시 되돌려줄 제출값 + 필드별 에러.

    빌더 메서드는 항상 새 인스턴스를 반환한다:
        state = FormValidationState.empty().with_value("email", "a@b.c")
    """
    values: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "FormValidationState":
        return cls()

    def with_value(self, field_name: str, value: str) -> "FormValidationState":
        return FormValidationState(
            values={**self.values, field_name: value},
            errors=dict(self.errors),
        )

    def with_error(self, field_name: str, message: str) -> "FormValidationState":
        return FormValidationState(
            values=dict(self.values),
            errors={**self.errors, field_name: message},
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


# =============================================================================
# Render Contexts
# =============================================================================
# to_dict()는 얕은 변환: 중첩 객체는 그대로 넘겨 템플릿에서 속성 접근.
# (dict로 풀면 formdata.values 가 dict.values 메서드로 해석됨)


class _RenderContext:
    """렌더 컨텍스트 공통 변환."""

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


@dataclass(frozen=True)
class IndexContext(_RenderContext):
    """index 블록: 변수 없음."""


@dataclass(frozen=True)
class CounterContext(_RenderContext):
    """counter / count 블록."""
    count: int


@dataclass(frozen=True)
class ContactsContext(_RenderContext):
    """contacts 블록: 표시 순서로 정렬된 연락처 + 폼 상태."""
    contacts: Sequence[Contact]
    formdata: FormValidationState


@dataclass(frozen=True)
class FormContext(_RenderContext):
    """form 블록."""
    formdata: FormValidationState


@dataclass(frozen=True)
class OobContactContext(_RenderContext):
    """oob_contact 블록: 새로 추가된 연락처 하나."""
    contact: Contact
