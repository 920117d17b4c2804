"""
Error definitions for the fragment server.

규칙:
- 조용한 실패 금지 → 코드가 붙은 예외로 명시적 실패
- 사용자 입력 문제(중복 이메일)는 핸들러에서 422로 복구
- 템플릿/블록/렌더 문제는 배포/코드 결함 → 500으로 전파
"""

from typing import Any


class FragmentError(Exception):
    """
    서버 전역 에러 베이스.

    Usage:
        raise FragmentError("BLOCK_NOT_FOUND", template="counter.html", block="x")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Render Errors (programmer-facing, 500)
# =============================================================================


class RenderError(FragmentError):
    """템플릿 블록 렌더 실패. 요청 단위로 복구하지 않는다."""


class TemplateNotFoundError(RenderError):
    """템플릿 파일을 로드할 수 없음."""

    def __init__(self, template: str, **context: Any) -> None:
        super().__init__(ErrorCodes.TEMPLATE_NOT_FOUND, template=template, **context)


class BlockNotFoundError(RenderError):
    """템플릿 안에 해당 이름의 블록이 없음."""

    def __init__(self, template: str, block: str, **context: Any) -> None:
        super().__init__(
            ErrorCodes.BLOCK_NOT_FOUND, template=template, block=block, **context
        )


class RenderEvaluationError(RenderError):
    """블록 안의 표현식 평가 실패 (정의되지 않은 컨텍스트 키 등)."""

    def __init__(
        self, template: str, block: str | None, **context: Any
    ) -> None:
        # block=None: 템플릿 로드 단계(문법 오류)에서 실패
        super().__init__(
            ErrorCodes.RENDER_FAILED, template=template, block=block, **context
        )


# =============================================================================
# Store Errors (user-facing, 422)
# =============================================================================


class DuplicateEmailError(FragmentError):
    """동일한 이메일의 연락처가 이미 존재함. 저장소는 변경되지 않는다."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(ErrorCodes.DUPLICATE_EMAIL, email=email)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Render ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    BLOCK_NOT_FOUND = "BLOCK_NOT_FOUND"
    RENDER_FAILED = "RENDER_FAILED"

    # === Contacts ===
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
