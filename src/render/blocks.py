"""
Block 렌더러: Jinja2 기반 부분 렌더링.

한 페이지 템플릿 = 이름 붙은 블록들의 묶음.
- render_block(): 지정한 블록 하나만 평가해서 HTML 조각 반환
- 나머지 페이지 부분은 평가하지 않음
- 템플릿 소스는 Environment 캐시에 한 번만 로드 (읽기 전용)
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from src.domain.errors import (
    BlockNotFoundError,
    RenderError,
    RenderEvaluationError,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)


class SupportsToDict(Protocol):
    """렌더 컨텍스트 dataclass (src.domain.schemas)."""

    def to_dict(self) -> dict[str, Any]: ...


RenderContext = SupportsToDict | Mapping[str, Any]


class BlockRenderer:
    """
    템플릿 블록 렌더러.

    Usage:
        renderer = BlockRenderer(templates_dir)
        html = renderer.render_block("counter.html", "count", CounterContext(count=1))
    """

    def __init__(self, templates_dir: Path):
        """
        Args:
            templates_dir: 템플릿 디렉터리 (시작 시 1회 지정)
        """
        self.templates_dir = templates_dir
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )

    def _load_template(self, template_name: str) -> Template:
        """템플릿 로드 (Environment가 캐시)."""
        try:
            return self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFoundError(
                template_name, templates_dir=str(self.templates_dir)
            ) from e
        except TemplateSyntaxError as e:
            raise RenderEvaluationError(
                template_name, block=None, error=str(e), lineno=e.lineno
            ) from e

    def render_block(
        self,
        template_name: str,
        block_name: str,
        context: RenderContext,
    ) -> str:
        """
        블록 하나만 렌더링.

        Args:
            template_name: 템플릿 파일명 (예: "contacts.html")
            block_name: 블록 이름 (예: "form")
            context: 렌더 컨텍스트 dataclass 또는 mapping

        Returns:
            해당 블록의 HTML 조각

        Raises:
            TemplateNotFoundError: 템플릿 로드 실패
            BlockNotFoundError: 블록 없음
            RenderEvaluationError: 표현식 평가 실패 (undefined 키 포함)
        """
        template = self._load_template(template_name)

        block_func = template.blocks.get(block_name)
        if block_func is None:
            raise BlockNotFoundError(
                template_name,
                block_name,
                available=sorted(template.blocks),
            )

        variables = context.to_dict() if hasattr(context, "to_dict") else dict(context)

        try:
            block_context = template.new_context(variables)
            return "".join(block_func(block_context))
        except RenderError:
            raise
        except Exception as e:
            logger.debug(
                f"Block evaluation failed: {template_name}#{block_name}: {e}"
            )
            raise RenderEvaluationError(
                template_name,
                block_name,
                error=str(e),
            ) from e
