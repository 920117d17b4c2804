"""
Render layer: 템플릿 블록 → HTML 조각.

역할:
- 템플릿 + 블록 이름 + 컨텍스트 → 부분 HTML
- Jinja2 (StrictUndefined, html autoescape)
"""

from .blocks import BlockRenderer

__all__ = [
    "BlockRenderer",
]
