"""
FastAPI Routes.

페이지 라우트 (HTML 셸) + 조각 라우트 (HTMX swap용 HTML 조각)
"""

from . import contacts, counter, pages

__all__ = ["contacts", "counter", "pages"]
