"""
Page Routes: 전체 페이지 셸 + 헬스 체크.

- GET / → base.html의 index 블록
- GET /assets/main.css → 스타일시트 (static/css/main.css 별칭)
- GET /health → 상태 확인
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse

from src.app.deps import Renderer
from src.domain.constants import BASE_TEMPLATE, INDEX_BLOCK, STYLESHEET_PATH
from src.domain.schemas import IndexContext

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(renderer: Renderer) -> HTMLResponse:
    """홈 페이지 (카운터/연락처는 HTMX로 로딩)."""
    return HTMLResponse(
        content=renderer.render_block(BASE_TEMPLATE, INDEX_BLOCK, IndexContext())
    )


@router.get("/assets/main.css", include_in_schema=False)
async def stylesheet(request: Request) -> FileResponse:
    """메인 스타일시트."""
    static_dir: Path = request.app.state.static_dir
    css_path = static_dir / STYLESHEET_PATH
    if not css_path.is_file():
        raise HTTPException(status_code=404)
    return FileResponse(css_path, media_type="text/css")


@router.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}
