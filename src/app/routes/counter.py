"""
Counter Routes.

- GET /counter → counter 블록 (버튼 + 숫자)
- POST /counter/increment → count 블록 (숫자만)
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from src.app.deps import Counter, Renderer
from src.domain.constants import COUNT_BLOCK, COUNTER_BLOCK, COUNTER_TEMPLATE
from src.domain.schemas import CounterContext

router = APIRouter()


@router.get("/counter", response_class=HTMLResponse)
async def get_counter(store: Counter, renderer: Renderer) -> HTMLResponse:
    """카운터 조각."""
    count = await store.read()
    return HTMLResponse(
        content=renderer.render_block(
            COUNTER_TEMPLATE, COUNTER_BLOCK, CounterContext(count=count)
        )
    )


@router.post("/counter/increment", response_class=HTMLResponse)
async def increment_counter(store: Counter, renderer: Renderer) -> HTMLResponse:
    """
    카운터 증가.

    클라이언트는 숫자만 교체하므로 count 블록만 반환.
    """
    count = await store.increment()
    return HTMLResponse(
        content=renderer.render_block(
            COUNTER_TEMPLATE, COUNT_BLOCK, CounterContext(count=count)
        )
    )
