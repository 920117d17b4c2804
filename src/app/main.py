"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 직접: uv run python -m src.app.main
"""

import copy
import logging
import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# Routes
from src.app.routes import contacts, counter, pages
from src.core import ContactStore, CounterStore
from src.domain.constants import NOT_FOUND_BODY
from src.domain.errors import RenderError
from src.render import BlockRenderer

logger = logging.getLogger(__name__)

APP_DIR = Path(__file__).parent
PROJECT_ROOT = APP_DIR.parent.parent

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG: dict[str, Any] = {
    "server": {"host": "0.0.0.0", "port": 1337},
    "logging": {"level": "DEBUG"},
    "paths": {"templates_dir": None, "static_dir": None},
    "counter": {"initial": 0},
    "contacts": {
        "seed": [
            {"name": "John Doe", "email": "johndoe@hotmail.com"},
        ],
    },
}


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def merge_config(base: dict, override: dict) -> dict:
    """섹션 단위 병합 (override 우선). base는 변경하지 않음."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def _resolve_dir(configured: str | None, default: Path) -> Path:
    if not configured:
        return default
    path = Path(configured)
    return path if path.is_absolute() else PROJECT_ROOT / path


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    store는 create_app()에서 이미 생성됨 (재시작 시 상태 소멸, 영속화 없음).
    """
    # Startup
    logger.info(
        f"Fragment server ready: templates={app.state.renderer.templates_dir}"
    )

    yield

    # Shutdown
    logger.info("Fragment server shutting down")


# =============================================================================
# Error Handlers
# =============================================================================


async def not_found_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """매칭되는 라우트 없음 → 고정 본문 404. 그 외 HTTP 에러는 그대로."""
    if exc.status_code == 404:
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


async def render_error_handler(request: Request, exc: Exception) -> Response:
    """템플릿/블록/렌더 실패 → 500. 배포/코드 결함이므로 에러 로그."""
    code = exc.code if isinstance(exc, RenderError) else "RENDER_FAILED"
    detail = exc.to_dict() if isinstance(exc, RenderError) else {"error": str(exc)}
    logger.error(
        f"Render failed for {request.method} {request.url.path}: {detail}",
        exc_info=exc,
    )
    return PlainTextResponse(f"Internal Server Error [{code}]", status_code=500)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """요청 단위 액세스 로그."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({elapsed_ms:.1f}ms)"
    )
    return response


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict | None = None) -> FastAPI:
    """
    앱 생성 + store/renderer 주입.

    Args:
        config: default.yaml 형식 설정 (None이면 default.yaml 로드)

    Returns:
        새 store를 가진 FastAPI 인스턴스 (테스트마다 독립 상태)
    """
    if config is None:
        config = load_config()
    config = merge_config(DEFAULT_CONFIG, config)

    templates_dir = _resolve_dir(config["paths"].get("templates_dir"), APP_DIR / "templates")
    static_dir = _resolve_dir(config["paths"].get("static_dir"), APP_DIR / "static")

    app = FastAPI(
        title="HTMX Fragment Server",
        description="카운터 + 연락처 목록, 바뀐 조각만 다시 렌더링",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.renderer = BlockRenderer(templates_dir)
    app.state.static_dir = static_dir
    app.state.counter_store = CounterStore(initial=config["counter"].get("initial", 0))
    app.state.contact_store = ContactStore(
        seed=[(c["name"], c["email"]) for c in config["contacts"].get("seed") or []]
    )

    app.middleware("http")(log_requests)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RenderError, render_error_handler)

    # Static files (CSS)
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    # Routes
    app.include_router(pages.router, tags=["Pages"])
    app.include_router(counter.router, tags=["Counter"])
    app.include_router(contacts.router, tags=["Contacts"])

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = app.state.config["server"]
    logging.basicConfig(
        level=app.state.config["logging"].get("level", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Server running on {server_config['host']}:{server_config['port']}")

    uvicorn.run(
        app,
        host=server_config["host"],
        port=server_config["port"],
    )
