"""
Pytest fixtures for the fragment server tests.

테스트 구성:
- store는 테스트마다 새로 생성 (시드 상태 고정)
- HTTP 테스트는 create_app()으로 독립 앱 생성
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.core import ContactStore, CounterStore
from src.render import BlockRenderer

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def templates_dir(project_root: Path) -> Path:
    """src/app/templates 경로."""
    return project_root / "src" / "app" / "templates"


# =============================================================================
# Component Fixtures
# =============================================================================

@pytest.fixture
def renderer(templates_dir: Path) -> BlockRenderer:
    """실제 템플릿을 쓰는 BlockRenderer."""
    return BlockRenderer(templates_dir)


@pytest.fixture
def counter_store() -> CounterStore:
    """0에서 시작하는 카운터."""
    return CounterStore()


@pytest.fixture
def contact_store() -> ContactStore:
    """John Doe 한 명이 시드된 연락처 저장소."""
    return ContactStore(seed=[("John Doe", "johndoe@hotmail.com")])


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def test_config() -> dict:
    """테스트용 설정 (default.yaml과 동일한 시드)."""
    return {
        "logging": {"level": "WARNING"},
        "counter": {"initial": 0},
        "contacts": {
            "seed": [
                {"name": "John Doe", "email": "johndoe@hotmail.com"},
            ],
        },
    }


@pytest.fixture
def app(test_config: dict) -> FastAPI:
    """테스트마다 새 store를 가진 앱."""
    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(app) as client:
        yield client
