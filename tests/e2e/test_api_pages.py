"""
test_api_pages.py - 페이지/폴백/에러 처리 E2E 테스트

엔드포인트:
- GET /
- GET /health
- 매칭 안 되는 경로 → 404 고정 본문
- 템플릿 결함 → 500
"""

import asyncio
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.app.main import create_app, load_config, merge_config


class TestIndexPage:
    """홈 페이지."""

    def test_index_loads(self, client: TestClient):
        """GET / → HTML 셸."""
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<!DOCTYPE html>" in response.text

    def test_index_has_htmx_triggers(self, client: TestClient):
        """카운터/연락처는 HTMX로 로딩."""
        response = client.get("/")

        assert 'hx-get="/counter"' in response.text
        assert 'hx-get="/contacts"' in response.text

    def test_index_swaps_validation_fragments(self, client: TestClient):
        """htmx 1.x가 422 폼 조각을 버리지 않도록 beforeSwap 훅 포함."""
        response = client.get("/")

        assert "htmx.org@1.9" in response.text
        assert "htmx:beforeSwap" in response.text
        assert "evt.detail.xhr.status === 422" in response.text
        assert "evt.detail.shouldSwap = true" in response.text
        assert "evt.detail.isError = false" in response.text

    def test_index_links_stylesheet_alias(self, client: TestClient):
        """페이지는 /assets/main.css를 참조."""
        response = client.get("/")

        assert 'href="/assets/main.css"' in response.text

    def test_health(self, client: TestClient):
        """헬스 체크."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_static_css_served(self, client: TestClient):
        """정적 CSS."""
        response = client.get("/static/css/main.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]

    def test_assets_stylesheet_alias(self, client: TestClient):
        """/assets/main.css = /static/css/main.css."""
        alias = client.get("/assets/main.css")
        static = client.get("/static/css/main.css")

        assert alias.status_code == 200
        assert "text/css" in alias.headers["content-type"]
        assert alias.text == static.text

    def test_assets_alias_missing_file(self, tmp_path: Path, test_config: dict):
        """스타일시트가 없으면 고정 본문 404."""
        test_config["paths"] = {"static_dir": str(tmp_path)}
        with TestClient(create_app(test_config)) as client:
            response = client.get("/assets/main.css")

        assert response.status_code == 404
        assert response.text == "This site does not exist :("


class TestNotFound:
    """폴백."""

    @pytest.mark.parametrize("path", ["/nope", "/contacts/extra", "/counter/x/y"])
    def test_unmatched_path(self, client: TestClient, path: str):
        """고정 본문 404."""
        response = client.get(path)

        assert response.status_code == 404
        assert response.text == "This site does not exist :("


class TestRenderFailure:
    """템플릿 결함은 500으로 전파, store 변경은 이미 커밋됨."""

    @pytest.fixture
    def broken_client(self, tmp_path: Path, test_config: dict):
        """count 블록이 없는 counter.html로 구성된 앱."""
        (tmp_path / "counter.html").write_text(
            "{% block counter %}{{ count }}{% endblock %}", encoding="utf-8"
        )
        test_config["paths"] = {"templates_dir": str(tmp_path)}
        app = create_app(test_config)
        with TestClient(app) as client:
            yield client, app

    def test_missing_block_is_server_error(self, broken_client):
        """블록 없음 → 500 + 에러 코드."""
        client, _ = broken_client

        response = client.post("/counter/increment")

        assert response.status_code == 500
        assert "BLOCK_NOT_FOUND" in response.text

    def test_mutation_committed_before_render(self, broken_client):
        """렌더 실패해도 증가는 반영 (부분 변경 없음)."""
        client, app = broken_client

        client.post("/counter/increment")

        assert asyncio.run(app.state.counter_store.read()) == 1

    def test_missing_template_is_server_error(self, broken_client):
        """템플릿 없음 → 500."""
        client, _ = broken_client

        response = client.get("/contacts")

        assert response.status_code == 500
        assert "TEMPLATE_NOT_FOUND" in response.text


class TestConfig:
    """설정 로드/병합."""

    def test_missing_config_file(self, tmp_path: Path):
        """없는 파일 → 빈 dict."""
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_load_yaml(self, tmp_path: Path):
        """YAML 로드."""
        path = tmp_path / "config.yaml"
        path.write_text("counter:\n  initial: 3\n", encoding="utf-8")

        assert load_config(path) == {"counter": {"initial": 3}}

    def test_default_yaml_matches_project(self, project_root: Path):
        """프로젝트 default.yaml의 시드."""
        config = load_config(project_root / "default.yaml")

        assert config["server"]["port"] == 1337
        assert config["contacts"]["seed"][0]["email"] == "johndoe@hotmail.com"

    def test_merge_is_per_section(self):
        """섹션 안의 키만 덮어씀, 원본 불변."""
        base = {"server": {"host": "0.0.0.0", "port": 1337}}

        merged = merge_config(base, {"server": {"port": 8000}})

        assert merged == {"server": {"host": "0.0.0.0", "port": 8000}}
        assert base["server"]["port"] == 1337
