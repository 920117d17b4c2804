"""
App layer: UI 서버 (FastAPI + HTMX).

역할:
- 라우팅, 폼 파싱, store/renderer 주입
- ⚠️ 공유 상태 로직 없음 (core에 위임)

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (블록 단위로 렌더)
- src/render/ → 코드 (blocks.py)
"""
