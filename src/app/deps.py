"""
Dependency injection: app.state에 생성된 store/renderer를 라우트에 주입.

전역 변수 대신 create_app()이 만든 인스턴스를 사용 → 테스트에서 시드 상태 고정 가능.
"""

from typing import Annotated

from fastapi import Depends, Request

from src.core import ContactStore, CounterStore
from src.render import BlockRenderer


def get_renderer(request: Request) -> BlockRenderer:
    """Request에서 BlockRenderer 가져오기."""
    return request.app.state.renderer


def get_counter_store(request: Request) -> CounterStore:
    """Request에서 CounterStore 가져오기."""
    return request.app.state.counter_store


def get_contact_store(request: Request) -> ContactStore:
    """Request에서 ContactStore 가져오기."""
    return request.app.state.contact_store


Renderer = Annotated[BlockRenderer, Depends(get_renderer)]
Counter = Annotated[CounterStore, Depends(get_counter_store)]
Contacts = Annotated[ContactStore, Depends(get_contact_store)]
