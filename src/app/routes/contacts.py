"""
Contacts Routes: 연락처 목록 + 인라인 폼 검증.

- GET /contacts → contacts 블록 (최신 먼저 + 빈 폼)
- POST /contact, /contact/{id} → 성공: form + oob_contact (200)
                                  거절: form + 에러 (422)
- DELETE /contact/{id} → 미구현 (501)

OOB 응답:
    form 블록은 hx-target(폼 자리)에 교체되고,
    oob_contact 블록은 hx-swap-oob로 #contact-list 맨 앞에 삽입됨.
    목록 전체를 다시 렌더링하지 않는다.
"""

import logging

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse, PlainTextResponse

from src.app.deps import Contacts, Renderer
from src.domain.constants import (
    CONTACTS_BLOCK,
    CONTACTS_TEMPLATE,
    FIELD_EMAIL,
    FIELD_NAME,
    FORM_BLOCK,
    MSG_EMAIL_EXISTS,
    MSG_EMAIL_REQUIRED,
    MSG_NAME_REQUIRED,
    NOT_IMPLEMENTED_BODY,
    OOB_CONTACT_BLOCK,
)
from src.domain.errors import DuplicateEmailError
from src.domain.schemas import (
    ContactsContext,
    FormContext,
    FormValidationState,
    OobContactContext,
)
from src.render import BlockRenderer

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Helpers
# =============================================================================


def validate_required(name: str, email: str) -> FormValidationState:
    """
    필수 필드 검사 (store 접근 전).

    Returns:
        제출값이 채워진 상태. 문제가 있으면 errors도 채워짐
    """
    state = (
        FormValidationState.empty()
        .with_value(FIELD_NAME, name)
        .with_value(FIELD_EMAIL, email)
    )
    if not name.strip():
        state = state.with_error(FIELD_NAME, MSG_NAME_REQUIRED)
    if not email.strip():
        state = state.with_error(FIELD_EMAIL, MSG_EMAIL_REQUIRED)
    return state


def render_rejected_form(
    renderer: BlockRenderer, formdata: FormValidationState
) -> HTMLResponse:
    """거절된 폼: 제출값 + 에러, 422."""
    return HTMLResponse(
        content=renderer.render_block(
            CONTACTS_TEMPLATE, FORM_BLOCK, FormContext(formdata=formdata)
        ),
        status_code=422,
    )


# =============================================================================
# Routes
# =============================================================================


@router.get("/contacts", response_class=HTMLResponse)
async def list_contacts(store: Contacts, renderer: Renderer) -> HTMLResponse:
    """연락처 목록 (표시 순서: 최신 먼저)."""
    contacts = await store.list_all()
    contacts.reverse()
    return HTMLResponse(
        content=renderer.render_block(
            CONTACTS_TEMPLATE,
            CONTACTS_BLOCK,
            ContactsContext(contacts=contacts, formdata=FormValidationState.empty()),
        )
    )


@router.post("/contact", response_class=HTMLResponse)
async def add_contact(
    store: Contacts,
    renderer: Renderer,
    name: str = Form(""),
    email: str = Form(""),
) -> HTMLResponse:
    """
    연락처 추가.

    렌더링은 항상 store 락이 해제된 뒤 수행 (변경은 이미 커밋됨).
    """
    formdata = validate_required(name, email)
    if formdata.has_errors:
        logger.info(f"Contact form rejected: {sorted(formdata.errors)} missing")
        return render_rejected_form(renderer, formdata)

    try:
        contact = await store.insert_if_absent(name, email)
    except DuplicateEmailError:
        return render_rejected_form(
            renderer, formdata.with_error(FIELD_EMAIL, MSG_EMAIL_EXISTS)
        )

    form_block = renderer.render_block(
        CONTACTS_TEMPLATE,
        FORM_BLOCK,
        FormContext(formdata=FormValidationState.empty()),
    )
    new_contact_block = renderer.render_block(
        CONTACTS_TEMPLATE,
        OOB_CONTACT_BLOCK,
        OobContactContext(contact=contact),
    )
    return HTMLResponse(content=form_block + new_contact_block)


@router.post("/contact/{contact_id}", response_class=HTMLResponse)
async def add_contact_alias(
    contact_id: str,
    store: Contacts,
    renderer: Renderer,
    name: str = Form(""),
    email: str = Form(""),
) -> HTMLResponse:
    """/contact 별칭. id는 사용하지 않음."""
    return await add_contact(store, renderer, name=name, email=email)


@router.delete("/contact/{contact_id}")
async def delete_contact(contact_id: str) -> PlainTextResponse:
    """연락처 삭제: 아직 미구현."""
    # TODO: ContactStore에 remove() 추가 후 OOB로 목록에서 항목 제거
    return PlainTextResponse(NOT_IMPLEMENTED_BODY, status_code=501)
