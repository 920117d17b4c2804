"""
Domain Constants: 템플릿/블록 이름, 폼 필드, 응답 메시지.

템플릿과 블록 이름은 코드에 고정된 상수 (사용자 입력 아님).
"""

# =============================================================================
# Templates (src/app/templates/)
# =============================================================================

BASE_TEMPLATE = "base.html"
COUNTER_TEMPLATE = "counter.html"
CONTACTS_TEMPLATE = "contacts.html"

# =============================================================================
# Blocks
# =============================================================================
# base.html      → index
# counter.html   → counter ⊃ count
# contacts.html  → contacts ⊃ form, oob_contact

INDEX_BLOCK = "index"
COUNTER_BLOCK = "counter"
COUNT_BLOCK = "count"
CONTACTS_BLOCK = "contacts"
FORM_BLOCK = "form"
OOB_CONTACT_BLOCK = "oob_contact"

# =============================================================================
# Contact Form
# =============================================================================

FIELD_NAME = "name"
FIELD_EMAIL = "email"

MSG_EMAIL_EXISTS = "Email already exists"
MSG_NAME_REQUIRED = "Name is required"
MSG_EMAIL_REQUIRED = "Email is required"

# =============================================================================
# Static Assets
# =============================================================================

STYLESHEET_PATH = "css/main.css"

# =============================================================================
# Fallback Responses
# =============================================================================

NOT_FOUND_BODY = "This site does not exist :("
NOT_IMPLEMENTED_BODY = "Not implemented"
