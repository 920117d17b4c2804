"""Domain layer: errors, schemas, constants."""

from .errors import (
    BlockNotFoundError,
    DuplicateEmailError,
    ErrorCodes,
    FragmentError,
    RenderError,
    RenderEvaluationError,
    TemplateNotFoundError,
)
from .schemas import (
    Contact,
    ContactsContext,
    CounterContext,
    FormContext,
    FormValidationState,
    IndexContext,
    OobContactContext,
)

__all__ = [
    # errors
    "FragmentError",
    "RenderError",
    "TemplateNotFoundError",
    "BlockNotFoundError",
    "RenderEvaluationError",
    "DuplicateEmailError",
    "ErrorCodes",
    # schemas
    "Contact",
    "FormValidationState",
    "IndexContext",
    "CounterContext",
    "ContactsContext",
    "FormContext",
    "OobContactContext",
]
