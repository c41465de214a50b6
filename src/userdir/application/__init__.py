"""Application layer: the directory service, ports, renderer, and retry policy. Depends only on domain."""

from userdir.application.business_card import (
    CARD_TEMPLATE,
    CARD_TEMPLATE_VERSION,
    BusinessCardRenderer,
    render_business_card,
)
from userdir.application.directory_service import DUPLICATE_SUFFIX, DirectoryService
from userdir.application.errors import (
    CardRenderError,
    DirectoryError,
    TemplateConfigError,
    UserLookupError,
)
from userdir.application.ports import CardRenderer, RetryPolicy, Sleeper, UserStore
from userdir.application.retry import CREATE_RETRY_DELAY, FixedDelay

__all__ = [
    "BusinessCardRenderer",
    "CARD_TEMPLATE",
    "CARD_TEMPLATE_VERSION",
    "CREATE_RETRY_DELAY",
    "CardRenderError",
    "CardRenderer",
    "DUPLICATE_SUFFIX",
    "DirectoryError",
    "DirectoryService",
    "FixedDelay",
    "RetryPolicy",
    "Sleeper",
    "TemplateConfigError",
    "UserLookupError",
    "UserStore",
    "render_business_card",
]
