"""
Wire and response models.
"""

from actions_core.schemas.fulfillment import (
    AppResponse,
    BasicCard,
    ExpectedInput,
    ExpectedIntent,
    FinalResponse,
    InputPrompt,
    RichResponse,
    RichResponseItem,
    SimpleResponse,
    Suggestion,
)
from actions_core.schemas.responses import (
    ActionContext,
    ActionResponse,
    DialogResponse,
    DirectResponse,
    HelperIntent,
    parse_response,
)
from actions_core.schemas.webhook import (
    GooglePayload,
    SystemIntent,
    WebhookContext,
    WebhookResponse,
)


__all__ = [
    "ActionContext",
    "ActionResponse",
    "AppResponse",
    "BasicCard",
    "DialogResponse",
    "DirectResponse",
    "ExpectedInput",
    "ExpectedIntent",
    "FinalResponse",
    "GooglePayload",
    "HelperIntent",
    "InputPrompt",
    "RichResponse",
    "RichResponseItem",
    "SimpleResponse",
    "Suggestion",
    "SystemIntent",
    "WebhookContext",
    "WebhookResponse",
    "parse_response",
]
