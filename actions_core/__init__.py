"""
Actions Core - webhook response serialization for conversational actions.

Converts dialog and direct responses into Dialogflow and Actions on Google
wire JSON.
"""

__version__ = "0.1.0"

from actions_core.errors import SerializationError, UnsupportedResponseKind
from actions_core.io.serializer import ResponseSerializer
from actions_core.schemas.responses import (
    ActionContext,
    ActionResponse,
    DialogResponse,
    DirectResponse,
    HelperIntent,
    parse_response,
)

__all__ = [
    "ActionContext",
    "ActionResponse",
    "DialogResponse",
    "DirectResponse",
    "HelperIntent",
    "ResponseSerializer",
    "SerializationError",
    "UnsupportedResponseKind",
    "parse_response",
]
