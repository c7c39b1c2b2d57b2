"""
Dialogflow v2 webhook response models.

The dialog wire format: a WebhookResponse carrying output contexts and a
platform payload, of which the "google" entry is a GooglePayload.
"""

from typing import Any, Optional

from actions_core.schemas.base import WireModel
from actions_core.schemas.fulfillment import RichResponse, SimpleResponse


class WebhookContext(WireModel):
    """Output context as Dialogflow expects it."""

    name: Optional[str] = None
    lifespan_count: Optional[int] = None
    parameters: Optional[dict[str, Any]] = None


class EventInput(WireModel):
    name: Optional[str] = None
    language_code: Optional[str] = None
    parameters: Optional[dict[str, Any]] = None


class WebhookResponse(WireModel):
    """Response returned to Dialogflow from a fulfillment webhook."""

    fulfillment_text: Optional[str] = None
    fulfillment_messages: Optional[list[dict[str, Any]]] = None
    source: Optional[str] = None
    payload: Optional[dict[str, Any]] = None
    output_contexts: Optional[list[WebhookContext]] = None
    followup_event_input: Optional[EventInput] = None


class SystemIntent(WireModel):
    """Helper intent requested through Dialogflow's google payload."""

    intent: str = ""
    data: dict[str, Any] = {}


class GooglePayload(WireModel):
    """Assistant payload embedded under payload.google."""

    expect_user_response: bool = False
    rich_response: Optional[RichResponse] = None
    no_input_prompts: Optional[list[SimpleResponse]] = None
    is_ssml: bool = False
    system_intent: Optional[SystemIntent] = None
    user_storage: Optional[str] = None
