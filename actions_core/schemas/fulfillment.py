"""
Actions on Google conversation webhook (v2) models.

These make up the direct wire format: the AppResponse that is sent to the
assistant platform without Dialogflow in between.
"""

from typing import Any, Optional

from pydantic import Field

from actions_core.schemas.base import WireModel


# =============================================================================
# Rich response building blocks
# =============================================================================


class SimpleResponse(WireModel):
    """Speech and display text for a single bubble."""

    text_to_speech: Optional[str] = None
    ssml: Optional[str] = None
    display_text: Optional[str] = None


class Image(WireModel):
    url: Optional[str] = None
    accessibility_text: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None


class OpenUrlAction(WireModel):
    url: Optional[str] = None


class Button(WireModel):
    title: Optional[str] = None
    open_url_action: Optional[OpenUrlAction] = None


class BasicCard(WireModel):
    """Card with text, an optional image and link buttons."""

    title: Optional[str] = None
    subtitle: Optional[str] = None
    formatted_text: Optional[str] = None
    image: Optional[Image] = None
    buttons: Optional[list[Button]] = None
    image_display_options: Optional[str] = None


class RichResponseItem(WireModel):
    """One item of a rich response.

    Only the common item kinds are typed; others pass through as extra fields.
    """

    simple_response: Optional[SimpleResponse] = None
    basic_card: Optional[BasicCard] = None


class Suggestion(WireModel):
    title: str


class LinkOutSuggestion(WireModel):
    destination_name: Optional[str] = None
    url: Optional[str] = None
    open_url_action: Optional[OpenUrlAction] = None


class RichResponse(WireModel):
    """Ordered items plus suggestion chips."""

    items: list[RichResponseItem] = Field(default_factory=list)
    suggestions: Optional[list[Suggestion]] = None
    link_out_suggestion: Optional[LinkOutSuggestion] = None


# =============================================================================
# AppResponse
# =============================================================================


class InputPrompt(WireModel):
    rich_initial_prompt: Optional[RichResponse] = None
    no_input_prompts: Optional[list[SimpleResponse]] = None


class ExpectedIntent(WireModel):
    """Intent the platform should resolve on the next turn."""

    intent: str
    input_value_data: Optional[dict[str, Any]] = None
    parameter_name: Optional[str] = None


class ExpectedInput(WireModel):
    input_prompt: Optional[InputPrompt] = None
    possible_intents: Optional[list[ExpectedIntent]] = None
    speech_biasing_hints: Optional[list[str]] = None


class FinalResponse(WireModel):
    rich_response: Optional[RichResponse] = None


class AppResponse(WireModel):
    """Top-level response of the direct wire format."""

    conversation_token: Optional[str] = None
    expect_user_response: Optional[bool] = None
    expected_inputs: Optional[list[ExpectedInput]] = None
    final_response: Optional[FinalResponse] = None
    is_in_sandbox: Optional[bool] = None
    user_storage: Optional[str] = None
    reset_user_storage: Optional[bool] = None
