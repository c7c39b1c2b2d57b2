"""
Response models handed to the serializer.

A response is either a DialogResponse (answered through Dialogflow) or a
DirectResponse (answered straight to the Actions on Google platform). The
two are a closed union discriminated by the ``kind`` field.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from actions_core.io.encoding import to_json
from actions_core.schemas.fulfillment import (
    AppResponse,
    ExpectedInput,
    ExpectedIntent,
    FinalResponse,
    InputPrompt,
    RichResponse,
    SimpleResponse,
)
from actions_core.schemas.webhook import WebhookResponse


TEXT_INTENT = "actions.intent.TEXT"


class ActionContext(BaseModel):
    """Named piece of conversation state that lives for ``lifespan`` turns.

    ``name`` is either bare or already namespaced as
    ``<session id>/contexts/<name>``.
    """

    name: str
    lifespan: int
    parameters: Optional[dict[str, Any]] = None


class HelperIntent(BaseModel):
    """Request for a built-in platform capability such as sign-in."""

    intent: str
    input_value_data: dict[str, Any] = Field(default_factory=dict)


class DirectResponse(BaseModel):
    """Assistant response sent without Dialogflow wrapping.

    The same object is embedded as the google payload of a DialogResponse.
    ``app_response`` holds the finished wire object once
    ``prepare_app_response`` has run or when the caller supplies one.
    """

    kind: Literal["direct"] = "direct"
    expect_user_response: bool = True
    rich_response: Optional[RichResponse] = None
    no_input_prompts: Optional[list[SimpleResponse]] = None
    helper_intents: list[HelperIntent] = Field(default_factory=list)
    conversation_data: Optional[Any] = None
    user_storage: Optional[Any] = None
    app_response: Optional[AppResponse] = None

    def prepare_app_response(self) -> AppResponse:
        """Build the AppResponse on first call and return it on every call."""
        if self.app_response is not None:
            return self.app_response

        if self.expect_user_response:
            possible_intents = [
                ExpectedIntent(
                    intent=helper.intent,
                    input_value_data=helper.input_value_data,
                )
                for helper in self.helper_intents
            ] or [ExpectedIntent(intent=TEXT_INTENT)]
            app_response = AppResponse(
                expect_user_response=True,
                expected_inputs=[
                    ExpectedInput(
                        input_prompt=InputPrompt(
                            rich_initial_prompt=self.rich_response,
                            no_input_prompts=self.no_input_prompts,
                        ),
                        possible_intents=possible_intents,
                    )
                ],
            )
        else:
            app_response = AppResponse(
                expect_user_response=False,
                final_response=FinalResponse(rich_response=self.rich_response),
            )

        if self.conversation_data is not None:
            app_response.conversation_token = to_json(self.conversation_data)
        if self.user_storage is not None:
            app_response.user_storage = to_json({"data": self.user_storage})

        self.app_response = app_response
        return app_response


class DialogResponse(BaseModel):
    """Response answered through a Dialogflow fulfillment webhook."""

    kind: Literal["dialog"] = "dialog"
    google_payload: Optional[DirectResponse] = None
    webhook_response: WebhookResponse = Field(default_factory=WebhookResponse)
    conversation_data: Optional[Any] = None
    contexts: list[ActionContext] = Field(default_factory=list)


ActionResponse = Annotated[
    Union[DialogResponse, DirectResponse],
    Field(discriminator="kind"),
]

_response_adapter: TypeAdapter[ActionResponse] = TypeAdapter(ActionResponse)


def parse_response(data: Any) -> Union[DialogResponse, DirectResponse]:
    """Validate a plain dict (or JSON string) into one of the response kinds."""
    if isinstance(data, (str, bytes)):
        return _response_adapter.validate_json(data)
    return _response_adapter.validate_python(data)
