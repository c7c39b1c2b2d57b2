"""
Build the google payload embedded in Dialogflow webhook responses.

Each lookup into the nested AppResponse is a named helper that returns None
when a hop is missing, including empty lists where a first element is
expected.
"""

from typing import Any, Optional, Sequence, TypeVar

from actions_core.io.encoding import to_json
from actions_core.schemas.fulfillment import (
    AppResponse,
    ExpectedInput,
    ExpectedIntent,
    RichResponse,
)
from actions_core.schemas.responses import DirectResponse
from actions_core.schemas.webhook import GooglePayload, SystemIntent


T = TypeVar("T")


def _first(items: Optional[Sequence[T]]) -> Optional[T]:
    if not items:
        return None
    return items[0]


def first_expected_input(app_response: AppResponse) -> Optional[ExpectedInput]:
    return _first(app_response.expected_inputs)


def initial_prompt(expected_input: Optional[ExpectedInput]) -> Optional[RichResponse]:
    """Rich initial prompt of an expected input."""
    if expected_input is None or expected_input.input_prompt is None:
        return None
    return expected_input.input_prompt.rich_initial_prompt


def first_possible_intent(
    expected_input: Optional[ExpectedInput],
) -> Optional[ExpectedIntent]:
    if expected_input is None:
        return None
    return _first(expected_input.possible_intents)


def final_rich_response(app_response: AppResponse) -> Optional[RichResponse]:
    if app_response.final_response is None:
        return None
    return app_response.final_response.rich_response


def system_intent(
    intent: str, data: Optional[dict[str, Any]]
) -> SystemIntent:
    return SystemIntent(intent=intent, data=data or {})


def build_google_payload(source: DirectResponse) -> GooglePayload:
    """
    Map an assistant response onto Dialogflow's google payload.

    A prepared AppResponse takes precedence over the response's own fields.
    isSsml is always False and user storage is wrapped as ``{"data": ...}``
    and encoded to a JSON string.

    Args:
        source: Response whose content goes under payload.google.

    Returns:
        The payload, ready to be dumped with ``to_wire``.
    """
    payload = GooglePayload(expect_user_response=source.expect_user_response)
    app_response = source.app_response

    if app_response is not None:
        if source.expect_user_response:
            expected_input = first_expected_input(app_response)
            payload.rich_response = initial_prompt(expected_input)
            expected_intent = first_possible_intent(expected_input)
            if expected_intent is not None:
                payload.system_intent = system_intent(
                    expected_intent.intent, expected_intent.input_value_data
                )
        else:
            payload.rich_response = final_rich_response(app_response)
    else:
        payload.rich_response = source.rich_response
        helper_intent = _first(source.helper_intents)
        if helper_intent is not None:
            payload.system_intent = system_intent(
                helper_intent.intent, helper_intent.input_value_data
            )

    if source.user_storage is not None:
        payload.user_storage = to_json({"data": source.user_storage})
    payload.is_ssml = False
    return payload
