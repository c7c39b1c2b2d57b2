"""
Serialize responses into Dialogflow or Actions on Google webhook JSON.
"""

import logging
from typing import Any, Optional, Union

from actions_core.config import CoreSettings, get_core_settings
from actions_core.errors import UnsupportedResponseKind
from actions_core.io.contexts import ContextAccumulator
from actions_core.io.encoding import to_json
from actions_core.io.payload import build_google_payload
from actions_core.metadata import library_metadata
from actions_core.schemas.responses import ActionContext, DialogResponse, DirectResponse


logger = logging.getLogger(__name__)


class ResponseSerializer:
    """
    Turns a DialogResponse or DirectResponse into the JSON body for its
    wire format.

    The instance only holds the session id and the metadata flag, so one
    serializer can be shared across threads.

    Attributes:
        session_id: Dialogflow session used to namespace output contexts.
        include_version_metadata: Whether library metadata is attached.
    """

    def __init__(
        self,
        session_id: Optional[str] = "",
        include_version_metadata: Optional[bool] = None,
        settings: Optional[CoreSettings] = None,
    ) -> None:
        self._settings = settings or get_core_settings()
        self._session_id = session_id or ""
        if include_version_metadata is None:
            include_version_metadata = self._settings.include_version_metadata
        self._include_version_metadata = include_version_metadata

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def include_version_metadata(self) -> bool:
        return self._include_version_metadata

    def serialize(self, response: Union[DialogResponse, DirectResponse]) -> str:
        """
        Serialize a response in the format that matches its kind.

        Args:
            response: DialogResponse or DirectResponse.

        Returns:
            JSON document as a string.

        Raises:
            UnsupportedResponseKind: If response is neither kind.
        """
        if isinstance(response, (DialogResponse, DirectResponse)):
            if response.kind == "dialog":
                logger.debug(f"Serializing dialog response for session {self._session_id!r}")
                return self._serialize_dialog(response)
            if response.kind == "direct":
                logger.debug("Serializing direct response")
                return self._serialize_direct(response)

        logger.warning("Unable to serialize the response.")
        raise UnsupportedResponseKind(response)

    to_json_v2 = serialize

    def _library_metadata(self) -> dict[str, str]:
        return library_metadata(self._settings.library_language)

    def _serialize_dialog(self, response: DialogResponse) -> str:
        webhook_response = response.webhook_response.model_copy(deep=True)

        if response.google_payload is not None:
            google_payload = build_google_payload(response.google_payload)
            webhook_response.payload = {"google": google_payload.to_wire()}

        contexts = ContextAccumulator(self._session_id, webhook_response.output_contexts)
        if response.conversation_data is not None:
            contexts.merge(
                ActionContext(
                    name=self._settings.app_data_context,
                    lifespan=self._settings.app_data_context_lifespan,
                    parameters={"data": to_json(response.conversation_data)},
                )
            )
        for context in response.contexts:
            contexts.merge(context)
        webhook_response.output_contexts = contexts.to_list()

        webhook_map: dict[str, Any] = webhook_response.to_wire()
        if self._include_version_metadata:
            webhook_map["metadata"] = {"google_library": self._library_metadata()}
        return to_json(webhook_map)

    def _serialize_direct(self, response: DirectResponse) -> str:
        app_response = response.prepare_app_response()
        app_response_map: dict[str, Any] = app_response.to_wire()

        if self._include_version_metadata:
            app_response_map["ResponseMetadata"] = {
                "GoogleLibraryInfo": self._library_metadata()
            }
        return to_json(app_response_map)
