"""
Output context bookkeeping for the dialog wire format.
"""

import logging
from typing import Iterable, Optional

from actions_core.schemas.responses import ActionContext
from actions_core.schemas.webhook import WebhookContext


logger = logging.getLogger(__name__)


def namespaced(name: str, session_id: str) -> str:
    """Prefix a context name with ``<session id>/contexts/`` unless present."""
    namespace = f"{session_id}/contexts/"
    if name.startswith(namespace):
        return name
    return namespace + name


class ContextAccumulator:
    """
    Ordered set of output contexts that ActionContexts are merged into.

    Lookups match the stored name exactly, without namespacing the incoming
    name. A match is updated in place; anything else is appended under its
    namespaced name. The source list is copied, never modified.

    Attributes:
        session_id: Session used to namespace appended contexts.
    """

    def __init__(
        self,
        session_id: str,
        contexts: Optional[Iterable[WebhookContext]] = None,
    ) -> None:
        self.session_id = session_id
        self._present = contexts is not None
        self._entries: list[WebhookContext] = []
        self._positions: dict[Optional[str], int] = {}
        for context in contexts or []:
            self._append(context.model_copy(deep=True))

    def _append(self, entry: WebhookContext) -> None:
        # First entry wins when names repeat
        self._positions.setdefault(entry.name, len(self._entries))
        self._entries.append(entry)

    def merge(self, context: ActionContext) -> None:
        """Apply one context: overwrite a same-named entry or append."""
        self._present = True
        position = self._positions.get(context.name)
        if position is not None:
            entry = self._entries[position]
            entry.lifespan_count = context.lifespan
            entry.parameters = context.parameters
            logger.debug(f"Updated output context {entry.name}")
            return

        entry = WebhookContext(
            name=namespaced(context.name, self.session_id),
            lifespan_count=context.lifespan,
            parameters=context.parameters,
        )
        self._append(entry)
        logger.debug(f"Added output context {entry.name}")

    def to_list(self) -> Optional[list[WebhookContext]]:
        """Materialize the contexts, or None if there never was a list."""
        if not self._present:
            return None
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
