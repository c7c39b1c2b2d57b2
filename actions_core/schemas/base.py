"""
Base model for webhook wire objects.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Wire object with camelCase keys.

    Unknown fields are kept so callers can pass through parts of the wire
    format that are not modelled here.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to a plain dict using wire keys, leaving out unset values."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
