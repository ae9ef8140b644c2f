"""Pydantic model for a single vocabulary entry"""

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """A native term and its foreign-language equivalent.

    Serialized with the field names ``Native`` and ``Foreign``. Both the
    Python names and the serialized names are accepted on construction.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    native: str = Field(alias="Native", description="Word in the native language")
    foreign: str = Field(alias="Foreign", description="Word in the foreign language")
