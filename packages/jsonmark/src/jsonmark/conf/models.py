# jsonmark/conf/models.py
from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..codec.transform import MarkFormat
from ..constants import DEFAULT_DELIMITER, DEFAULT_MARKER, ON_UNKNOWN_KEEP

__all__ = ("CodecOptions",)


class CodecOptions(BaseModel):
    """
    Validated options for a single codec instance.

    Accepts either field names (``marker``) or the upper-case settings keys
    (``MARKER``), so a `Settings` mapping validates directly.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    marker: str = Field(DEFAULT_MARKER, alias="MARKER", min_length=1)
    delimiter: str = Field(DEFAULT_DELIMITER, alias="DELIMITER", min_length=1)
    on_unknown: Literal["keep", "raise"] = Field(ON_UNKNOWN_KEEP, alias="ON_UNKNOWN")
    ensure_ascii: bool = Field(False, alias="ENSURE_ASCII")
    include_builtins: bool = Field(True, alias="INCLUDE_BUILTINS")

    @model_validator(mode="after")
    def check_format(self) -> "CodecOptions":
        """Marker and delimiter must form an unambiguous marked string."""
        # InvalidMarkerError is a ValueError, so pydantic reports it as a ValidationError.
        self.mark_format()
        return self

    def mark_format(self) -> MarkFormat:
        return MarkFormat(marker=self.marker, delimiter=self.delimiter)

    @classmethod
    def resolve(cls, settings: Mapping[str, Any], **overrides: Any) -> "CodecOptions":
        """
        Merge `settings` with explicit overrides.

        Overrides set to None are ignored, so call sites can forward optional
        keyword arguments unchanged.
        """
        data = dict(settings.items())
        data.update({key.upper(): value for key, value in overrides.items() if value is not None})
        return cls.model_validate(data)
