from __future__ import annotations

from typing import Annotated, List

from pydantic import BaseModel, Field, StringConstraints, model_validator

LABEL_REGEX = r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
HOST_PATTERN_REGEX = rf"^(?:\*\.)?{LABEL_REGEX}(?:\.{LABEL_REGEX})*$"

HostPattern = Annotated[str, StringConstraints(pattern=HOST_PATTERN_REGEX)]


class ParseResult(BaseModel):
    patterns: List[HostPattern] = Field(default_factory=list)
    is_valid: bool = True
    errors: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_consistency(self) -> "ParseResult":
        if self.is_valid != (not self.errors):
            raise ValueError("is_valid must be true exactly when there are no errors")
        return self
