from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegistryConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # When false, registering an existing name raises instead of replacing it.
    allow_overwrite: bool = True
    # Dotted module paths whose public functions become named traversals.
    traversal_modules: List[str] = Field(default_factory=list)
    prefix: str = ""

    @field_validator("traversal_modules")
    @classmethod
    def _strip_modules(cls, value: List[str]) -> List[str]:
        modules = [item.strip() for item in value]
        if any(not item for item in modules):
            raise ValueError("traversal_modules entries cannot be empty")
        return modules

    @field_validator("prefix")
    @classmethod
    def _validate_prefix(cls, value: str) -> str:
        if value and not value.isidentifier():
            raise ValueError(f"prefix must be a valid identifier, got {value!r}")
        return value
