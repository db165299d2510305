"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, isoval.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from isoval.domain.policy import ValidationPolicy

# --- isoval.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    enforce_occurrence: bool = True
    enforce_choice: bool = True

    def to_policy(self) -> ValidationPolicy:
        return ValidationPolicy(
            enforce_occurrence=self.enforce_occurrence,
            enforce_choice=self.enforce_choice,
        )


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    reject_unknown_elements: bool = True
    strip_whitespace: bool = True
    pretty_print: bool = True


class IsovalConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
