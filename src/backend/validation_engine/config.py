from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)


class ValidatorConfigBase(BaseModel):
    enabled: bool = True
    # Not applied by the engine; validators pass it as the `message_prefix` of their field runs.
    message_prefix: Optional[str] = None


class EngineConfig(BaseModel):
    """Per-deployment configuration for all validators.

    Validators pull their typed config via `get_validator_config`.
    """

    validators: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_validator_config(
        self,
        validator_id: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if validator_id not in self.validators:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.validators.get(validator_id, {})
        return model.model_validate(raw)
