from __future__ import annotations

from typing import Dict, Iterator, Optional, Type, TypeVar

from .config import EngineConfig
from .validator import BaseValidator

V = TypeVar("V", bound=Type[BaseValidator])


class ValidatorRegistry:
    """Validator classes keyed by `validator_id`, in registration order."""

    def __init__(self):
        self._classes: Dict[str, Type[BaseValidator]] = {}

    def __contains__(self, validator_id: object) -> bool:
        return validator_id in self._classes

    def __iter__(self) -> Iterator[Type[BaseValidator]]:
        return iter(list(self._classes.values()))

    def __len__(self) -> int:
        return len(self._classes)

    def register(self, validator_cls: V) -> V:
        """Add a validator class; usable as a class decorator."""
        validator_id = getattr(validator_cls, "validator_id", None)
        if not validator_id:
            raise ValueError(f"{validator_cls.__name__} is missing validator_id")
        existing = self._classes.get(validator_id)
        if existing is not None:
            raise ValueError(
                f"Duplicate validator_id {validator_id!r}: already registered by {existing.__name__}"
            )
        self._classes[validator_id] = validator_cls
        return validator_cls

    def lookup(self, validator_id: str) -> Type[BaseValidator]:
        try:
            return self._classes[validator_id]
        except KeyError:
            raise KeyError(f"Unknown validator_id: {validator_id}") from None

    def create(self, validator_id: str, config: Optional[EngineConfig] = None) -> BaseValidator:
        validator_cls = self.lookup(validator_id)
        config = config or EngineConfig()
        return validator_cls(config.get_validator_config(validator_id, validator_cls.config_model))

    def create_all(self, config: Optional[EngineConfig] = None) -> list[BaseValidator]:
        return [self.create(validator_id, config) for validator_id in self._classes]


registry = ValidatorRegistry()
register_validator = registry.register
