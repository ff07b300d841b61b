from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from .log import get_logger
from .models import ValidationStatus

T = TypeVar("T")

logger = get_logger(__name__)


class Rule(Generic[T]):
    """A single business requirement on a value of type `T`.

    `message_template` is what the user sees when the rule is not satisfied.
    By convention the field name (or equivalent) is prepended elsewhere, so
    templates read like " is a required field".

    `is_satisfied_on_error` decides the outcome when `predicate` raises. It
    defaults to True to cut down on None checks; rules that must reject
    missing values set it to False.
    """

    def __init__(
        self,
        predicate: Callable[[T], bool],
        message_template: str,
        is_satisfied_on_error: bool = True,
    ):
        self.predicate = predicate
        self.message_template = message_template
        self.is_satisfied_on_error = is_satisfied_on_error
        self.explicitly_valid_values: List[T] = []

    def or_it_is(self, *allowed_values: T) -> "Rule[T]":
        """Values added here satisfy the rule without being passed to the predicate."""
        self.explicitly_valid_values.extend(allowed_values)
        return self

    def run(
        self,
        value: T,
        key: Optional[str] = None,
        message_prefix: Optional[str] = None,
    ) -> ValidationStatus:
        key = key or ""
        message_prefix = message_prefix or ""
        return ValidationStatus.evaluate(
            self._is_satisfied_by(value, key),
            message_prefix + self.message_template,
            key,
        )

    def _is_satisfied_by(self, value: T, key: str) -> bool:
        try:
            # A value whose comparison raises falls back like a raising predicate.
            if value in self.explicitly_valid_values:
                return True
            return bool(self.predicate(value))
        except Exception as exc:
            logger.debug(
                "rule_predicate_error",
                key=key,
                message_template=self.message_template,
                error=repr(exc),
                satisfied=self.is_satisfied_on_error,
            )
            return self.is_satisfied_on_error
