from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from .log import get_logger
from .models import ValidationStatus
from .rule import Rule

T = TypeVar("T")

logger = get_logger(__name__)


class FieldValidations(Generic[T]):
    """The set of rules for one field, identified by `key`.

    Nothing runs until `run` is given a function that returns the field's
    value. If that function raises, `default` is validated instead (None
    unless the field declares a neutral value such as 0 or "").
    """

    def __init__(self, key: str, default: Optional[T] = None):
        self.key = key
        self.default = default
        self.rules: List[Rule[T]] = []

    def add_rule(self, rule: Rule[T]) -> "FieldValidations[T]":
        self.rules.append(rule)
        return self

    def add_predicate(
        self,
        predicate: Callable[[], bool],
        message: str,
        is_satisfied_on_error: bool = True,
    ) -> "FieldValidations[T]":
        # The predicate does not see the field's value; it checks a side condition.
        return self.add_rule(Rule(lambda _unused: predicate(), message, is_satisfied_on_error))

    def run(
        self,
        value_fn: Callable[[], T],
        message_prefix: Optional[str] = None,
    ) -> ValidationStatus:
        try:
            value = value_fn()
        except Exception as exc:
            logger.debug("field_value_error", key=self.key, error=repr(exc))
            value = self.default
        return ValidationStatus.merge_all(
            *[rule.run(value, self.key, message_prefix) for rule in self.rules]
        )
