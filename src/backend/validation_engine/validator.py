from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Any, Callable, Iterable, List, Optional, Type

from .config import ValidatorConfigBase
from .log import get_logger
from .models import ValidationStatus
from .rule import Rule

logger = get_logger(__name__)

_GUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _count(collection: Iterable[Any]) -> int:
    if isinstance(collection, Sized):
        return len(collection)
    return sum(1 for _ in collection)


def _distinct_count(values: Iterable[Any]) -> int:
    hashable: set = set()
    unhashable: List[Any] = []
    for value in values:
        try:
            hashable.add(value)
        except TypeError:
            if value not in unhashable:
                unhashable.append(value)
    return len(hashable) + len(unhashable)


class BaseValidator(ABC):
    """Parent class for payload validators.

    Subclasses declare `validator_id` and implement `validate`. The static
    helpers below build the common rules and aggregate collections.
    """

    validator_id: str
    validator_title: str = ""
    config_model: Type[ValidatorConfigBase] = ValidatorConfigBase

    def __init__(self, config: Optional[ValidatorConfigBase] = None):
        if not getattr(self, "validator_id", None):
            raise ValueError("Validator must define validator_id")
        self.config = config if config is not None else self.config_model()

    @abstractmethod
    def validate(self, data: Any) -> ValidationStatus:  # pragma: no cover
        raise NotImplementedError

    @staticmethod
    def for_each(
        collection_fn: Callable[[], Optional[Iterable[Any]]],
        validation_method: Callable[[Any, int], ValidationStatus],
    ) -> ValidationStatus:
        """Merge the result of `validation_method(item, index)` over a collection.

        A collection function that raises or returns None counts as empty.
        """
        try:
            collection = collection_fn()
        except Exception as exc:
            logger.debug("collection_value_error", error=repr(exc))
            collection = None
        if collection is None:
            collection = ()
        return ValidationStatus.merge_all(
            *[validation_method(item, index) for index, item in enumerate(collection)]
        )

    # object rules

    @staticmethod
    def is_not_null() -> Rule[Any]:
        return Rule(lambda value: value is not None, " is a required field", False)

    @staticmethod
    def is_in(valid_values: Iterable[Any], item_label: str) -> Rule[Any]:
        valid_values = list(valid_values)
        return Rule(
            lambda value: value is not None and value in valid_values,
            f" must be a {item_label}",
            False,
        )

    # string rules

    @staticmethod
    def has_no_fewer_characters_than(minimum: int) -> Rule[str]:
        plural = "s" if minimum > 1 else ""
        return Rule(
            lambda s: len(s) >= minimum,
            f" must be at least {minimum} character{plural} long",
        )

    @staticmethod
    def has_no_more_characters_than(maximum: int) -> Rule[str]:
        return Rule(
            lambda s: len(s) <= maximum,
            f" must be no more than {maximum} characters long",
        )

    @staticmethod
    def is_formatted_like(regex: str, form_label: Optional[str] = None) -> Rule[str]:
        pattern = re.compile(regex)
        if form_label and form_label.strip():
            message = f" must be of the form {form_label}"
        else:
            message = " did not match required format"
        return Rule(lambda s: pattern.search(s) is not None, message)

    @staticmethod
    def is_formatted_like_a_guid() -> Rule[str]:
        # Only the hyphenated 8-4-4-4-12 form; None is not a GUID.
        return Rule(
            lambda s: isinstance(s, str) and _GUID_PATTERN.fullmatch(s) is not None,
            " must be a GUID",
        )

    # collection rules

    @staticmethod
    def has_no_fewer_items_than(minimum: int, item_label: str = "") -> Rule[Iterable[Any]]:
        return Rule(
            lambda collection: _count(collection) >= minimum,
            f" must contain at least {minimum} {item_label}".rstrip(),
        )

    @staticmethod
    def has_no_more_items_than(maximum: int, item_label: str = "") -> Rule[Iterable[Any]]:
        return Rule(
            lambda collection: _count(collection) <= maximum,
            f" must contain no more than {maximum} {item_label}".rstrip(),
        )

    @staticmethod
    def has_no_duplicate(
        plural_property_label: str = "items",
        property_selector: Optional[Callable[[Any], Any]] = None,
    ) -> Rule[Iterable[Any]]:
        """Items must be unique by identity or by `property_selector`.

        A selector that raises projects the item to None, so two items whose
        projection raises count as duplicates of each other.
        """
        selector = property_selector or (lambda item: item)

        def safe_selector(item: Any) -> Any:
            try:
                return selector(item)
            except Exception as exc:
                logger.debug("property_selector_error", error=repr(exc))
                return None

        def all_unique(collection: Iterable[Any]) -> bool:
            items = list(collection)
            return len(items) == _distinct_count(safe_selector(item) for item in items)

        return Rule(all_unique, f" must have unique {plural_property_label}")

    # number rules

    @staticmethod
    def is_greater_than_or_equal_to(minimum: Any) -> Rule[Any]:
        return Rule(
            lambda value: value is None or value >= minimum,
            f" must be greater than or equal to {minimum}",
            False,
        )

    @staticmethod
    def is_less_than_or_equal_to(maximum: Any) -> Rule[Any]:
        return Rule(
            lambda value: value is None or value <= maximum,
            f" must be less than or equal to {maximum}",
            False,
        )
