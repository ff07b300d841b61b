from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field


class Severity(str, Enum):
    VALID = "Valid"
    DATA_ERROR = "DataError"
    PARSE_ERROR = "ParseError"


@dataclass(frozen=True)
class SeverityOrdering:
    order: Dict[Severity, int]

    @classmethod
    def default(cls) -> "SeverityOrdering":
        # Higher wins.
        return cls(
            order={
                Severity.PARSE_ERROR: 30,
                Severity.DATA_ERROR: 20,
                Severity.VALID: 10,
            }
        )

    def worst(self, severities: List[Severity]) -> Severity:
        if not severities:
            return Severity.VALID
        return max(severities, key=lambda s: self.order.get(s, 0))


_ORDERING = SeverityOrdering.default()


class ValidationStatus(BaseModel):
    """The validation status for some chunk of arbitrarily complex data.

    `severity` is Valid, ParseError (e.g. malformed JSON) or DataError (e.g. a
    business rule violation). Messages are grouped by key; messages attached
    without a key are grouped under the empty string.
    """

    severity: Severity = Severity.VALID
    messages: Dict[str, List[str]] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.severity == Severity.VALID

    @property
    def messages_by_key(self) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType({key: tuple(msgs) for key, msgs in self.messages.items()})

    def messages_for(self, key: str) -> List[str]:
        return list(self.messages.get(key, []))

    def with_message(self, message: str, key: Optional[str] = "") -> "ValidationStatus":
        """Attach `message` under `key` (or the empty string) and return this status."""
        self.messages.setdefault(key or "", []).append(message)
        return self

    def merge(self, other: "ValidationStatus") -> "ValidationStatus":
        return ValidationStatus.merge_all(self, other)

    @classmethod
    def merge_all(cls, *statuses: "ValidationStatus") -> "ValidationStatus":
        """Merge statuses into a new one.

        The result carries the most severe input severity and, per key, the
        concatenation of every input's messages in input order. No inputs
        gives a Valid status.
        """
        merged: Dict[str, List[str]] = {}
        for status in statuses:
            for key, msgs in status.messages.items():
                merged.setdefault(key, []).extend(msgs)
        severity = _ORDERING.worst([status.severity for status in statuses])
        return cls(severity=severity, messages=merged)

    @classmethod
    def success(cls) -> "ValidationStatus":
        return cls(severity=Severity.VALID)

    @classmethod
    def failure(cls, severity: Severity = Severity.DATA_ERROR) -> "ValidationStatus":
        return cls(severity=severity)

    @classmethod
    def evaluate(cls, is_successful: bool, message: str, key: Optional[str] = "") -> "ValidationStatus":
        if is_successful:
            return cls.success()
        return cls.failure().with_message(message, key)


class ValidatorResult(BaseModel):
    validator_id: str
    validator_title: str = ""

    status: ValidationStatus = Field(default_factory=ValidationStatus)


class ValidationReport(BaseModel):
    run_id: str
    generated_at: datetime

    results: List[ValidatorResult] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
    totals: Dict[Severity, int] = Field(default_factory=dict)
    status: ValidationStatus = Field(default_factory=ValidationStatus)
