"""Assertions for validator test suites.

They use plain `assert`, so under pytest a failure shows the pretty-printed
errors of the status under test.
"""

from __future__ import annotations

from .models import Severity, ValidationStatus


def all_errors_pretty_printed(result: ValidationStatus) -> str:
    lines = ["Errors were:"]
    for key, messages in result.messages.items():
        lines.append(key)
        lines.extend("\t" + message for message in messages)
    return "\n".join(lines)


def assert_single_data_error(result: ValidationStatus, expected_key: str, expected_substring: str) -> None:
    """Exactly one message, keyed by `expected_key`, containing `expected_substring`."""
    assert result.severity == Severity.DATA_ERROR, all_errors_pretty_printed(result)
    non_empty = {key: messages for key, messages in result.messages.items() if messages}
    count = sum(len(m) for m in non_empty.values())
    assert count > 0, "There were no error messages.\n" + all_errors_pretty_printed(result)
    assert len(non_empty) == 1 and count == 1, "There were too many errors.\n" + all_errors_pretty_printed(result)
    ((key, (message,)),) = non_empty.items()
    assert key == expected_key, all_errors_pretty_printed(result)
    assert expected_substring in message, all_errors_pretty_printed(result)


def assert_some_data_error(result: ValidationStatus, expected_key: str, expected_substring: str) -> None:
    assert result.severity == Severity.DATA_ERROR, all_errors_pretty_printed(result)
    assert any(expected_substring in message for message in result.messages_for(expected_key)), (
        f"Expected error containing {expected_substring} not found. " + all_errors_pretty_printed(result)
    )


def assert_valid_status(result: ValidationStatus) -> None:
    assert result.is_success, "Expected success\n" + all_errors_pretty_printed(result)
    assert not result.messages, all_errors_pretty_printed(result)
