from validation_engine.field import FieldValidations
from validation_engine.models import Severity, ValidationStatus
from validation_engine.rule import Rule
from validation_engine.testing import assert_single_data_error, assert_valid_status
from validation_engine.validator import BaseValidator


def _name_field():
    return (
        FieldValidations("name")
        .add_rule(BaseValidator.is_not_null())
        .add_rule(BaseValidator.has_no_fewer_characters_than(3))
    )


def _boom():
    raise KeyError("name")


def test_short_name_reports_only_the_length_rule():
    result = _name_field().run(lambda: "ab", "Name")
    assert result.severity == Severity.DATA_ERROR
    assert result.messages_by_key == {"name": ("Name must be at least 3 characters long",)}


def test_missing_name_reports_only_the_required_rule():
    # The length rule raises on None and is satisfied on error.
    result = _name_field().run(lambda: None, "Name")
    assert result.severity == Severity.DATA_ERROR
    assert result.messages_for("name") == ["Name is a required field"]


def test_valid_name():
    assert_valid_status(_name_field().run(lambda: "Ada", "Name"))


def test_raising_accessor_validates_the_default_instead():
    result = _name_field().run(_boom, "Name")
    assert_single_data_error(result, "name", "is a required field")


def test_raising_accessor_uses_declared_neutral_value():
    field = FieldValidations("quantity", default=0).add_rule(Rule(lambda q: q > 0, " must be positive"))
    result = field.run(_boom, "Quantity")
    assert_single_data_error(result, "quantity", "Quantity must be positive")


def test_messages_follow_rule_order():
    field = (
        FieldValidations("code")
        .add_rule(Rule(lambda v: False, " first"))
        .add_rule(Rule(lambda v: True, " never"))
        .add_rule(Rule(lambda v: False, " second"))
    )
    assert field.run(lambda: "x", "Code").messages_for("code") == ["Code first", "Code second"]


def test_add_predicate_checks_a_side_condition():
    payload = {"start": 5, "end": 2}
    field = FieldValidations("end").add_predicate(lambda: payload["end"] >= payload["start"], " must not precede start")
    assert_single_data_error(field.run(lambda: payload["end"], "End"), "end", "End must not precede start")


def test_add_predicate_error_fallback():
    field = (
        FieldValidations("end")
        .add_predicate(lambda: {}["missing"], " passes on error")
        .add_predicate(lambda: {}["missing"], " fails on error", is_satisfied_on_error=False)
    )
    assert field.run(lambda: 1).messages_for("end") == [" fails on error"]


def test_field_without_rules_is_valid():
    assert FieldValidations("anything").run(_boom) == ValidationStatus.success()


def test_add_rule_returns_the_same_field():
    field = FieldValidations("k")
    assert field.add_rule(BaseValidator.is_not_null()) is field
    assert len(field.rules) == 1
