import os
import sys


# Put `src/backend` on sys.path so `import validation_engine` works.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from validation_engine.config import ValidatorConfigBase
from validation_engine.field import FieldValidations
from validation_engine.models import ValidationStatus
from validation_engine.registry import ValidatorRegistry
from validation_engine.validator import BaseValidator


class OrderConfig(ValidatorConfigBase):
    max_lines: int = 3


class OrderValidator(BaseValidator):
    validator_id = "ORDER"
    validator_title = "Order payload"
    config_model = OrderConfig

    def validate(self, data):
        prefix = self.config.message_prefix or ""
        return ValidationStatus.merge_all(
            FieldValidations("order_id")
            .add_rule(self.is_not_null())
            .add_rule(self.is_formatted_like_a_guid())
            .run(lambda: data["order_id"], prefix + "Order ID"),
            FieldValidations("customer")
            .add_rule(self.is_not_null())
            .add_rule(self.has_no_fewer_characters_than(3))
            .run(lambda: data["customer"], prefix + "Customer"),
            FieldValidations("lines")
            .add_rule(self.is_not_null())
            .add_rule(self.has_no_fewer_items_than(1, "line"))
            .add_rule(self.has_no_more_items_than(self.config.max_lines, "lines"))
            .add_rule(self.has_no_duplicate("SKUs", lambda line: line["sku"]))
            .run(lambda: data["lines"], prefix + "Lines"),
            self.for_each(lambda: data["lines"], self._validate_line),
        )

    def _validate_line(self, line, index):
        return ValidationStatus.merge_all(
            FieldValidations(f"lines[{index}].sku")
            .add_rule(self.is_not_null())
            .run(lambda: line["sku"], "SKU"),
            FieldValidations(f"lines[{index}].quantity", default=0)
            .add_rule(self.is_greater_than_or_equal_to(1))
            .add_rule(self.is_less_than_or_equal_to(100))
            .run(lambda: line["quantity"], "Quantity"),
        )


class ShippingValidator(BaseValidator):
    validator_id = "SHIPPING"
    validator_title = "Shipping address"

    def validate(self, data):
        return FieldValidations("country").add_rule(self.is_in(["CA", "US"], "supported country code")).run(
            lambda: data["shipping"]["country"], "Country"
        )


@pytest.fixture
def order_validator_cls():
    return OrderValidator


@pytest.fixture
def shipping_validator_cls():
    return ShippingValidator


@pytest.fixture
def fresh_registry():
    return ValidatorRegistry()


@pytest.fixture
def make_order():
    def _make(*, order_id="0f8fad5b-d9cb-469f-a165-70867728950e", customer="Ada Lovelace", lines=None, **extra):
        payload = {
            "order_id": order_id,
            "customer": customer,
            "lines": lines if lines is not None else [{"sku": "A-1", "quantity": 2}],
        }
        payload.update(extra)
        return payload

    return _make
