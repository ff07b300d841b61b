from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Union

from .config import EngineConfig
from .log import get_logger
from .models import Severity, ValidationReport, ValidationStatus, ValidatorResult
from .registry import registry
from .validator import BaseValidator

logger = get_logger(__name__)


class ValidatorRunner:
    def __init__(
        self,
        validators: Optional[Iterable[BaseValidator]] = None,
        config: Optional[EngineConfig] = None,
    ):
        self._validators = list(validators) if validators is not None else registry.create_all(config)

    def run(self, data: Any, *, validator_ids: Optional[set[str]] = None) -> ValidationReport:
        run_id = str(uuid.uuid4())
        results = []
        skipped = []
        for validator in self._validators:
            if validator_ids is not None and validator.validator_id not in validator_ids:
                continue
            if not validator.config.enabled:
                skipped.append(validator.validator_id)
                continue
            results.append(
                ValidatorResult(
                    validator_id=validator.validator_id,
                    validator_title=validator.validator_title,
                    status=validator.validate(data),
                )
            )

        totals: dict[Severity, int] = {}
        for res in results:
            totals[res.status.severity] = totals.get(res.status.severity, 0) + 1

        status = ValidationStatus.merge_all(*[res.status for res in results])
        logger.info(
            "validation_run",
            run_id=run_id,
            validators=len(results),
            skipped=len(skipped),
            severity=status.severity.value,
        )
        return ValidationReport(
            run_id=run_id,
            generated_at=datetime.now(timezone.utc),
            results=results,
            skipped=skipped,
            totals=totals,
            status=status,
        )

    def run_json(
        self,
        raw: Union[str, bytes],
        *,
        validator_ids: Optional[set[str]] = None,
    ) -> ValidationReport:
        """Decode `raw` and run the validators; undecodable input is a ParseError."""
        try:
            data = json.loads(raw)
        except ValueError as exc:
            run_id = str(uuid.uuid4())
            logger.info("validation_parse_error", run_id=run_id, error=str(exc))
            return ValidationReport(
                run_id=run_id,
                generated_at=datetime.now(timezone.utc),
                status=ValidationStatus.failure(Severity.PARSE_ERROR).with_message(
                    f"Payload is not valid JSON: {exc}"
                ),
            )
        return self.run(data, validator_ids=validator_ids)
