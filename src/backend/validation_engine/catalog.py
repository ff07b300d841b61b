from __future__ import annotations

import argparse
import importlib
import json
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel

from .log import configure_logging, get_logger
from .registry import ValidatorRegistry, registry
from .settings import get_engine_settings

logger = get_logger(__name__)


class ValidatorCatalogEntry(BaseModel):
    validator_id: str
    validator_title: str = ""

    module: str
    class_name: str

    config_model: str
    config_schema: Dict[str, Any]


def build_catalog(source: Optional[ValidatorRegistry] = None) -> List[ValidatorCatalogEntry]:
    if source is None:
        source = registry
    entries: List[ValidatorCatalogEntry] = []
    for validator_cls in source:
        cfg_model = validator_cls.config_model
        entries.append(
            ValidatorCatalogEntry(
                validator_id=validator_cls.validator_id,
                validator_title=getattr(validator_cls, "validator_title", ""),
                module=getattr(validator_cls, "__module__", ""),
                class_name=getattr(validator_cls, "__name__", ""),
                config_model=cfg_model.__name__,
                config_schema=cfg_model.model_json_schema(),
            )
        )

    entries.sort(key=lambda e: e.validator_id)
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    return yaml.safe_dump(catalog, sort_keys=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a validator catalog from the registry.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    parser.add_argument(
        "--module",
        action="append",
        default=[],
        help="Module to import before building the catalog, so its validators register (repeatable).",
    )
    args = parser.parse_args(argv)

    configure_logging(get_engine_settings())
    for module_name in args.module:
        importlib.import_module(module_name)
        logger.debug("catalog_module_imported", module=module_name)

    catalog = [e.model_dump() for e in build_catalog()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
