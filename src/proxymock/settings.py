from __future__ import annotations

import functools
import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import jsonschema

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"
SETTINGS_SCHEMA = SCHEMA_DIR / "mock_settings.schema.json"

_TRUTHY = {"1", "true", "yes", "on"}


@functools.lru_cache(maxsize=None)
def settings_validator() -> jsonschema.Draft202012Validator:
    """Validator for the bundled settings schema, loaded once per process."""
    with open(SETTINGS_SCHEMA, "r", encoding="utf-8") as f:
        schema = json.load(f)
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


@dataclass(frozen=True)
class MockSettings:
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MockSettings":
        settings_validator().validate(dict(data))
        return cls(
            debug=bool(data.get("debug", False)),
            log_level=str(data.get("log_level", "INFO")),
        )

    def to_mapping(self) -> dict[str, Any]:
        return {"debug": self.debug, "log_level": self.log_level}

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(
    config: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MockSettings:
    """Settings from ``config``, missing keys filled from the environment.

    ``PROXYMOCK_DEBUG`` and ``PROXYMOCK_LOG_LEVEL`` are consulted only for keys
    the mapping leaves out.
    """
    data = dict(config or {})
    environ = os.environ if environ is None else environ

    debug = environ.get("PROXYMOCK_DEBUG")
    if "debug" not in data and debug:
        data["debug"] = debug.strip().lower() in _TRUTHY
    log_level = environ.get("PROXYMOCK_LOG_LEVEL")
    if "log_level" not in data and log_level:
        data["log_level"] = log_level.strip().upper()

    return MockSettings.from_mapping(data)


__all__ = ["MockSettings", "SETTINGS_SCHEMA", "load_settings", "settings_validator"]
