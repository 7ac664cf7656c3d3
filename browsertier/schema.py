"""Validation of raw user-agent and configuration data.

Loaders and user-agent parsers hand over plain mappings; this module validates
them with pydantic record models and turns them into model values, or raises
``SchemaValidationError`` naming the field and the violated constraint.
Versions must be real integers: strings, floats and booleans are rejected,
never coerced.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated, Any

from pydantic import BaseModel, Field, StrictInt, TypeAdapter, ValidationError

from .exceptions import SchemaValidationError
from .model import (
    Browser,
    BrowserInfo,
    ConfigEntry,
    ConfigurationTable,
    OperatingSystem,
    OsInfo,
    SupportTier,
    UserAgent,
)
from .table import build_table
from .util.debug import debug_log

Version = Annotated[StrictInt, Field(ge=0)]


class BrowserRecord(BaseModel):
    model_config = {"frozen": True}

    name: Browser
    version: Version


class OsRecord(BaseModel):
    model_config = {"frozen": True}

    name: OperatingSystem
    version: Version


class UserAgentRecord(BaseModel):
    model_config = {"frozen": True}

    browser: BrowserRecord
    os: OsRecord

    def to_user_agent(self) -> UserAgent:
        return UserAgent(
            browser=BrowserInfo(name=self.browser.name, version=self.browser.version),
            os=OsInfo(name=self.os.name, version=self.os.version),
        )


class ConfigRecord(BaseModel):
    model_config = {"frozen": True}

    browser_name: Browser
    os_name: OperatingSystem
    support_level: SupportTier
    minimum_allowed_version: Version
    minimum_fully_supported_version: Version

    def to_entry(self) -> ConfigEntry:
        return ConfigEntry(
            browser_name=self.browser_name,
            os_name=self.os_name,
            support_level=self.support_level,
            minimum_allowed_version=self.minimum_allowed_version,
            minimum_fully_supported_version=self.minimum_fully_supported_version,
        )


_TABLE_ADAPTER = TypeAdapter(list[ConfigRecord])


def _field_path(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else part
    return path or "<root>"


def _schema_error(exc: ValidationError) -> SchemaValidationError:
    """Report the first validation failure as a ``SchemaValidationError``."""
    err = exc.errors()[0]
    value = None if err["type"] == "missing" else err.get("input")
    return SchemaValidationError(_field_path(tuple(err["loc"])), err["msg"], value)


def parse_user_agent(data: Mapping[str, Any]) -> UserAgent:
    """Build a ``UserAgent`` from ``{"browser": {...}, "os": {...}}``."""
    try:
        record = UserAgentRecord.model_validate(data)
    except ValidationError as exc:
        raise _schema_error(exc) from exc
    return record.to_user_agent()


def parse_config_entry(data: Mapping[str, Any]) -> ConfigEntry:
    """Build a ``ConfigEntry`` from a flat mapping of its fields."""
    try:
        record = ConfigRecord.model_validate(data)
    except ValidationError as exc:
        raise _schema_error(exc) from exc
    return record.to_entry()


def parse_table(records: Iterable[Mapping[str, Any]]) -> ConfigurationTable:
    """Validate every record, then build the table from them."""
    try:
        validated = _TABLE_ADAPTER.validate_python(list(records))
    except ValidationError as exc:
        raise _schema_error(exc) from exc
    debug_log("Validated %d configuration records", len(validated))
    return build_table(record.to_entry() for record in validated)
