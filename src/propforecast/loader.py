"""Load scenarios from YAML/JSON documents or plain mappings."""

from __future__ import annotations

import json
import types
import typing
from copy import deepcopy
from dataclasses import MISSING, asdict, fields
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from propforecast.core.models import (
    ASSET_TYPES,
    Asset,
    LoanTerms,
    Person,
    Property,
    Scenario,
    UserProfile,
)

__all__ = [
    "ScenarioLoadError",
    "load_scenario",
    "scenario_from_dict",
    "scenario_to_dict",
]

_COLLECTIONS = {
    "properties": Property,
    "loans": LoanTerms,
    "people": Person,
    "assets": Asset,
}


class ScenarioLoadError(ValueError):
    """Raised when a scenario document cannot be parsed or validated."""


def load_scenario(source: str | Path, *, format: str | None = None) -> Scenario:
    """
    Read a scenario document from disk.

    Args:
        source: Path to a .json, .yaml or .yml file
        format: Override the format inferred from the suffix

    Raises:
        FileNotFoundError: If the file does not exist
        ScenarioLoadError: If the document is malformed
    """
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(path)

    fmt = (format or path.suffix.lstrip(".")).lower()
    text = path.read_text(encoding="utf-8")
    try:
        if fmt in {"yaml", "yml"}:
            data = yaml.safe_load(text)
        elif fmt == "json":
            data = json.loads(text)
        else:
            raise ScenarioLoadError(f"Unsupported scenario format '{fmt}' for {path}")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ScenarioLoadError(f"{path}: could not parse document: {exc}") from exc

    if not isinstance(data, dict):
        raise ScenarioLoadError(f"Scenario root must be a mapping (source={path})")
    return _build_scenario(data, str(path))


def scenario_from_dict(data: dict[str, Any]) -> Scenario:
    """Build a Scenario from a mapping; ISO date strings are accepted."""
    if not isinstance(data, dict):
        raise ScenarioLoadError("<mapping>: expected a mapping")
    return _build_scenario(deepcopy(data), "<mapping>")


def scenario_to_dict(scenario: Scenario) -> dict[str, Any]:
    """Plain mapping of a Scenario with ISO dates, suitable for JSON/YAML."""
    return _plain(asdict(scenario))


def _build_scenario(data: dict[str, Any], label: str) -> Scenario:
    data = dict(data)
    profile = _build(UserProfile, data.pop("profile", None), f"{label}::profile")
    for key, cls in _COLLECTIONS.items():
        entries = data.get(key)
        if entries is None:
            data[key] = ()
            continue
        if not isinstance(entries, list):
            raise ScenarioLoadError(f"{label}::{key}: expected a list")
        data[key] = tuple(
            _build(cls, entry, f"{label}::{key}[{idx}]")
            for idx, entry in enumerate(entries)
        )

    for idx, asset in enumerate(data["assets"]):
        if asset.asset_type not in ASSET_TYPES:
            raise ScenarioLoadError(
                f"{label}::assets[{idx}].asset_type: expected one of "
                f"{', '.join(ASSET_TYPES)}, got '{asset.asset_type}'"
            )

    data["profile"] = profile
    return _build(Scenario, data, label)


def _build(cls: type, raw: Any, ctx: str):
    if not isinstance(raw, dict):
        raise ScenarioLoadError(f"{ctx}: expected a mapping")

    hints = typing.get_type_hints(cls)
    known = {f.name: f for f in fields(cls)}
    unknown = sorted(set(raw) - set(known))
    if unknown:
        raise ScenarioLoadError(f"{ctx}: unknown field(s) {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for name, f in known.items():
        if name not in raw:
            if f.default is MISSING and f.default_factory is MISSING:
                raise ScenarioLoadError(f"{ctx}: '{name}' is required")
            continue
        value = raw[name]
        if value is None and not _is_optional_hint(hints[name]):
            # null counts as missing
            if f.default is MISSING and f.default_factory is MISSING:
                raise ScenarioLoadError(f"{ctx}: '{name}' must not be null")
            continue
        if _is_date_hint(hints[name]):
            value = _coerce_date(value, f"{ctx}.{name}")
        kwargs[name] = value
    return cls(**kwargs)


def _is_optional_hint(hint: Any) -> bool:
    if isinstance(hint, types.UnionType) or typing.get_origin(hint) is typing.Union:
        return type(None) in typing.get_args(hint)
    return False


def _is_date_hint(hint: Any) -> bool:
    if hint is date:
        return True
    if isinstance(hint, types.UnionType) or typing.get_origin(hint) is typing.Union:
        return date in typing.get_args(hint)
    return False


def _coerce_date(value: Any, ctx: str) -> date | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise ScenarioLoadError(f"{ctx}: invalid ISO date '{value}'") from exc
    raise ScenarioLoadError(f"{ctx}: expected ISO date string")


def _plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, date):
        return value.isoformat()
    return value
