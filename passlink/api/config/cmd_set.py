"""Set or remove a configuration value by dot-path key."""

import json
from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from ..StageResult import StageResult
from . import ConfigSetOutput
from .PasslinkConfig import PasslinkConfig

_SENTINEL = object()


def _parse_value(raw: str) -> Any:
    """Parse a value string as JSON, falling back to plain string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _deep_set(d: dict, keys: list[str], value: Any) -> None:
    """Set a nested dict value by key path."""
    for key in keys[:-1]:
        if key not in d or not isinstance(d[key], dict):
            d[key] = {}
        d = d[key]
    d[keys[-1]] = value


def _deep_delete(d: dict, keys: list[str]) -> bool:
    """Delete a nested dict value by key path. Returns True if deleted."""
    for key in keys[:-1]:
        if key not in d or not isinstance(d[key], dict):
            return False
        d = d[key]
    return d.pop(keys[-1], _SENTINEL) is not _SENTINEL


def _deep_get(d: dict, keys: list[str]) -> Any:
    for key in keys:
        d = d[key]
    return d


def cmd_set(key: str, value: str | None = None, delete: bool = False) -> StageResult:
    """Set, modify, or remove a configuration value by dot-path key.

    Removed keys fall back to their defaults on the next load.
    """

    def _fail(result_obj: StageResult, message: str, error: str, config_path: str, result_value: Any = None) -> None:
        result_obj.result = message
        result_obj.output = ConfigSetOutput(
            errors=[error],
            warnings=[],
            key=key,
            value=result_value,
            config_path=config_path,
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(PasslinkConfig.get_config_path())

        yield (0.1, "Loading configuration...")
        try:
            config = PasslinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(result_obj, "Failed to load configuration", str(e), config_path)
            return
        config_dict = config.to_dict()

        keys = key.split(".")
        if not all(keys):
            yield (1.0, "Complete")
            _fail(result_obj, f"Invalid key: {key}", f"Invalid key path: {key}", config_path)
            return

        if delete:
            yield (0.4, f"Removing {key}...")
            if not _deep_delete(config_dict, keys):
                yield (1.0, "Complete")
                _fail(result_obj, f"Key not found: {key}", f"Key not found: {key}", config_path)
                return
            action = "Removed"
            result_value = None
        else:
            if value is None:
                yield (1.0, "Complete")
                _fail(
                    result_obj,
                    "No value provided (use --delete to remove a key)",
                    "No value provided",
                    config_path,
                )
                return
            result_value = _parse_value(value)
            yield (0.4, f"Setting {key}...")
            _deep_set(config_dict, keys, result_value)
            action = "Set"

        # Validate by loading modified dict through Pydantic
        yield (0.6, "Validating configuration...")
        try:
            new_config = PasslinkConfig(**config_dict)
        except ValidationError as e:
            yield (1.0, "Complete")
            _fail(result_obj, f"Validation failed: {e}", str(e), config_path, result_value)
            return

        if not delete:
            # Validators may have rewritten the value (e.g. empty translation -> ESV)
            result_value = _deep_get(new_config.to_dict(), keys)

        yield (0.8, "Saving configuration...")
        try:
            new_config.save()
        except RuntimeError as e:
            yield (1.0, "Complete")
            _fail(result_obj, "Failed to save configuration", str(e), config_path, result_value)
            return

        yield (1.0, "Complete")
        msg = f"{action} {key}" + (f" = {json.dumps(result_value, ensure_ascii=False)}" if result_value is not None else "")
        result_obj.result = msg
        result_obj.output = ConfigSetOutput(
            errors=[],
            warnings=[],
            key=key,
            value=result_value,
            config_path=config_path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Updating {key}...",
        progress_callback=do_work,
    )
