"""YAML-based configuration loading and saving.

Serializes ``GlobeCameraConfig`` to YAML and reads it back, merging
the file over the defaults.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

import yaml

from globe_camera.config.schema import GlobeCameraConfig

logger = logging.getLogger(__name__)


def _dataclass_to_dict(obj: Any) -> Any:
    """Recursively convert a dataclass instance to a plain dict."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: _dataclass_to_dict(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    return obj


def _coerce(value: Any, field_type: str) -> Any:
    """Coerce a YAML scalar to the declared field type.

    YAML reads ``1000`` as an int; float fields keep floats so camera
    arithmetic never mixes types.
    """
    if field_type == "float" and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def _apply_dict_to_dataclass(obj: Any, data: dict[str, Any]) -> None:
    """Recursively apply a dict of values onto a dataclass instance.

    Keys that do not match a field are skipped with a warning. Nested
    dataclass fields are updated recursively rather than replaced.

    Args:
        obj: The dataclass instance to update.
        data: A dict whose keys correspond to field names.
    """
    fields = {f.name: f for f in dataclasses.fields(obj)}
    for key, value in data.items():
        if key not in fields:
            logger.warning(
                "Ignoring unknown config key %r for %s",
                key, type(obj).__name__,
            )
            continue
        current = getattr(obj, key)
        if dataclasses.is_dataclass(current) and isinstance(value, dict):
            _apply_dict_to_dataclass(current, value)
        else:
            setattr(obj, key, _coerce(value, str(fields[key].type)))


def load_config(
    path: str | Path | None = None,
) -> GlobeCameraConfig:
    """Load a configuration from a YAML file.

    If *path* is ``None``, returns the default configuration. If a path
    is given, it is loaded and merged on top of the defaults.

    Args:
        path: Optional path to a YAML configuration file.

    Returns:
        A fully populated ``GlobeCameraConfig`` instance.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    config = GlobeCameraConfig()
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data and isinstance(data, dict):
        _apply_dict_to_dataclass(config, data)

    logger.info("Loaded camera config from %s", path)
    return config


def save_config(
    config: GlobeCameraConfig,
    path: str | Path,
) -> None:
    """Save a configuration to a YAML file.

    Args:
        config: The configuration to serialize.
        path: Output file path. Parent directories are created.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = _dataclass_to_dict(config)
    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info("Saved camera config to %s", path)
