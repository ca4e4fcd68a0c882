from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from muggle_assert.stack import NullStackCapture, default_stack_capture, set_stack_capture

from .models import AssertSettings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MUGGLE_ASSERT_CONFIG"
CONFIG_FILENAME = "muggle-assert.yaml"

_settings = AssertSettings()


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_settings(path: Path) -> AssertSettings:
    settings_path = path
    if settings_path.is_dir():
        settings_path = settings_path / CONFIG_FILENAME
    if not settings_path.is_file():
        raise FileNotFoundError(f"Config file not found: {settings_path}")
    data = _load_yaml(settings_path)
    logger.debug("Loaded settings from %s", settings_path)
    return AssertSettings.model_validate(data)


def settings_from_env() -> AssertSettings:
    """Load settings from the file named by ``MUGGLE_ASSERT_CONFIG``, if set."""
    value = os.environ.get(CONFIG_ENV_VAR)
    if not value:
        return AssertSettings()
    return load_settings(Path(value))


def configure(settings: AssertSettings | Path | str | None = None) -> AssertSettings:
    """Apply settings process-wide and return them.

    Accepts a settings object, a path to a YAML file (or a directory holding
    ``muggle-assert.yaml``), or ``None`` to read the environment.
    """
    global _settings
    if settings is None:
        resolved = settings_from_env()
    elif isinstance(settings, AssertSettings):
        resolved = settings
    else:
        resolved = load_settings(Path(settings))

    if resolved.stack.capture:
        set_stack_capture(default_stack_capture(limit=resolved.stack.limit))
    else:
        set_stack_capture(NullStackCapture())
    _settings = resolved
    logger.debug("Applied settings: %s", resolved.model_dump())
    return resolved


def get_settings() -> AssertSettings:
    return _settings
