#!/usr/bin/env python3
# Ticket: 0001_content_approval_workflow
"""
Content Workflow Configuration Reader

Reads optional settings from the consuming project's .workflow/config.yaml.
The engine has defaults for every setting, so the file and each of its keys
may be absent.

The state set, the transitions and NEEDED_APPROVALS are fixed and are not
read from configuration.
"""

from pathlib import Path
from typing import Any

import yaml

from .models import WorkflowConfig


class ConfigError(ValueError):
    """Raised when config.yaml holds a value of the wrong type."""


def _read_bool(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(
            f"'{key}' must be a boolean (true/false), got {value!r}"
        )
    return value


def load_workflow_config(
    project_root: str | Path,
    config_yaml_path: str | Path | None = None,
) -> WorkflowConfig:
    """
    Load WorkflowConfig from .workflow/config.yaml.

    Args:
        project_root: Root of the consuming project.
        config_yaml_path: Override path for config.yaml (default: .workflow/config.yaml).

    Returns:
        WorkflowConfig with defaults applied where keys are missing.

    Raises:
        ConfigError: if a section is not a mapping or a value has the wrong type
    """
    project_root = Path(project_root)
    config_path = Path(config_yaml_path) if config_yaml_path else project_root / ".workflow" / "config.yaml"

    if not config_path.exists():
        return WorkflowConfig()

    config_doc = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(config_doc, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    content_section = config_doc.get("content") or {}
    if not isinstance(content_section, dict):
        raise ConfigError("'content' section must be a mapping")

    return WorkflowConfig(
        clear_body_on_reject=_read_bool(content_section, "clear_body_on_reject", False),
        source_path=str(config_path),
    )
