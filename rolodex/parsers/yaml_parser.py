"""YAML workspace manifest parser."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from rolodex.core.exceptions import ConfigurationError, ValidationError
from rolodex.core.models import WorkspaceConfig
from rolodex.core.types import DatasetKind


def parse_workspace(manifest_path: Union[str, Path]) -> WorkspaceConfig:
    """Parse a workspace manifest from a YAML file.

    Dataset paths in the manifest are relative to the manifest's directory.

    Args:
        manifest_path: Path to the workspace YAML file

    Returns:
        Validated WorkspaceConfig with resolved dataset paths

    Raises:
        ConfigurationError: If file not found or invalid YAML
        ValidationError: If the manifest is invalid

    Example:
        >>> workspace = parse_workspace("rolodex.yaml")
        >>> print(workspace.contacts)
        data/contacts.csv
    """
    path = Path(manifest_path)

    if not path.exists():
        raise ConfigurationError(f"Workspace file not found: {path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError(f"Invalid workspace definition in {path}: expected a mapping")

    return parse_workspace_from_dict(data, base_dir=path.parent)


def validate_workspace(manifest_path: Union[str, Path]) -> bool:
    """Validate a workspace manifest without raising exceptions.

    Args:
        manifest_path: Path to the workspace YAML file

    Returns:
        True if valid, False otherwise
    """
    try:
        parse_workspace(manifest_path)
        return True
    except (ConfigurationError, ValidationError):
        return False


def parse_workspace_from_dict(
    data: Dict[str, Any], base_dir: Optional[Path] = None
) -> WorkspaceConfig:
    """Parse a workspace manifest from a dictionary.

    Args:
        data: Manifest dictionary
        base_dir: Directory relative dataset paths are resolved against

    Returns:
        Validated WorkspaceConfig

    Raises:
        ValidationError: If the manifest is invalid
    """
    try:
        workspace = WorkspaceConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid workspace definition:\n{e}")

    if base_dir is None:
        return workspace

    resolved = {}
    for kind in DatasetKind:
        source = getattr(workspace, kind.value)
        if source and not Path(source).is_absolute():
            resolved[kind.value] = str(base_dir / source)
    return workspace.model_copy(update=resolved)
