"""Workspace manifest parsers."""

from .yaml_parser import parse_workspace, parse_workspace_from_dict, validate_workspace

__all__ = [
    "parse_workspace",
    "validate_workspace",
    "parse_workspace_from_dict",
]
