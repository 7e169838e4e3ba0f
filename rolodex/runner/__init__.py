"""Workspace loading."""

from .workspace_loader import WorkspaceLoader

__all__ = ["WorkspaceLoader"]
