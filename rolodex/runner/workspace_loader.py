"""Workspace loader for reading every collection a manifest names."""

import logging
import time
from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from rolodex.core.exceptions import RolodexError, WorkspaceError
from rolodex.core.models import Workspace, WorkspaceConfig
from rolodex.core.types import DatasetKind
from rolodex.engines import ExtractEngine, attach_contacts

logger = logging.getLogger(__name__)


class WorkspaceLoader:
    """Load all datasets of a workspace and join pipelines to contacts."""

    def __init__(self, config: WorkspaceConfig, console: Optional[Console] = None):
        """Initialize workspace loader.

        Args:
            config: Parsed workspace manifest
            console: Console to draw progress on (stderr by default)
        """
        self.config = config
        self.console = console or Console(stderr=True)
        self.engines = [ExtractEngine(dataset) for dataset in config.datasets()]

    async def load(self) -> Workspace:
        """Read every configured dataset.

        Returns:
            Workspace holding the loaded collections

        Raises:
            WorkspaceError: If any dataset fails to load
        """
        workspace = Workspace(name=self.config.name)
        start = time.time()

        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TimeElapsedColumn(),
                console=self.console,
                transient=True,
            ) as progress:
                task = progress.add_task(
                    "[cyan]Loading workspace...", total=len(self.engines)
                )
                for engine in self.engines:
                    kind = engine.config.kind
                    progress.update(task, description=f"[cyan]Loading {kind.value}...")
                    records = await engine.extract()
                    setattr(workspace, kind.value, records)
                    progress.advance(task)
        except RolodexError as e:
            raise WorkspaceError(f"Failed to load workspace: {e}")

        for kind in (DatasetKind.PIPELINE, DatasetKind.CTO_PIPELINE):
            entries = getattr(workspace, kind.value)
            if entries:
                joined = attach_contacts(entries, workspace.contacts)
                logger.info(f"Joined {joined}/{len(entries)} {kind.value} entries to contacts")

        logger.info(
            f"Workspace loaded in {time.time() - start:.2f}s: "
            f"{len(workspace.contacts)} contacts, {len(workspace.events)} events, "
            f"{len(workspace.pipeline)} pipeline, {len(workspace.cto_pipeline)} cto pipeline"
        )
        return workspace
