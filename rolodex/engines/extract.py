"""Extract engine for reading record collections from data files."""

import asyncio
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Type, Union

import polars as pl
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from rolodex.core.exceptions import ConfigurationError, ExtractError
from rolodex.core.models import Contact, CtoPipelineItem, DatasetConfig, Event, PipelineItem
from rolodex.core.types import DatasetKind, SourceType

logger = logging.getLogger(__name__)

MODEL_FOR_KIND: Dict[DatasetKind, Type[BaseModel]] = {
    DatasetKind.CONTACTS: Contact,
    DatasetKind.EVENTS: Event,
    DatasetKind.PIPELINE: PipelineItem,
    DatasetKind.CTO_PIPELINE: CtoPipelineItem,
}

SOURCE_SUFFIXES: Dict[str, SourceType] = {
    ".csv": SourceType.CSV,
    ".json": SourceType.JSON,
    ".jsonl": SourceType.JSONL,
    ".parquet": SourceType.PARQUET,
}


def detect_source_type(path: Union[str, Path], label: str = "source") -> SourceType:
    """Determine file format from the path's extension.

    Raises:
        ConfigurationError: If the extension is not a supported format
    """
    suffix = Path(path).suffix.lower()
    if suffix not in SOURCE_SUFFIXES:
        raise ConfigurationError(
            f"Cannot determine {label} type from {suffix}. "
            f"Supported: {list(SOURCE_SUFFIXES.keys())}"
        )
    return SOURCE_SUFFIXES[suffix]


def read_frame(path: Path, source_type: SourceType) -> pl.DataFrame:
    """Read a data file into a DataFrame.

    CSV columns are read as text and left for the record models to coerce.
    """
    if source_type == SourceType.CSV:
        return pl.read_csv(path, infer_schema_length=0)
    if source_type == SourceType.JSON:
        return pl.read_json(path)
    if source_type == SourceType.JSONL:
        return pl.read_ndjson(path)
    if source_type == SourceType.PARQUET:
        return pl.read_parquet(path)
    raise ExtractError(f"Unsupported source type: {source_type}")


def attach_contacts(
    items: Iterable[Union[PipelineItem, CtoPipelineItem]], contacts: Iterable[Contact]
) -> int:
    """Join pipeline entries to their contacts by ``contact_id``.

    Returns:
        Number of entries whose contact was found
    """
    by_id = {c.id: c for c in contacts}
    joined = 0
    for item in items:
        item.contact = by_id.get(item.contact_id)
        if item.contact is None:
            logger.warning(
                f"Pipeline entry {item.id} references unknown contact {item.contact_id}"
            )
        else:
            joined += 1
    return joined


class ExtractEngine:
    """Extract records of one kind from a configured data file."""

    def __init__(self, config: DatasetConfig):
        """Initialize extract engine.

        Args:
            config: Dataset location and kind
        """
        self.config = config
        self.source_type = self._determine_source_type()
        self.model = MODEL_FOR_KIND[config.kind]
        logger.info(
            f"Extract engine initialized: kind={config.kind.value}, "
            f"source={config.source}, type={self.source_type.value}"
        )

    def _determine_source_type(self) -> SourceType:
        if self.config.source_type:
            return self.config.source_type
        return detect_source_type(self.config.source)

    async def extract(self) -> List[BaseModel]:
        """Extract all records from the source.

        Returns:
            List of validated record models

        Raises:
            ExtractError: If the file is missing, unreadable or holds invalid rows
        """
        logger.info(f"Starting extraction from {self.config.source}")
        try:
            records = await asyncio.to_thread(self._extract_sync)
        except ExtractError:
            raise
        except Exception as e:
            logger.error(
                f"Extraction failed from {self.config.source}: {type(e).__name__}: {e}"
            )
            raise ExtractError(f"Failed to extract from {self.config.source}: {e}")

        logger.info(
            f"Extracted {len(records)} {self.config.kind.value} from {self.config.source}"
        )
        return records

    def _extract_sync(self) -> List[BaseModel]:
        path = Path(self.config.source)

        if not path.exists():
            logger.error(f"Source file not found: {path}")
            raise ExtractError(f"Source file not found: {path}")

        df = read_frame(path, self.source_type)
        logger.debug(f"DataFrame loaded: {len(df)} rows, {len(df.columns)} columns")

        records = []
        for idx, row in enumerate(df.iter_rows(named=True)):
            try:
                records.append(self.model.model_validate(row))
            except PydanticValidationError as e:
                raise ExtractError(
                    f"Invalid {self.config.kind.value} row {idx} in {path}:\n{e}"
                )
        return records
