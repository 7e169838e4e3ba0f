"""Data engines: reading, exporting and importing record collections."""

from .extract import ExtractEngine, attach_contacts
from .importer import ContactImporter
from .load import LoadEngine

__all__ = [
    "ExtractEngine",
    "LoadEngine",
    "ContactImporter",
    "attach_contacts",
]
