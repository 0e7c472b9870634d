"""
Base class for lists rebuilt wholesale from snapshot messages.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Mapping, Optional, Sequence

from PySide6.QtCore import QObject

from core.list_model import EntryListModel, EntryListWriter
from shared.payload_schema import PayloadSource, load_payload, require_collection
from shell_models import logger as app_logger


class SnapshotListHandler:
    """
    Replaces the owned list with the entries of every snapshot it receives.

    The snapshot is decoded completely before the list is touched, so a
    malformed snapshot raises PayloadValidationError and leaves the previous
    contents in place. Input order is kept unless `sort_entries` is set.
    """

    collection_field: ClassVar[str] = ""
    role_names: ClassVar[Sequence[str]] = ()

    def __init__(self, parent: Optional[QObject] = None, *, sort_entries: bool = False) -> None:
        self._logger = app_logger.get_logger()
        self._model = EntryListModel(self.role_names, parent)
        self._writer = EntryListWriter(self._model)
        self._sort_entries = sort_entries

    @property
    def model(self) -> EntryListModel:
        return self._model

    def handle(self, snapshot: PayloadSource) -> None:
        payload = load_payload(snapshot)
        descriptors = require_collection(payload, self.collection_field)
        entries = [self.build_entry(descriptor) for descriptor in descriptors]
        if self._sort_entries:
            entries.sort(key=lambda entry: entry.sort_key)
        self._writer.replace_all(entries)
        self._logger.debug("Rebuilt {} list with {} entries.", self.collection_field, len(entries))

    def build_entry(self, descriptor: Mapping[str, Any]) -> Any:
        raise NotImplementedError
