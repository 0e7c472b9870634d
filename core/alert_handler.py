"""
Alert queue handler.

Alerts are shown first come, first served, except that modal alerts jump
ahead of every non-modal alert while keeping their own arrival order. The
queue therefore always holds a contiguous block of modal alerts followed by
the non-modal ones.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from PySide6.QtCore import QObject

from core.actions import ListAction
from core.list_model import EntryListModel, EntryListWriter
from shared.entries import ALERT_INFO_KEY, TIMESTAMP_KEY, AlertEntry
from shared.payload_schema import PayloadSource, load_payload, same_identifier
from shell_models import logger as app_logger

ALERT_ACTION_KEY = "alertAction"


class AlertHandler:
    """Owns the alert queue and applies add, close and closeAll messages to it."""

    _ACTIONS = (ListAction.CLOSE, ListAction.CLOSE_ALL)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._logger = app_logger.get_logger()
        self._model = EntryListModel(AlertEntry.ROLE_NAMES, parent)
        self._writer = EntryListWriter(self._model)

    @property
    def model(self) -> EntryListModel:
        return self._model

    def handle(self, message: PayloadSource) -> None:
        payload = load_payload(message)
        action = ListAction.decode(payload.get(ALERT_ACTION_KEY), self._ACTIONS)

        if action is ListAction.CLOSE_ALL:
            self._logger.debug("Closing all {} alerts.", self._model.count)
            self._writer.clear()
            return

        if action is ListAction.CLOSE:
            self._close(payload.get(ALERT_INFO_KEY))
            return

        self._enqueue(AlertEntry.from_message(payload))

    def _close(self, info: Any) -> None:
        if not isinstance(info, Mapping) or TIMESTAMP_KEY not in info:
            self._logger.warning("Ignoring alert close without alertInfo.timestamp.")
            return

        timestamp = info[TIMESTAMP_KEY]
        row = self._model.find_first(lambda entry: same_identifier(entry.timestamp, timestamp))
        if row is None:
            self._logger.debug("No active alert with timestamp {}; nothing to close.", timestamp)
            return
        self._writer.remove_at(row)
        self._logger.debug("Closed alert {} at row {}.", timestamp, row)

    def _enqueue(self, entry: AlertEntry) -> None:
        if self._model.count == 0 or not entry.modal:
            self._writer.append(entry)
            self._logger.debug("Queued alert {} (modal={}).", entry.timestamp, entry.modal)
            return

        row = self._model.find_first(lambda queued: not queued.modal)
        if row is None:
            row = self._model.count
        self._writer.insert(row, entry)
        self._logger.debug("Queued modal alert {} at row {}.", entry.timestamp, row)
