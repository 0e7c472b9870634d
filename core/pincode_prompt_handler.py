"""
PIN prompt queue handler.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from PySide6.QtCore import QObject

from core.actions import ListAction
from core.list_model import EntryListModel, EntryListWriter
from shared.entries import PINCODE_PROMPT_INFO_KEY, TIMESTAMP_KEY, PincodePromptEntry
from shared.payload_schema import PayloadSource, load_payload, same_identifier
from shell_models import logger as app_logger

PINCODE_PROMPT_ACTION_KEY = "pincodePromptAction"


class PincodePromptHandler:
    """Appends incoming PIN prompts and removes them on a matching close message."""

    _ACTIONS = (ListAction.CLOSE,)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._logger = app_logger.get_logger()
        self._model = EntryListModel(PincodePromptEntry.ROLE_NAMES, parent)
        self._writer = EntryListWriter(self._model)

    @property
    def model(self) -> EntryListModel:
        return self._model

    def handle(self, message: PayloadSource) -> None:
        payload = load_payload(message)
        action = ListAction.decode(payload.get(PINCODE_PROMPT_ACTION_KEY), self._ACTIONS)

        if action is ListAction.CLOSE:
            self._close(payload.get(PINCODE_PROMPT_INFO_KEY))
            return

        entry = PincodePromptEntry.from_message(payload)
        self._writer.append(entry)
        self._logger.debug("Queued PIN prompt {}.", entry.timestamp)

    def _close(self, info: Any) -> None:
        if not isinstance(info, Mapping) or TIMESTAMP_KEY not in info:
            self._logger.warning("Ignoring PIN prompt close without pincodePromptInfo.timestamp.")
            return

        timestamp = info[TIMESTAMP_KEY]
        row = self._model.find_first(lambda entry: same_identifier(entry.timestamp, timestamp))
        if row is None:
            self._logger.debug("No pending PIN prompt with timestamp {}.", timestamp)
            return
        self._writer.remove_at(row)
