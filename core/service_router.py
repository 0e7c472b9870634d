"""
Routes bus responses to the list handler registered for their method.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from shared.payload_schema import PayloadSource, PayloadValidationError, load_payload
from shell_models import logger as app_logger

METHOD_ALERT_NOTIFICATION = "/getAlertNotification"
METHOD_PINCODE_PROMPT_NOTIFICATION = "/getPincodePromptNotification"
METHOD_LIST_APPS = "/listApps"
METHOD_LIST_PACKAGES = "/listPackages"


class RouteOutcome(Enum):
    ROUTED = "Routed"
    IGNORED = "Ignored"
    DUPLICATE = "Duplicate"
    UNKNOWN = "Unknown"
    REJECTED = "Rejected"


@dataclass(slots=True)
class _Channel:
    handler: Callable[[Dict[str, Any]], None]
    filter_replies: bool
    last_payload: Optional[str] = None


class ServiceResponseRouter(QObject):
    """
    Forwards each bus response to its channel's handler.

    Channels registered with `filter_replies` drop subscription
    confirmations and failed replies before they reach the handler. With
    `dedupe_payloads` a payload identical to the last one handled on the
    same channel is dropped as well.
    """

    payloadRouted = Signal(str)

    def __init__(self, *, dedupe_payloads: bool = True, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._logger = app_logger.get_logger()
        self._dedupe_payloads = dedupe_payloads
        self._channels: Dict[str, _Channel] = {}

    def register(
        self,
        method: str,
        handler: Callable[[Dict[str, Any]], None],
        *,
        filter_replies: bool = False,
    ) -> None:
        if method in self._channels:
            raise ValueError(f"A handler is already registered for {method}.")
        self._channels[method] = _Channel(handler=handler, filter_replies=filter_replies)

    def methods(self) -> List[str]:
        return list(self._channels)

    def forget(self, method: Optional[str] = None) -> None:
        """Drop the remembered payloads so the next response is applied even if unchanged."""
        channels = self._channels.values() if method is None else [self._channels[method]]
        for channel in channels:
            channel.last_payload = None

    def route(self, method: str, payload: PayloadSource) -> RouteOutcome:
        channel = self._channels.get(method)
        if channel is None:
            self._logger.warning("No list handler registered for method {}.", method)
            return RouteOutcome.UNKNOWN

        try:
            message = load_payload(payload)
        except PayloadValidationError as exc:
            self._logger.error("Dropping malformed payload for {}: {}", method, exc)
            return RouteOutcome.REJECTED

        if channel.filter_replies and not _is_update(message):
            self._logger.debug("Ignoring subscription reply for {}.", method)
            return RouteOutcome.IGNORED

        canonical = json.dumps(message, sort_keys=True, separators=(",", ":"), default=str)
        if self._dedupe_payloads and canonical == channel.last_payload:
            self._logger.debug("Payload for {} unchanged; skipping.", method)
            return RouteOutcome.DUPLICATE

        try:
            channel.handler(message)
        except PayloadValidationError as exc:
            self._logger.error("Handler for {} rejected payload: {}", method, exc)
            return RouteOutcome.REJECTED

        channel.last_payload = canonical
        self.payloadRouted.emit(method)
        return RouteOutcome.ROUTED


def _is_update(message: Mapping[str, Any]) -> bool:
    if message.get("subscribed") is True:
        return False
    return message.get("returnValue") is True or bool(message.get("message"))
