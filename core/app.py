"""
Coordinator wiring the shell list handlers to their bus methods.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from PySide6.QtCore import QObject

from core.alert_handler import AlertHandler
from core.application_list_handler import ApplicationListHandler
from core.list_model import EntryListModel
from core.package_list_handler import PackageListHandler
from core.pincode_prompt_handler import PincodePromptHandler
from core.service_router import (
    METHOD_ALERT_NOTIFICATION,
    METHOD_LIST_APPS,
    METHOD_LIST_PACKAGES,
    METHOD_PINCODE_PROMPT_NOTIFICATION,
    RouteOutcome,
    ServiceResponseRouter,
)
from core.settings import ShellSettings
from shared.payload_schema import PayloadSource
from shell_models import logger as app_logger


class ShellModels(QObject):
    """Owns the four shell list handlers and routes bus responses to them."""

    def __init__(self, settings: Optional[ShellSettings] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.settings = settings or ShellSettings()
        self._logger = app_logger.get_logger()

        self._alert_handler = AlertHandler(self)
        self._pincode_prompt_handler = PincodePromptHandler(self)
        self._application_handler = ApplicationListHandler(self, sort_entries=self.settings.sort_snapshots)
        self._package_handler = PackageListHandler(self, sort_entries=self.settings.sort_snapshots)

        self._router = ServiceResponseRouter(dedupe_payloads=self.settings.dedupe_payloads, parent=self)
        self._router.register(METHOD_ALERT_NOTIFICATION, self._alert_handler.handle, filter_replies=True)
        self._router.register(
            METHOD_PINCODE_PROMPT_NOTIFICATION,
            self._pincode_prompt_handler.handle,
            filter_replies=True,
        )
        self._router.register(METHOD_LIST_APPS, self._application_handler.handle)
        self._router.register(METHOD_LIST_PACKAGES, self._package_handler.handle)

    @property
    def router(self) -> ServiceResponseRouter:
        return self._router

    @property
    def alerts(self) -> EntryListModel:
        return self._alert_handler.model

    @property
    def pincode_prompts(self) -> EntryListModel:
        return self._pincode_prompt_handler.model

    @property
    def applications(self) -> EntryListModel:
        return self._application_handler.model

    @property
    def packages(self) -> EntryListModel:
        return self._package_handler.model

    def dispatch(self, method: str, payload: PayloadSource) -> RouteOutcome:
        outcome = self._router.route(method, payload)
        if outcome is RouteOutcome.ROUTED:
            self._logger.debug("Applied {} update.", method)
        return outcome

    def snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        """Return the current contents of every model as plain dictionaries."""
        return {
            "alerts": [entry.to_message() for entry in self.alerts.entries()],
            "pincodePrompts": [entry.to_message() for entry in self.pincode_prompts.entries()],
            "applications": [entry.to_dict() for entry in self.applications.entries()],
            "packages": [entry.to_dict() for entry in self.packages.entries()],
        }
