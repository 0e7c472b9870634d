"""
Installed application list, rebuilt from `/listApps` snapshots.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.snapshot_handler import SnapshotListHandler
from shared.entries import ApplicationEntry


class ApplicationListHandler(SnapshotListHandler):
    collection_field = "apps"
    role_names = ApplicationEntry.ROLE_NAMES

    def build_entry(self, descriptor: Mapping[str, Any]) -> ApplicationEntry:
        return ApplicationEntry.from_descriptor(descriptor)
