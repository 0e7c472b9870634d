"""
Installable package list, rebuilt from package manager snapshots.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.snapshot_handler import SnapshotListHandler
from shared.entries import PackageEntry


class PackageListHandler(SnapshotListHandler):
    collection_field = "packages"
    role_names = PackageEntry.ROLE_NAMES

    def build_entry(self, descriptor: Mapping[str, Any]) -> PackageEntry:
        return PackageEntry.from_descriptor(descriptor)
