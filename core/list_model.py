"""
Qt list model backing a shell view with an ordered list of entries.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from PySide6.QtCore import (
    Property,
    QAbstractListModel,
    QByteArray,
    QModelIndex,
    QObject,
    QPersistentModelIndex,
    Qt,
    Signal,
)

_FIRST_ROLE = int(Qt.ItemDataRole.UserRole) + 1


class EntryListModel(QAbstractListModel):
    """
    Ordered entries exposed to views through named roles.

    The model has no public mutators. The handler that owns it writes
    through an EntryListWriter, and every change goes through the row
    insert/remove/reset notifications so attached views stay in sync.
    """

    countChanged = Signal()

    def __init__(self, role_names: Sequence[str], parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._entries: List[Any] = []
        self._role_names: Tuple[str, ...] = tuple(role_names)
        self._roles: Dict[int, str] = {
            _FIRST_ROLE + offset: name for offset, name in enumerate(self._role_names)
        }

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._entries)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._entries):
            return None
        entry = self._entries[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return str(entry.role_value(self._role_names[0]))
        name = self._roles.get(int(role))
        if name is None:
            return None
        return entry.role_value(name)

    def roleNames(self) -> Dict[int, QByteArray]:  # noqa: N802
        return {role: QByteArray(name.encode("utf-8")) for role, name in self._roles.items()}

    def role_for(self, name: str) -> int:
        for role, role_name in self._roles.items():
            if role_name == name:
                return role
        raise KeyError(name)

    def _get_count(self) -> int:
        return len(self._entries)

    count = Property(int, _get_count, notify=countChanged)

    def entries(self) -> Tuple[Any, ...]:
        return tuple(self._entries)

    def find_first(self, predicate: Callable[[Any], bool]) -> Optional[int]:
        for row, entry in enumerate(self._entries):
            if predicate(entry):
                return row
        return None

    def _insert_entry(self, row: int, entry: Any) -> None:
        if not 0 <= row <= len(self._entries):
            raise IndexError(f"Row {row} is out of range for {len(self._entries)} entries.")
        self.beginInsertRows(QModelIndex(), row, row)
        self._entries.insert(row, entry)
        self.endInsertRows()
        self.countChanged.emit()

    def _remove_entry(self, row: int) -> Any:
        if not 0 <= row < len(self._entries):
            raise IndexError(f"Row {row} is out of range for {len(self._entries)} entries.")
        self.beginRemoveRows(QModelIndex(), row, row)
        entry = self._entries.pop(row)
        self.endRemoveRows()
        self.countChanged.emit()
        return entry

    def _reset_entries(self, entries: Iterable[Any]) -> None:
        new_entries = list(entries)
        previous_count = len(self._entries)
        self.beginResetModel()
        self._entries = new_entries
        self.endResetModel()
        if previous_count != len(new_entries):
            self.countChanged.emit()


class EntryListWriter:
    """
    Write access to an EntryListModel.

    Handlers keep their writer private and hand out only the model, so
    views and other consumers can read the list but never change it.
    """

    def __init__(self, model: EntryListModel) -> None:
        self._model = model

    @property
    def model(self) -> EntryListModel:
        return self._model

    def append(self, entry: Any) -> None:
        self._model._insert_entry(self._model.count, entry)

    def insert(self, row: int, entry: Any) -> None:
        self._model._insert_entry(row, entry)

    def remove_at(self, row: int) -> Any:
        return self._model._remove_entry(row)

    def clear(self) -> None:
        self._model._reset_entries(())

    def replace_all(self, entries: Iterable[Any]) -> None:
        self._model._reset_entries(entries)
