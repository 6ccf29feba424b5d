# ui/components/base_table_model.py

from PyQt5.QtCore import QAbstractTableModel, Qt, QModelIndex

from services.translation_manager import tr


class RowTableModel(QAbstractTableModel):
    """
    Reusable table model over RowViewModel items.

    Columns are (attribute, header translation key) pairs; cell text comes
    prebuilt from the view model.
    """

    def __init__(self, columns=None, rows=None):
        super().__init__()
        self._rows = rows or []
        self._columns = columns or []

    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self._columns)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None

        if orientation == Qt.Horizontal:
            return tr(self._columns[section].header_key)

        return section + 1

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None

        if role == Qt.TextAlignmentRole:
            return Qt.AlignCenter

        if role != Qt.DisplayRole:
            return None

        return self._rows[index.row()].cells[index.column()]

    def set_rows(self, rows):
        """Replace every row at once."""
        self.beginResetModel()
        self._rows = list(rows)
        self.endResetModel()

    def get_row(self, row: int):
        """Return the RowViewModel at `row` or None if out of range."""
        if row is None:
            return None
        if 0 <= int(row) < len(self._rows):
            return self._rows[int(row)]
        return None
