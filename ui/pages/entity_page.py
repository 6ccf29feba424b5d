# -*- coding: utf-8 -*-
"""
Generic registry page: form, inline error area and records table.

One page per entity; the layout is driven by the controller's schema.
"""

from typing import Any, Dict

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QIntValidator
from PyQt5.QtWidgets import (
    QAbstractItemView, QComboBox, QFormLayout, QHBoxLayout, QHeaderView,
    QLabel, QLineEdit, QPushButton, QTableView, QVBoxLayout, QWidget
)

from app.config import Config
from controllers.entity_controller import EntityController
from models.status import STATUS_ACTIVE, STATUS_INACTIVE
from services.translation_manager import tr
from ui.components.base_table_model import RowTableModel
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class EntityPage(QWidget):
    """Form + table page bound to one EntityController."""

    def __init__(self, controller: EntityController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.schema = controller.schema
        self.inputs: Dict[str, QWidget] = {}

        self._setup_ui()
        self._connect_controller()

    # ==================== UI ====================

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QLabel(tr(self.schema.title_key))
        title.setStyleSheet(f"font-size: 16pt; font-weight: 600; color: {Config.TEXT_COLOR};")
        layout.addWidget(title)

        form = QFormLayout()
        id_input = QLineEdit()
        id_input.setValidator(QIntValidator(0, 2147483647, id_input))
        self.inputs[self.schema.id_field] = id_input
        form.addRow(tr(f"field.{self.schema.id_field}"), id_input)

        for form_field in self.schema.fields:
            widget = self._create_input(form_field.kind)
            self.inputs[form_field.name] = widget
            form.addRow(tr(form_field.label_key), widget)
        layout.addLayout(form)

        self._setup_extra_form(layout)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        layout.addWidget(self.error_label)

        self.save_btn = QPushButton(tr("button.save"))
        self.save_btn.setStyleSheet(f"""
            QPushButton {{
                background-color: {Config.PRIMARY_COLOR};
                color: white;
                border: none;
                border-radius: 6px;
                padding: 8px 24px;
            }}
        """)
        self.save_btn.clicked.connect(self._on_submit)
        save_row = QHBoxLayout()
        save_row.addStretch()
        save_row.addWidget(self.save_btn)
        layout.addLayout(save_row)

        filter_row = QHBoxLayout()
        filter_row.addWidget(QLabel(tr("filter.status")))
        self.status_filter = QComboBox()
        self.status_filter.addItem(tr("status.all"), None)
        self.status_filter.addItem(tr("status.active"), STATUS_ACTIVE)
        self.status_filter.addItem(tr("status.inactive"), STATUS_INACTIVE)
        self.status_filter.currentIndexChanged.connect(self._on_filter_changed)
        filter_row.addWidget(self.status_filter)
        filter_row.addStretch()
        layout.addLayout(filter_row)

        self.table_model = RowTableModel(columns=self.schema.columns)
        self.table = QTableView()
        self.table.setModel(self.table_model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.verticalHeader().setVisible(False)
        layout.addWidget(self.table, 1)

    def _create_input(self, kind: str) -> QWidget:
        if kind == "status":
            combo = QComboBox()
            combo.addItem(tr("status.active"), STATUS_ACTIVE)
            combo.addItem(tr("status.inactive"), STATUS_INACTIVE)
            return combo

        line_edit = QLineEdit()
        if kind == "number":
            line_edit.setValidator(QIntValidator(0, 2147483647, line_edit))
        elif kind == "password":
            line_edit.setEchoMode(QLineEdit.Password)
        return line_edit

    def _setup_extra_form(self, layout: QVBoxLayout):
        """Hook for pages with nested sub-forms."""

    def _connect_controller(self):
        self.controller.rows_loaded.connect(self.table_model.set_rows)
        self.controller.form_reset.connect(self.clear_form)
        self.controller.error_changed.connect(self.error_label.setText)
        self.controller.save_succeeded.connect(self._on_save_succeeded)

    # ==================== Form ====================

    def collect_form_values(self) -> Dict[str, Any]:
        """Read every form input, untouched; trimming is the controller's job."""
        values = {}
        for name, widget in self.inputs.items():
            if isinstance(widget, QComboBox):
                values[name] = widget.currentData()
            else:
                values[name] = widget.text()
        return values

    def clear_form(self):
        for widget in self.inputs.values():
            if isinstance(widget, QComboBox):
                widget.setCurrentIndex(0)
            else:
                widget.clear()

    # ==================== Actions ====================

    def load(self):
        """Populate the table from the server."""
        self.controller.load_records(self._current_filters())

    def _current_filters(self):
        status = self.status_filter.currentData()
        if status is None:
            return None
        return {"status": status}

    def _on_filter_changed(self, index: int):
        self.load()

    def _on_submit(self):
        self.controller.submit(self.collect_form_values())

    def _on_save_succeeded(self, message: str):
        logger.info(message)
        ErrorHandler.show_success(self, message)
