# -*- coding: utf-8 -*-
"""
Read-only overlay listing a person's stored addresses.
"""

from typing import List

from PyQt5.QtWidgets import QDialog, QHBoxLayout, QListWidget, QPushButton, QVBoxLayout

from services.translation_manager import tr


class AddressListDialog(QDialog):
    """Non-modal overlay; closes only through its close button or the window frame."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(tr("address.list_title"))
        self.setModal(False)
        self.setMinimumWidth(520)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        self.address_list = QListWidget()
        layout.addWidget(self.address_list)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.close_btn = QPushButton(tr("button.close"))
        self.close_btn.clicked.connect(self.close)
        buttons.addWidget(self.close_btn)
        layout.addLayout(buttons)

    def show_addresses(self, lines: List[str]):
        """Replace the list content and show the overlay."""
        self.address_list.clear()
        self.address_list.addItems(lines)
        self.show()
        self.raise_()
