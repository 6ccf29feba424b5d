# -*- coding: utf-8 -*-
"""
Persons page: the generic registry page plus address sub-forms and the
saved-addresses overlay.
"""

from PyQt5.QtCore import QModelIndex
from PyQt5.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from controllers.person_controller import AddressSlot, PersonController
from services.translation_manager import tr
from ui.components.address_form import AddressFormWidget
from ui.components.address_list_dialog import AddressListDialog
from ui.pages.entity_page import EntityPage


class PessoaPage(EntityPage):
    """Person form with an unbounded list of address blocks."""

    def __init__(self, controller: PersonController, parent=None):
        super().__init__(controller, parent)
        self.address_dialog = AddressListDialog(self)

        self.table.clicked.connect(self._on_row_clicked)
        self.controller.addresses_loaded.connect(self.address_dialog.show_addresses)

    def _setup_extra_form(self, layout: QVBoxLayout):
        self.address_widgets = []
        self.addresses_container = QWidget()
        self.addresses_layout = QVBoxLayout(self.addresses_container)
        self.addresses_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.addresses_container)

        self.add_address_btn = QPushButton(tr("button.add_address"))
        self.add_address_btn.clicked.connect(self._on_add_address)
        row = QHBoxLayout()
        row.addWidget(self.add_address_btn)
        row.addStretch()
        layout.addLayout(row)

    def _connect_controller(self):
        super()._connect_controller()
        self.controller.address_slot_added.connect(self._append_address_widget)
        self.controller.address_slots_cleared.connect(self._remove_address_widgets)

    def _on_add_address(self):
        self.controller.add_address_slot()

    def _append_address_widget(self, slot: AddressSlot):
        widget = AddressFormWidget(slot)
        self.address_widgets.append(widget)
        self.addresses_layout.addWidget(widget)

    def _remove_address_widgets(self):
        while self.address_widgets:
            widget = self.address_widgets.pop()
            self.addresses_layout.removeWidget(widget)
            widget.deleteLater()

    def _on_row_clicked(self, index: QModelIndex):
        row = self.table_model.get_row(index.row())
        if row is not None and row.record_id is not None:
            self.controller.view_addresses(row.record_id)
