# -*- coding: utf-8 -*-
"""
Address sub-form bound to an AddressSlot.
"""

from PyQt5.QtGui import QIntValidator
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QLineEdit, QVBoxLayout

from app.config import Config
from controllers.person_controller import AddressSlot
from services.translation_manager import tr


class AddressFormWidget(QFrame):
    """
    One address block of the person form.

    Every edit is written straight into the slot, so the controller always
    sees the current values.
    """

    # (slot attribute, placeholder translation key)
    FIELDS = (
        ("codigo_bairro", "field.codigoBairro"),
        ("nome_rua", "field.nomeRua"),
        ("numero", "field.numero"),
        ("complemento", "field.complemento"),
        ("cep", "field.cep"),
    )

    def __init__(self, slot: AddressSlot, parent=None):
        super().__init__(parent)
        self.slot = slot
        self.inputs = {}
        self.setObjectName("addressForm")
        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet(f"""
            QFrame#addressForm {{
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 6px;
                margin-bottom: 10px;
            }}
        """)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addWidget(QLabel(tr("address.title")))

        row = QHBoxLayout()
        for attribute, placeholder_key in self.FIELDS:
            line_edit = QLineEdit()
            line_edit.setPlaceholderText(tr(placeholder_key))
            line_edit.setText(getattr(self.slot, attribute))
            if attribute == "codigo_bairro":
                line_edit.setValidator(QIntValidator(0, 2147483647, line_edit))
            line_edit.textChanged.connect(
                lambda text, attr=attribute: setattr(self.slot, attr, text)
            )
            self.inputs[attribute] = line_edit
            row.addWidget(line_edit)
        layout.addLayout(row)
