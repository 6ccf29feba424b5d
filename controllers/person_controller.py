# -*- coding: utf-8 -*-
"""
Person Controller
=================
Entity controller for persons and their nested addresses.

Handles:
- Address sub-form slots added before submit
- Attaching the slots, in order, as the person's address list
- Read-only address view for a saved person
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from PyQt5.QtCore import pyqtSignal

from controllers.entity_controller import EntityController, Intent
from controllers.schemas import PESSOA_SCHEMA
from controllers.view_models import address_summary
from models.pessoa import Endereco, Pessoa
from models.status import parse_int
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class AddressSlot:
    """Values of one address sub-form, as typed."""
    codigo_bairro: str = ""
    nome_rua: str = ""
    numero: str = ""
    complemento: str = ""
    cep: str = ""

    def to_endereco(self) -> Endereco:
        """Build the address to send, with text fields trimmed."""
        return Endereco(
            codigo_bairro=parse_int(self.codigo_bairro),
            nome_rua=(self.nome_rua or "").strip(),
            numero=(self.numero or "").strip(),
            complemento=(self.complemento or "").strip(),
            cep=(self.cep or "").strip(),
        )


class PersonController(EntityController):
    """
    Controller for person management.

    The address list sent on every save is exactly the current set of slots,
    so the server replaces whatever it had stored.
    """

    # Signals
    address_slot_added = pyqtSignal(object)  # AddressSlot
    address_slots_cleared = pyqtSignal()
    addresses_loaded = pyqtSignal(list)  # List[str], one line per address

    def __init__(self, api=None, dispatcher=None, parent=None):
        super().__init__(PESSOA_SCHEMA, api=api, dispatcher=dispatcher, parent=parent)
        self._address_slots: List[AddressSlot] = []

    @property
    def address_slots(self) -> Tuple[AddressSlot, ...]:
        return tuple(self._address_slots)

    # ==================== Address slots ====================

    def add_address_slot(self) -> AddressSlot:
        """Append one empty address sub-form. There is no upper limit."""
        slot = AddressSlot()
        self._address_slots.append(slot)
        self.address_slot_added.emit(slot)
        return slot

    def collect_addresses(self) -> List[Dict[str, Any]]:
        """Address payloads in the order the slots were added."""
        return [slot.to_endereco().to_api() for slot in self._address_slots]

    def _build_body(self, intent: Intent) -> Dict[str, Any]:
        body = super()._build_body(intent)
        body["enderecos"] = self.collect_addresses()
        return body

    def _reset_form(self):
        self._address_slots.clear()
        self.address_slots_cleared.emit()
        super()._reset_form()

    # ==================== Address view ====================

    def view_addresses(self, person_id: Any):
        """
        Load a saved person's addresses for the read-only overlay.

        Emits addresses_loaded with one summary line per stored address.
        The edit form and its slots are left untouched.
        """
        self._log_operation("view_addresses", person_id=person_id)
        self.fetch_record(person_id, self._on_person_loaded)

    def _on_person_loaded(self, pessoa: Optional[Pessoa]):
        if pessoa is None:
            logger.info("Person lookup returned no record")
            self.addresses_loaded.emit([])
            return
        self.addresses_loaded.emit([address_summary(e) for e in pessoa.enderecos])
