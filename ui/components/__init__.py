# -*- coding: utf-8 -*-
"""
Cadastro UI Components
"""

from .address_form import AddressFormWidget
from .address_list_dialog import AddressListDialog
from .base_table_model import RowTableModel

__all__ = [
    "AddressFormWidget",
    "AddressListDialog",
    "RowTableModel",
]
