# -*- coding: utf-8 -*-
"""
Cadastro UI Pages
"""

from .entity_page import EntityPage
from .pessoa_page import PessoaPage

__all__ = [
    "EntityPage",
    "PessoaPage",
]
