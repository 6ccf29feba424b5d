# -*- coding: utf-8 -*-
"""
Cadastro Data Models
"""

from .uf import Uf
from .municipio import Municipio
from .bairro import Bairro
from .pessoa import Pessoa, Endereco

__all__ = [
    "Uf",
    "Municipio",
    "Bairro",
    "Pessoa",
    "Endereco",
]
