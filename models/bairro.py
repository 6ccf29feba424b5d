# -*- coding: utf-8 -*-
"""
Neighborhood entity model.
"""

from dataclasses import dataclass
from typing import Optional

from models.status import parse_int


@dataclass
class Bairro:
    """Neighborhood; belongs to one Municipio through codigo_municipio."""

    codigo_bairro: Optional[int] = None
    codigo_municipio: Optional[int] = None
    nome: str = ""
    status: Optional[int] = None

    @classmethod
    def from_api(cls, data: dict) -> "Bairro":
        return cls(
            codigo_bairro=parse_int(data.get("codigoBairro")),
            codigo_municipio=parse_int(data.get("codigoMunicipio")),
            nome=data.get("nome") or "",
            status=parse_int(data.get("status")),
        )
