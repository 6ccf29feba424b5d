# -*- coding: utf-8 -*-
"""
Municipality entity model.
"""

from dataclasses import dataclass
from typing import Optional

from models.status import parse_int


@dataclass
class Municipio:
    """Municipality; belongs to one UF through codigo_uf."""

    codigo_municipio: Optional[int] = None
    codigo_uf: Optional[int] = None
    nome: str = ""
    status: Optional[int] = None

    @classmethod
    def from_api(cls, data: dict) -> "Municipio":
        return cls(
            codigo_municipio=parse_int(data.get("codigoMunicipio")),
            codigo_uf=parse_int(data.get("codigoUF")),
            nome=data.get("nome") or "",
            status=parse_int(data.get("status")),
        )
