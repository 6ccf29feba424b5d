# -*- coding: utf-8 -*-
"""
State (UF) entity model.
"""

from dataclasses import dataclass
from typing import Optional

from models.status import parse_int


@dataclass
class Uf:
    """Federative unit (state) as exchanged with the /uf endpoint."""

    codigo_uf: Optional[int] = None
    sigla: str = ""
    nome: str = ""
    status: Optional[int] = None

    @classmethod
    def from_api(cls, data: dict) -> "Uf":
        """Create Uf from an API record."""
        return cls(
            codigo_uf=parse_int(data.get("codigoUF")),
            sigla=data.get("sigla") or "",
            nome=data.get("nome") or "",
            status=parse_int(data.get("status")),
        )
