# -*- coding: utf-8 -*-
"""
Row view models for the registry tables.

Display text (cells, status labels, address lines) is rendered here so the
models stay plain data and table rendering can be checked without widgets.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from controllers.schemas import Column, EntitySchema
from models.pessoa import Endereco
from models.status import is_active
from services.translation_manager import tr


@dataclass(frozen=True)
class RowViewModel:
    """One rendered table row."""
    record_id: Optional[int]
    cells: Tuple[str, ...]


def status_label(status: Any) -> str:
    """Display label for a status code."""
    return tr("status.active") if is_active(status) else tr("status.inactive")


def address_summary(endereco: Endereco) -> str:
    """One-line description used by the address overlay."""
    return tr(
        "address.summary",
        rua=endereco.nome_rua,
        numero=endereco.numero,
        complemento=endereco.complemento,
        cep=endereco.cep,
    )


def _cell_text(record: Any, column: Column) -> str:
    value = getattr(record, column.attribute, None)
    if column.kind == "status":
        return status_label(value)
    if value is None:
        return ""
    return str(value)


def build_rows(schema: EntitySchema, records: Iterable[Any]) -> List[RowViewModel]:
    """Map model records to rows, preserving the order received."""
    rows = []
    for record in records:
        rows.append(RowViewModel(
            record_id=getattr(record, schema.id_attribute, None),
            cells=tuple(_cell_text(record, c) for c in schema.columns),
        ))
    return rows
