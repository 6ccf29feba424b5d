# -*- coding: utf-8 -*-
"""
Entity schemas.

Each registry screen differs from the others only in its endpoint, its
identifier field, its form fields and its table columns. Those differences
live here; EntityController does the rest.
"""

from dataclasses import dataclass
from typing import Tuple, Type

from app.config import Endpoints
from models import Bairro, Municipio, Pessoa, Uf


@dataclass(frozen=True)
class FormField:
    """An editable field, named as on the wire."""
    name: str
    kind: str = "text"  # text, number, password, status
    trim: bool = False

    @property
    def label_key(self) -> str:
        return f"field.{self.name}"


@dataclass(frozen=True)
class Column:
    """A table column: model attribute and header translation key."""
    attribute: str
    header_key: str
    kind: str = "text"  # text, status


@dataclass(frozen=True)
class EntitySchema:
    """Everything EntityController needs to know about one entity."""
    key: str
    endpoint: str
    id_field: str
    id_attribute: str
    fields: Tuple[FormField, ...]
    columns: Tuple[Column, ...]
    model: Type

    @property
    def title_key(self) -> str:
        return f"page.{self.key}.title"

    @property
    def success_key(self) -> str:
        return f"success.{self.key}"


UF_SCHEMA = EntitySchema(
    key="uf",
    endpoint=Endpoints.UF,
    id_field="codigoUF",
    id_attribute="codigo_uf",
    fields=(
        FormField("sigla", trim=True),
        FormField("nome", trim=True),
        FormField("status", kind="status"),
    ),
    columns=(
        Column("codigo_uf", "field.codigoUF"),
        Column("sigla", "field.sigla"),
        Column("nome", "field.nome"),
        Column("status", "field.status", kind="status"),
    ),
    model=Uf,
)

MUNICIPIO_SCHEMA = EntitySchema(
    key="municipio",
    endpoint=Endpoints.MUNICIPIO,
    id_field="codigoMunicipio",
    id_attribute="codigo_municipio",
    fields=(
        FormField("codigoUF", kind="number"),
        FormField("nome", trim=True),
        FormField("status", kind="status"),
    ),
    columns=(
        Column("codigo_municipio", "field.codigoMunicipio"),
        Column("codigo_uf", "field.codigoUF"),
        Column("nome", "field.nome"),
        Column("status", "field.status", kind="status"),
    ),
    model=Municipio,
)

BAIRRO_SCHEMA = EntitySchema(
    key="bairro",
    endpoint=Endpoints.BAIRRO,
    id_field="codigoBairro",
    id_attribute="codigo_bairro",
    fields=(
        FormField("codigoMunicipio", kind="number"),
        FormField("nome", trim=True),
        FormField("status", kind="status"),
    ),
    columns=(
        Column("codigo_bairro", "field.codigoBairro"),
        Column("codigo_municipio", "field.codigoMunicipio"),
        Column("nome", "field.nome"),
        Column("status", "field.status", kind="status"),
    ),
    model=Bairro,
)

PESSOA_SCHEMA = EntitySchema(
    key="pessoa",
    endpoint=Endpoints.PESSOA,
    id_field="codigoPessoa",
    id_attribute="codigo_pessoa",
    fields=(
        FormField("nome", trim=True),
        FormField("sobrenome", trim=True),
        FormField("idade", kind="number"),
        FormField("login", trim=True),
        FormField("senha", kind="password"),
        FormField("status", kind="status"),
    ),
    columns=(
        Column("codigo_pessoa", "field.codigoPessoa"),
        Column("nome", "field.nome"),
        Column("sobrenome", "field.sobrenome"),
        Column("idade", "field.idade"),
        Column("status", "field.status", kind="status"),
    ),
    model=Pessoa,
)
