# -*- coding: utf-8 -*-
"""
Cadastro Controllers
====================
Controller layer between the registry pages and the backend API.

Controllers provide:
- Create/update decision from the identifier field
- Call results wrapped in OperationResult
- Qt signals for UI updates
- Background dispatch of API calls

Usage:
    from controllers import EntityController, UF_SCHEMA

    controller = EntityController(UF_SCHEMA)
    controller.rows_loaded.connect(table_model.set_rows)
    controller.load_records()
    controller.submit({"codigoUF": "", "sigla": "SP", "nome": "São Paulo", "status": 1})
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.dispatcher import (
    InlineDispatcher,
    ThreadedDispatcher,
)

# Domain controllers
from controllers.entity_controller import (
    CreateIntent,
    EntityController,
    UpdateIntent,
    decide_intent,
)

from controllers.person_controller import (
    AddressSlot,
    PersonController,
)

from controllers.schemas import (
    BAIRRO_SCHEMA,
    MUNICIPIO_SCHEMA,
    PESSOA_SCHEMA,
    UF_SCHEMA,
    EntitySchema,
)

from controllers.view_models import (
    RowViewModel,
    build_rows,
)

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",
    "InlineDispatcher",
    "ThreadedDispatcher",

    # Entities
    "EntityController",
    "CreateIntent",
    "UpdateIntent",
    "decide_intent",
    "EntitySchema",
    "UF_SCHEMA",
    "MUNICIPIO_SCHEMA",
    "BAIRRO_SCHEMA",
    "PESSOA_SCHEMA",
    "RowViewModel",
    "build_rows",

    # Person
    "PersonController",
    "AddressSlot",
]
