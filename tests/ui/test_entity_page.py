# -*- coding: utf-8 -*-
"""
Tests for the generic registry page wired to an inline controller.
"""

import pytest
from PyQt5.QtCore import Qt

from controllers.dispatcher import InlineDispatcher
from controllers.entity_controller import EntityController
from controllers.schemas import MUNICIPIO_SCHEMA
from ui.error_handler import ErrorHandler
from ui.pages.entity_page import EntityPage


@pytest.fixture
def notices(monkeypatch):
    """Capture success dialogs instead of opening them."""
    shown = []
    monkeypatch.setattr(ErrorHandler, "show_success",
                        lambda parent, message, title=None: shown.append(message))
    return shown


@pytest.fixture
def uf_page(uf_controller):
    return EntityPage(uf_controller)


class TestEntityPage:
    """Test form, error area and table."""

    def test_form_has_id_and_schema_fields(self, uf_page):
        assert list(uf_page.inputs) == ["codigoUF", "sigla", "nome", "status"]

    def test_headers_follow_columns(self, uf_page):
        headers = [
            uf_page.table_model.headerData(i, Qt.Horizontal)
            for i in range(uf_page.table_model.columnCount())
        ]
        assert headers == ["Código UF", "Sigla", "Nome", "Status"]

    def test_collect_form_values(self, uf_page):
        uf_page.inputs["sigla"].setText(" SP ")
        uf_page.inputs["nome"].setText("São Paulo")
        uf_page.inputs["status"].setCurrentIndex(1)

        assert uf_page.collect_form_values() == {
            "codigoUF": "", "sigla": " SP ", "nome": "São Paulo", "status": 2,
        }

    def test_save_creates_and_resets(self, uf_page, fake_api, notices):
        uf_page.inputs["sigla"].setText("SP")
        uf_page.inputs["nome"].setText("São Paulo")

        uf_page.save_btn.click()

        assert fake_api.calls_for("POST")[0]["body"] == {"sigla": "SP", "nome": "São Paulo", "status": 1}
        assert uf_page.inputs["sigla"].text() == ""
        assert uf_page.inputs["nome"].text() == ""
        assert notices == ["UF salva com sucesso!"]

    def test_save_with_code_updates(self, uf_page, fake_api, notices):
        uf_page.inputs["codigoUF"].setText("5")
        uf_page.inputs["sigla"].setText("SP")
        uf_page.inputs["nome"].setText("São Paulo")
        uf_page.inputs["status"].setCurrentIndex(1)

        uf_page.save_btn.click()

        assert fake_api.calls_for("PUT")[0]["body"] == {
            "codigoUF": "5", "sigla": "SP", "nome": "São Paulo", "status": 2,
        }
        assert uf_page.inputs["codigoUF"].text() == ""

    def test_rejection_shown_inline_and_form_kept(self, uf_page, fake_api, notices, make_rejection):
        fake_api.errors["POST"] = make_rejection("O campo sigla está vazio.")
        uf_page.inputs["nome"].setText("São Paulo")

        uf_page.save_btn.click()

        assert uf_page.error_label.text() == "O campo sigla está vazio."
        assert uf_page.inputs["nome"].text() == "São Paulo"
        assert notices == []

    def test_table_shows_loaded_rows(self, uf_page, fake_api):
        fake_api.list_responses["/uf"] = [
            {"codigoUF": 2, "sigla": "SP", "nome": "São Paulo", "status": 1},
            {"codigoUF": 1, "sigla": "AC", "nome": "Acre", "status": 2},
        ]

        uf_page.load()

        model = uf_page.table_model
        assert model.rowCount() == 2
        assert model.data(model.index(0, 1)) == "SP"
        assert model.data(model.index(1, 3)) == "Inativo"

    def test_status_filter_reloads(self, uf_page, fake_api):
        uf_page.status_filter.setCurrentIndex(1)

        assert fake_api.calls_for("GET")[-1]["params"] == {"status": 1}

        uf_page.status_filter.setCurrentIndex(0)

        assert fake_api.calls_for("GET")[-1]["params"] is None

    def test_number_fields_use_line_edits(self, qapp, fake_api):
        controller = EntityController(MUNICIPIO_SCHEMA, api=fake_api, dispatcher=InlineDispatcher())
        page = EntityPage(controller)

        page.inputs["codigoUF"].setText("35")
        page.inputs["nome"].setText("Campinas")

        assert page.collect_form_values()["codigoUF"] == "35"
