# -*- coding: utf-8 -*-
"""
Tests for rejection extraction and user-facing error messages.
"""

import pytest
import requests

from services.error_mapper import extract_rejection_message, map_exception, map_network_error
from services.exceptions import ApiException, NetworkException
from services.translation_manager import get_language, set_language, tr


class TestExtractRejectionMessage:
    """Only a 404 carrying a readable message is a domain rejection."""

    def test_mensagem_key(self, make_rejection):
        assert extract_rejection_message(make_rejection("Município não encontrado")) == "Município não encontrado"

    def test_message_key(self, make_rejection):
        assert extract_rejection_message(make_rejection("not found", key="message")) == "not found"

    def test_mensagem_wins_over_message(self):
        error = ApiException("404", status_code=404, response_data={"message": "b", "mensagem": "a"})
        assert extract_rejection_message(error) == "a"

    def test_message_shown_verbatim(self, make_rejection):
        text = "  Não foi possível incluir Bairro.  "
        assert extract_rejection_message(make_rejection(text)) == text

    @pytest.mark.parametrize("error", [
        ApiException("500", status_code=500, response_data={"mensagem": "x"}),
        ApiException("400", status_code=400, response_data={"mensagem": "x"}),
        ApiException("404", status_code=404, response_data={}),
        ApiException("404", status_code=404, response_data={"mensagem": 12}),
        NetworkException("refused"),
        ValueError("unexpected"),
    ])
    def test_everything_else_is_opaque(self, error):
        assert extract_rejection_message(error) is None


class TestMapException:
    """Test dialog messages for the startup/error handler."""

    def test_rejection_keeps_server_text(self, make_rejection):
        assert map_exception(make_rejection("Sigla duplicada")) == "Sigla duplicada"

    def test_server_error_is_generic(self):
        error = ApiException("500", status_code=500)
        assert map_exception(error, context="/uf") == tr("error.api.connection")
        assert error.context == "/uf"

    def test_timeout(self):
        error = NetworkException("timed out", original_error=requests.exceptions.Timeout("Read timed out"))
        assert map_network_error(error) == tr("error.api.timeout")

    def test_connection(self):
        error = NetworkException("refused", original_error=requests.exceptions.ConnectionError("refused"))
        assert map_exception(error) == tr("error.api.connection")

    def test_unexpected(self):
        assert map_exception(RuntimeError("boom")) == tr("error.api.connection")


class TestTranslations:
    """Test language switching."""

    def test_default_is_portuguese(self):
        assert get_language() == "pt"
        assert tr("success.municipio") == "Município salvo com sucesso!"

    def test_english(self):
        set_language("en")
        assert get_language() == "en"
        assert tr("status.active") == "Active"

    def test_unknown_key_returns_key(self):
        assert tr("no.such.key") == "no.such.key"

    def test_format_arguments(self):
        text = tr("address.summary", rua="Rua A", numero="1", complemento="", cep="1")
        assert text == "Rua: Rua A, Número: 1, Complemento: , CEP: 1"
