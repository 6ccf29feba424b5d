# -*- coding: utf-8 -*-
"""
Tests for person submit with nested addresses and the address overlay.
"""

import pytest

from controllers.person_controller import AddressSlot
from services.exceptions import NetworkException


PERSON = {
    "codigoPessoa": "",
    "nome": "Maria",
    "sobrenome": "Silva",
    "idade": "30",
    "login": "maria",
    "senha": "segredo",
    "status": 1,
}


def fill(slot, **values):
    for name, value in values.items():
        setattr(slot, name, value)
    return slot


class TestAddressSlots:
    """Test address sub-form slots."""

    def test_slots_start_empty(self, person_controller):
        assert person_controller.address_slots == ()
        assert person_controller.collect_addresses() == []

    def test_add_slot_emits_new_slot(self, person_controller, record_signal):
        added = record_signal(person_controller.address_slot_added)

        slot = person_controller.add_address_slot()

        assert added.emissions == [slot]
        assert isinstance(slot, AddressSlot)
        assert len(person_controller.address_slots) == 1

    def test_slot_trims_text_and_parses_bairro(self):
        slot = AddressSlot(codigo_bairro=" 7 ", nome_rua="  Rua A ", numero=" 10", complemento="", cep=" 01000-000 ")

        endereco = slot.to_endereco()

        assert endereco.codigo_bairro == 7
        assert endereco.nome_rua == "Rua A"
        assert endereco.numero == "10"
        assert endereco.cep == "01000-000"

    def test_blank_bairro_is_sent_as_null(self):
        assert AddressSlot().to_endereco().to_api()["codigoBairro"] is None


class TestPersonSubmit:
    """Test the person payload."""

    def test_addresses_sent_in_slot_order(self, person_controller, fake_api):
        fill(person_controller.add_address_slot(), codigo_bairro="1", nome_rua="Rua A", numero="10")
        fill(person_controller.add_address_slot(), codigo_bairro="2", nome_rua=" Rua B ", numero="20",
             complemento="Apto 3", cep="02000-000")

        person_controller.submit(dict(PERSON))

        body = fake_api.calls_for("POST")[0]["body"]
        assert body["enderecos"] == [
            {"codigoBairro": 1, "nomeRua": "Rua A", "numero": "10", "complemento": "", "cep": ""},
            {"codigoBairro": 2, "nomeRua": "Rua B", "numero": "20", "complemento": "Apto 3", "cep": "02000-000"},
        ]

    def test_no_slots_sends_empty_list(self, person_controller, fake_api):
        person_controller.submit(dict(PERSON))

        body = fake_api.calls_for("POST")[0]["body"]
        assert body["enderecos"] == []
        assert "codigoPessoa" not in body
        assert body["login"] == "maria"
        assert body["senha"] == "segredo"

    def test_update_replaces_address_list(self, person_controller, fake_api):
        fill(person_controller.add_address_slot(), codigo_bairro="4", nome_rua="Rua C", numero="1")

        person_controller.submit({**PERSON, "codigoPessoa": "12"})

        body = fake_api.calls_for("PUT")[0]["body"]
        assert body["codigoPessoa"] == "12"
        assert len(body["enderecos"]) == 1

    def test_success_clears_slots(self, person_controller, record_signal):
        person_controller.add_address_slot()
        person_controller.add_address_slot()
        cleared = record_signal(person_controller.address_slots_cleared)
        resets = record_signal(person_controller.form_reset)

        person_controller.submit(dict(PERSON))

        assert person_controller.address_slots == ()
        assert cleared.count == 1
        assert resets.count == 1

    def test_rejection_keeps_slots(self, person_controller, fake_api, make_rejection):
        fake_api.errors["POST"] = make_rejection("Login já cadastrado")
        person_controller.add_address_slot()

        person_controller.submit(dict(PERSON))

        assert len(person_controller.address_slots) == 1
        assert person_controller.error_message == "Login já cadastrado"


class TestViewAddresses:
    """Test the read-only address overlay data."""

    def test_requests_person_by_code(self, person_controller, fake_api):
        person_controller.view_addresses(42)

        call = fake_api.calls_for("GET_ONE")[0]
        assert call["endpoint"] == "/pessoa"
        assert call["params"] == {"codigoPessoa": 42}

    def test_one_line_per_address(self, person_controller, fake_api, record_signal):
        fake_api.record_responses["/pessoa"] = {
            "codigoPessoa": 42,
            "nome": "Maria",
            "enderecos": [
                {"codigoEndereco": 1, "codigoBairro": 1, "nomeRua": "Rua A", "numero": "10",
                 "complemento": "", "cep": "01000-000"},
                {"codigoEndereco": 2, "codigoBairro": 2, "nomeRua": "Rua B", "numero": "20",
                 "complemento": "Casa", "cep": "02000-000"},
            ],
        }
        lines = record_signal(person_controller.addresses_loaded)

        person_controller.view_addresses(42)

        assert lines.emissions == [[
            "Rua: Rua A, Número: 10, Complemento: , CEP: 01000-000",
            "Rua: Rua B, Número: 20, Complemento: Casa, CEP: 02000-000",
        ]]

    def test_person_without_addresses(self, person_controller, fake_api, record_signal):
        fake_api.record_responses["/pessoa"] = {"codigoPessoa": 42, "nome": "Maria", "enderecos": []}
        lines = record_signal(person_controller.addresses_loaded)

        person_controller.view_addresses(42)

        assert lines.emissions == [[]]

    def test_unknown_person_shows_empty_list(self, person_controller, record_signal):
        lines = record_signal(person_controller.addresses_loaded)

        person_controller.view_addresses(999)

        assert lines.emissions == [[]]

    def test_view_does_not_touch_form_slots(self, person_controller, fake_api):
        fake_api.record_responses["/pessoa"] = {"codigoPessoa": 42, "enderecos": []}
        person_controller.add_address_slot()

        person_controller.view_addresses(42)

        assert len(person_controller.address_slots) == 1

    @pytest.mark.parametrize("error", [NetworkException("Connection refused")])
    def test_lookup_failure_emits_nothing(self, person_controller, fake_api, record_signal, error):
        fake_api.errors["GET_ONE"] = error
        lines = record_signal(person_controller.addresses_loaded)

        person_controller.view_addresses(42)

        assert lines.count == 0
