# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.success": "Success",

    # Buttons
    "button.save": "Save",
    "button.close": "Close",
    "button.add_address": "Add Address",

    # Error Messages - API
    "error.api.connection": "Could not reach the server.",
    "error.api.timeout": "The server took too long to respond.",

    # Status
    "status.active": "Active",
    "status.inactive": "Inactive",
    "status.all": "All",
    "filter.status": "Filter by status:",

    # Tabs / pages
    "page.uf": "States",
    "page.municipio": "Municipalities",
    "page.bairro": "Neighborhoods",
    "page.pessoa": "Persons",
    "page.uf.title": "State Registry",
    "page.municipio.title": "Municipality Registry",
    "page.bairro.title": "Neighborhood Registry",
    "page.pessoa.title": "Person Registry",

    # Fields
    "field.codigoUF": "State Code",
    "field.sigla": "Abbreviation",
    "field.nome": "Name",
    "field.status": "Status",
    "field.codigoMunicipio": "Municipality Code",
    "field.codigoBairro": "Neighborhood Code",
    "field.codigoPessoa": "Person Code",
    "field.sobrenome": "Last Name",
    "field.idade": "Age",
    "field.login": "Login",
    "field.senha": "Password",
    "field.nomeRua": "Street",
    "field.numero": "Number",
    "field.complemento": "Complement",
    "field.cep": "Postal Code",

    # Addresses
    "address.title": "Address",
    "address.list_title": "Addresses",
    "address.summary": "Street: {rua}, Number: {numero}, Complement: {complemento}, Postal Code: {cep}",

    # Success Messages
    "success.uf": "State saved successfully!",
    "success.municipio": "Municipality saved successfully!",
    "success.bairro": "Neighborhood saved successfully!",
    "success.pessoa": "Person saved successfully!",
}
