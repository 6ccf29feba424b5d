# -*- coding: utf-8 -*-
"""Portuguese translations."""

PT_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Erro",
    "dialog.success": "Sucesso",

    # Buttons
    "button.save": "Salvar",
    "button.close": "Fechar",
    "button.add_address": "Adicionar Endereço",

    # Error Messages - API
    "error.api.connection": "Não foi possível comunicar com o servidor.",
    "error.api.timeout": "O servidor demorou para responder.",

    # Status
    "status.active": "Ativo",
    "status.inactive": "Inativo",
    "status.all": "Todos",
    "filter.status": "Filtrar por status:",

    # Tabs / pages
    "page.uf": "UF",
    "page.municipio": "Municípios",
    "page.bairro": "Bairros",
    "page.pessoa": "Pessoas",
    "page.uf.title": "Cadastro de UF",
    "page.municipio.title": "Cadastro de Municípios",
    "page.bairro.title": "Cadastro de Bairros",
    "page.pessoa.title": "Cadastro de Pessoas",

    # Fields
    "field.codigoUF": "Código UF",
    "field.sigla": "Sigla",
    "field.nome": "Nome",
    "field.status": "Status",
    "field.codigoMunicipio": "Código Município",
    "field.codigoBairro": "Código Bairro",
    "field.codigoPessoa": "Código Pessoa",
    "field.sobrenome": "Sobrenome",
    "field.idade": "Idade",
    "field.login": "Login",
    "field.senha": "Senha",
    "field.nomeRua": "Nome Rua",
    "field.numero": "Número",
    "field.complemento": "Complemento",
    "field.cep": "CEP",

    # Addresses
    "address.title": "Endereço",
    "address.list_title": "Endereços",
    "address.summary": "Rua: {rua}, Número: {numero}, Complemento: {complemento}, CEP: {cep}",

    # Success Messages
    "success.uf": "UF salva com sucesso!",
    "success.municipio": "Município salvo com sucesso!",
    "success.bairro": "Bairro salvo com sucesso!",
    "success.pessoa": "Pessoa salva com sucesso!",
}
