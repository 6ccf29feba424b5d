# -*- coding: utf-8 -*-
"""
Person entity model with its owned addresses.

A person's address list is replaced as a whole on every save; addresses
have no endpoint of their own.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from models.status import parse_int


@dataclass
class Endereco:
    """Address owned by exactly one Pessoa."""

    codigo_bairro: Optional[int] = None
    nome_rua: str = ""
    numero: str = ""
    complemento: str = ""
    cep: str = ""

    # Assigned by the server, only present on the read path
    codigo_endereco: Optional[int] = None
    codigo_pessoa: Optional[int] = None

    def to_api(self) -> dict:
        data = {
            "codigoBairro": self.codigo_bairro,
            "nomeRua": self.nome_rua,
            "numero": self.numero,
            "complemento": self.complemento,
            "cep": self.cep,
        }
        if self.codigo_endereco is not None:
            data["codigoEndereco"] = self.codigo_endereco
        return data

    @classmethod
    def from_api(cls, data: dict) -> "Endereco":
        return cls(
            codigo_bairro=parse_int(data.get("codigoBairro")),
            nome_rua=data.get("nomeRua") or "",
            numero=data.get("numero") or "",
            complemento=data.get("complemento") or "",
            cep=data.get("cep") or "",
            codigo_endereco=parse_int(data.get("codigoEndereco")),
            codigo_pessoa=parse_int(data.get("codigoPessoa")),
        )


@dataclass
class Pessoa:
    """
    Person entity with login credentials and an ordered address list.
    """

    codigo_pessoa: Optional[int] = None
    nome: str = ""
    sobrenome: str = ""
    idade: Optional[int] = None
    login: str = ""
    senha: str = ""
    status: Optional[int] = None
    enderecos: List[Endereco] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "Pessoa":
        return cls(
            codigo_pessoa=parse_int(data.get("codigoPessoa")),
            nome=data.get("nome") or "",
            sobrenome=data.get("sobrenome") or "",
            idade=parse_int(data.get("idade")),
            login=data.get("login") or "",
            senha=data.get("senha") or "",
            status=parse_int(data.get("status")),
            enderecos=[Endereco.from_api(e) for e in data.get("enderecos") or []],
        )
