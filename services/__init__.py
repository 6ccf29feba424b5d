# -*- coding: utf-8 -*-
"""
Cadastro Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "CadastroApiClient",
    "get_api_client",
    "ApiException",
    "NetworkException",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("CadastroApiClient", "get_api_client"):
        from . import api_client
        return getattr(api_client, name)
    elif name in ("ApiException", "NetworkException"):
        from . import exceptions
        return getattr(exceptions, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
