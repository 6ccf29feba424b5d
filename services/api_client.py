# -*- coding: utf-8 -*-
"""
Cadastro API Client
===================

Single access point to the registry backend: one collection-level endpoint
per entity (/uf, /municipio, /bairro, /pessoa). Create is POST, update is PUT,
both against the same address with the identifier carried in the body.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

_api_client_instance = None


@dataclass
class ApiConfig:
    """
    API connection settings.

    ✅ DYNAMIC: Reads from .env file via Config

    Example .env:
        API_BASE_URL=http://192.168.0.10:8080
        API_TIMEOUT=15
    """
    base_url: str = None  # Will be loaded from Config
    timeout: Optional[float] = None

    def __post_init__(self):
        """Load from Config if not provided."""
        if self.base_url is None:
            from app.config import Config

            self.base_url = Config.API_BASE_URL
            if self.timeout is None:
                self.timeout = Config.API_TIMEOUT


class CadastroApiClient:
    """
    HTTP client for the registry backend.

    Usage:
        client = CadastroApiClient(ApiConfig(base_url="http://localhost:8080"))
        ufs = client.list_records("/uf")
        client.create_record("/uf", {"sigla": "SP", "nome": "São Paulo", "status": 1})
    """

    def __init__(self, config: ApiConfig):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        logger.info(f"API client ready for {self.base_url}")

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request and decode the JSON answer.

        Args:
            method: HTTP method (GET, POST, PUT)
            endpoint: API endpoint (e.g., "/uf")
            json_data: JSON payload
            params: Query parameters

        Returns:
            Decoded response body, or None for an empty body

        Raises:
            ApiException: the server answered with an error status
            NetworkException: the server could not be reached or the body is not JSON
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data is not None:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                timeout=self.config.timeout
            )
            response.raise_for_status()

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data,
                context=endpoint
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {method} {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=endpoint
            )

        if not response.text:
            logger.info(f"[API RES] {response.status_code} {endpoint} (empty)")
            return None

        try:
            result = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON response: {method} {endpoint} - {e}")
            raise NetworkException(
                message=f"Invalid JSON response from {endpoint}",
                original_error=e,
                context=endpoint
            )

        logger.info(f"[API RES] {response.status_code} {endpoint}")
        res_str = json.dumps(result, ensure_ascii=False, default=str)
        if len(res_str) > 1000:
            logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
        else:
            logger.debug(f"[API RES] Body: {res_str}")
        return result

    # ==================== Collections ====================

    def list_records(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Fetch the whole collection of an entity.

        Args:
            endpoint: Collection endpoint, e.g. "/municipio"
            params: Optional server-side filters, e.g. {"status": 1}

        Returns:
            Records in the order the server sent them
        """
        result = self._request("GET", endpoint, params=params)
        if result is None:
            return []
        if isinstance(result, dict):
            # A filter matching exactly one record comes back unwrapped
            return [result]
        return result

    def get_record(self, endpoint: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Fetch a single record through query parameters.

        The backend answers a lookup by code with the bare object when found
        and with an empty list otherwise.
        """
        result = self._request("GET", endpoint, params=params)
        if isinstance(result, list):
            return result[0] if result else None
        return result

    def create_record(self, endpoint: str, body: Dict[str, Any]) -> Any:
        """POST a new record (body without identifier)."""
        return self._request("POST", endpoint, json_data=body)

    def update_record(self, endpoint: str, body: Dict[str, Any]) -> Any:
        """PUT an existing record (identifier inside the body)."""
        return self._request("PUT", endpoint, json_data=body)


def get_api_client(config: Optional[ApiConfig] = None) -> CadastroApiClient:
    """
    Return the process-wide API client (Singleton).

    Args:
        config: API settings (only used on first call)
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = CadastroApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Drop the cached API client (used by tests)."""
    global _api_client_instance
    _api_client_instance = None
