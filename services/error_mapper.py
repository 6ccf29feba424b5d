# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from typing import Optional

from app.config import Config
from services.translation_manager import tr
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


def extract_rejection_message(error: Exception) -> Optional[str]:
    """Return the server message of a domain rejection, or None.

    The backend reports rejected writes (missing fields, unknown codes,
    duplicates) as 404 with a JSON body holding a readable message.
    Any other failure is opaque and yields None.
    """
    if not isinstance(error, ApiException):
        return None
    if error.status_code != Config.API_REJECTION_STATUS:
        return None

    data = error.response_data
    if not isinstance(data, dict):
        return None

    for key in Config.API_ERROR_MESSAGE_KEYS:
        message = data.get(key)
        if isinstance(message, str):
            return message

    logger.warning(f"Rejection without message body: {data}")
    return None


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a generic message.

    Domain rejections keep the server text; everything else collapses to a
    generic connection message. Technical details are logged only.
    """
    rejection = extract_rejection_message(error)
    if rejection is not None:
        return rejection

    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        logger.warning(f"API error ({error.status_code}) in {error.context or 'unknown'}: {error}")
        return tr("error.api.connection")

    if isinstance(error, NetworkException):
        return map_network_error(error)

    logger.warning(f"Unexpected error: {error}")
    return tr("error.api.connection")
