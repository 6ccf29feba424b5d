# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for all controllers in Cadastro.

Provides common functionality and patterns for controllers.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject

from controllers.dispatcher import ThreadedDispatcher
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: T = None) -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data)


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Logging
    - Event callbacks
    - Background request dispatch
    """

    def __init__(self, dispatcher=None, parent=None):
        super().__init__(parent)
        self._dispatcher = dispatcher or ThreadedDispatcher(self)
        self._callbacks: Dict[str, List[Callable]] = {}

    def _log_operation(self, operation: str, **kwargs):
        """Log an operation."""
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def register_callback(self, event: str, callback: Callable):
        """Register a callback for an event."""
        if event not in self._callbacks:
            self._callbacks[event] = []
        self._callbacks[event].append(callback)

    def _trigger_callbacks(self, event: str, *args, **kwargs):
        """Trigger callbacks for an event."""
        if event in self._callbacks:
            for callback in self._callbacks[event]:
                try:
                    callback(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Error in callback for {event}: {e}")

    def run_async(
        self,
        operation: str,
        func: Callable,
        on_success: Callable[[OperationResult], None],
        on_failure: Callable[[Exception], None],
    ):
        """
        Run a blocking API call off the GUI thread.

        on_success receives an OperationResult wrapping the call's return
        value; on_failure receives the raised exception. Both run on the
        thread that owns this controller.
        """
        logger.debug(f"{self.__class__.__name__}: dispatching {operation}")

        def succeeded(result):
            on_success(OperationResult.ok(data=result))

        def failed(error: Exception):
            logger.debug(f"{self.__class__.__name__}: {operation} failed: {error}")
            on_failure(error)

        self._dispatcher.dispatch(func, succeeded, failed)
