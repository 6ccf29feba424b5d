# -*- coding: utf-8 -*-
"""
Request dispatchers.

Controllers hand blocking API calls to a dispatcher together with a success
and a failure callback. There is no cancellation and no in-flight tracking:
every dispatched call runs to completion and reports back.
"""

from typing import Any, Callable, Dict

from PyQt5.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from utils.logger import get_logger

logger = get_logger(__name__)


class RequestWorker(QThread):
    """Background worker running a single API call."""

    succeeded = pyqtSignal(object)  # call result
    failed = pyqtSignal(object)  # raised exception

    def __init__(self, func: Callable[[], Any], parent=None):
        super().__init__(parent)
        self._func = func

    def run(self):
        """Run the call in background."""
        try:
            result = self._func()
        except Exception as e:
            self.failed.emit(e)
            return
        self.succeeded.emit(result)


class ThreadedDispatcher(QObject):
    """
    Runs each call on its own RequestWorker.

    Results are delivered through slots of this object, so callbacks always
    run on the thread that owns the dispatcher (the GUI thread).
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._callbacks: Dict[RequestWorker, tuple] = {}

    def dispatch(self, func: Callable[[], Any], on_success: Callable, on_failure: Callable):
        worker = RequestWorker(func)
        logger.debug(f"Dispatching {getattr(func, '__name__', func)} on worker thread")
        self._callbacks[worker] = (on_success, on_failure)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(self._on_finished)
        worker.start()

    @pyqtSlot(object)
    def _on_succeeded(self, result):
        callbacks = self._callbacks.get(self.sender())
        if callbacks:
            callbacks[0](result)

    @pyqtSlot(object)
    def _on_failed(self, error):
        callbacks = self._callbacks.get(self.sender())
        if callbacks:
            callbacks[1](error)

    @pyqtSlot()
    def _on_finished(self):
        worker = self.sender()
        self._callbacks.pop(worker, None)
        if worker is not None:
            worker.deleteLater()


class InlineDispatcher:
    """Runs calls synchronously on the caller's thread (scripts and tests)."""

    def dispatch(self, func: Callable[[], Any], on_success: Callable, on_failure: Callable):
        try:
            result = func()
        except Exception as e:
            on_failure(e)
            return
        on_success(result)
