# -*- coding: utf-8 -*-
"""
Shared fixtures: offscreen Qt, a recording fake API and inline controllers.
"""
import os
import sys
import tempfile
from pathlib import Path

# Must be set before PyQt5 widgets or app.config are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="cadastro-logs-"))

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from PyQt5.QtWidgets import QApplication

from controllers.dispatcher import InlineDispatcher
from controllers.entity_controller import EntityController
from controllers.person_controller import PersonController
from controllers.schemas import UF_SCHEMA
from services.exceptions import ApiException
from services.translation_manager import set_language


class FakeApiClient:
    """Stands in for CadastroApiClient and records every call."""

    def __init__(self):
        self.calls = []
        self.list_responses = {}
        self.record_responses = {}
        self.errors = {}

    def _record(self, method, endpoint, body=None, params=None):
        self.calls.append({
            "method": method,
            "endpoint": endpoint,
            "body": body,
            "params": params,
        })
        error = self.errors.get(method)
        if error is not None:
            raise error

    def list_records(self, endpoint, params=None):
        self._record("GET", endpoint, params=params)
        return self.list_responses.get(endpoint, [])

    def get_record(self, endpoint, params):
        self._record("GET_ONE", endpoint, params=params)
        return self.record_responses.get(endpoint)

    def create_record(self, endpoint, body):
        self._record("POST", endpoint, body=body)
        return []

    def update_record(self, endpoint, body):
        self._record("PUT", endpoint, body=body)
        return []

    def calls_for(self, method):
        return [c for c in self.calls if c["method"] == method]


def rejection(message: str, key: str = "mensagem") -> ApiException:
    """Build the 404 the backend sends for rejected writes."""
    return ApiException(
        message="404 Client Error",
        status_code=404,
        response_data={key: message, "status": 404},
    )


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def portuguese():
    """Labels and messages are asserted in the default language."""
    set_language("pt")
    yield
    set_language("pt")


@pytest.fixture
def fake_api():
    return FakeApiClient()


@pytest.fixture
def uf_controller(qapp, fake_api):
    return EntityController(UF_SCHEMA, api=fake_api, dispatcher=InlineDispatcher())


@pytest.fixture
def person_controller(qapp, fake_api):
    return PersonController(api=fake_api, dispatcher=InlineDispatcher())


class SignalRecorder:
    """Collects every emission of a signal."""

    def __init__(self, signal):
        self.emissions = []
        signal.connect(self._record)

    def _record(self, *args):
        self.emissions.append(args[0] if len(args) == 1 else args)

    @property
    def count(self):
        return len(self.emissions)


@pytest.fixture
def record_signal():
    return SignalRecorder


@pytest.fixture
def make_rejection():
    return rejection
