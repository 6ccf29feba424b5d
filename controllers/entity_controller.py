# -*- coding: utf-8 -*-
"""
Entity Controller
=================
Generic list-and-upsert controller, one instance per registry screen.

Handles:
- Loading the whole collection into row view models
- Deciding create vs. update from the identifier field
- Surfacing server rejections inline
- Resetting the form and refreshing the list after a save
"""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, List, Optional, Union

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from controllers.schemas import EntitySchema
from controllers.view_models import RowViewModel, build_rows
from services.api_client import get_api_client
from services.error_mapper import extract_rejection_message
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateIntent:
    """Submit without identifier: POST the fields."""
    fields: Dict[str, Any]
    method: ClassVar[str] = "POST"

    def body(self, schema: EntitySchema) -> Dict[str, Any]:
        return dict(self.fields)


@dataclass(frozen=True)
class UpdateIntent:
    """Submit with identifier: PUT the fields plus the identifier."""
    record_id: Any
    fields: Dict[str, Any]
    method: ClassVar[str] = "PUT"

    def body(self, schema: EntitySchema) -> Dict[str, Any]:
        data = dict(self.fields)
        data[schema.id_field] = self.record_id
        return data


Intent = Union[CreateIntent, UpdateIntent]


def has_identifier(value: Any) -> bool:
    """None, empty and whitespace-only values mean 'no identifier'."""
    if value is None:
        return False
    return str(value).strip() != ""


def decide_intent(schema: EntitySchema, form_values: Dict[str, Any]) -> Intent:
    """
    Decide once, at submit time, whether the form creates or updates.

    Text fields flagged for trimming are stripped; every other value is
    sent as the form produced it.
    """
    fields = {}
    for form_field in schema.fields:
        value = form_values.get(form_field.name)
        if form_field.trim and isinstance(value, str):
            value = value.strip()
        fields[form_field.name] = value

    record_id = form_values.get(schema.id_field)
    if has_identifier(record_id):
        if isinstance(record_id, str):
            record_id = record_id.strip()
        return UpdateIntent(record_id=record_id, fields=fields)
    return CreateIntent(fields=fields)


class EntityController(BaseController):
    """
    Controller for one registry entity.

    Lifecycle of a submit: Idle -> Submitting -> Idle, ending in success
    (form reset, list reloaded, notification), server rejection (message in
    the error area) or an unexpected failure (logged only).
    """

    # Signals
    rows_loaded = pyqtSignal(list)  # List[RowViewModel]
    form_reset = pyqtSignal()
    error_changed = pyqtSignal(str)  # inline error text, "" clears it
    save_succeeded = pyqtSignal(str)  # success notification text

    def __init__(self, schema: EntitySchema, api=None, dispatcher=None, parent=None):
        super().__init__(dispatcher=dispatcher, parent=parent)
        self.schema = schema
        self._api = api
        self._records: List[Any] = []
        self._rows: List[RowViewModel] = []
        self._filters: Optional[Dict[str, Any]] = None
        self._error_message = ""
        self._submitting = 0

    # ==================== Properties ====================

    @property
    def api(self):
        if self._api is None:
            self._api = get_api_client()
        return self._api

    @property
    def records(self) -> List[Any]:
        """Records of the last successful load."""
        return self._records

    @property
    def rows(self) -> List[RowViewModel]:
        return self._rows

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def is_submitting(self) -> bool:
        return self._submitting > 0

    # ==================== Listing ====================

    def load_records(self, filters: Optional[Dict[str, Any]] = None):
        """
        Fetch the whole collection and publish it as rows.

        Args:
            filters: Optional server-side query parameters (e.g. {"status": 1})

        A failed fetch is logged and leaves the last rendered rows in place.
        """
        self._filters = filters
        endpoint = self.schema.endpoint
        self._log_operation("load_records", endpoint=endpoint, filters=filters)

        def fetch():
            return self.api.list_records(endpoint, params=filters)

        self.run_async("load_records", fetch, self._on_records_loaded, self._on_load_failed)

    def _on_records_loaded(self, result: OperationResult):
        self._records = [self.schema.model.from_api(item) for item in result.data or []]
        self._rows = build_rows(self.schema, self._records)
        self.rows_loaded.emit(self._rows)

    def _on_load_failed(self, error: Exception):
        logger.error(f"Failed to load {self.schema.key} records: {error}")

    def fetch_record(self, record_id: Any, on_loaded: Callable[[Optional[Any]], None]):
        """
        Fetch one record by identifier and hand the parsed model to on_loaded.

        on_loaded receives None when the server does not know the code.
        Failures are logged only.
        """
        endpoint = self.schema.endpoint
        params = {self.schema.id_field: record_id}
        self._log_operation("fetch_record", endpoint=endpoint, params=params)

        def fetch():
            return self.api.get_record(endpoint, params=params)

        def loaded(result: OperationResult):
            on_loaded(self.schema.model.from_api(result.data) if result.data else None)

        def failed(error: Exception):
            logger.error(f"Failed to fetch {self.schema.key} {record_id}: {error}")

        self.run_async("fetch_record", fetch, loaded, failed)

    # ==================== Submit ====================

    def submit(self, form_values: Dict[str, Any]) -> Intent:
        """
        Create or update a record from the current form values.

        Returns:
            The intent that was sent
        """
        intent = decide_intent(self.schema, form_values)
        body = self._build_body(intent)
        endpoint = self.schema.endpoint
        self._log_operation("submit", method=intent.method, endpoint=endpoint)

        if isinstance(intent, UpdateIntent):
            def send():
                return self.api.update_record(endpoint, body)
        else:
            def send():
                return self.api.create_record(endpoint, body)

        # No cancellation: a slow earlier save may still finish after a
        # later one and trigger its own refresh.
        self._submitting += 1
        self.run_async(
            "submit",
            send,
            lambda result: self._on_submit_succeeded(intent, result),
            self._on_submit_failed,
        )
        return intent

    def _build_body(self, intent: Intent) -> Dict[str, Any]:
        return intent.body(self.schema)

    def _on_submit_succeeded(self, intent: Intent, result: OperationResult):
        self._submitting -= 1
        self._set_error_message("")
        self._reset_form()
        self.load_records(self._filters)
        self.save_succeeded.emit(tr(self.schema.success_key))
        self._trigger_callbacks("on_saved", intent)

    def _on_submit_failed(self, error: Exception):
        self._submitting -= 1
        message = extract_rejection_message(error)
        if message is not None:
            logger.warning(f"{self.schema.key} rejected by server: {message}")
            self._set_error_message(message)
            return
        # Unexpected failures stay invisible to the user; form and error area are kept
        logger.error(f"Failed to save {self.schema.key}: {error}")

    def _set_error_message(self, message: str):
        self._error_message = message
        self.error_changed.emit(message)

    def _reset_form(self):
        self.form_reset.emit()
