# -*- coding: utf-8 -*-
"""
Main application window: one tab per registry entity.
"""

from PyQt5.QtWidgets import QMainWindow, QTabWidget

from .config import Config
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window hosting the registry pages."""

    def __init__(self, api=None, dispatcher=None, parent=None):
        super().__init__(parent)
        self.api = api
        self.dispatcher = dispatcher
        self.pages = []

        self._setup_window()
        self._create_pages()

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_NAME} - {Config.APP_TITLE}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _create_pages(self):
        """Create one independent controller and page per entity."""
        # Import here to avoid circular imports
        from controllers.entity_controller import EntityController
        from controllers.person_controller import PersonController
        from controllers.schemas import BAIRRO_SCHEMA, MUNICIPIO_SCHEMA, UF_SCHEMA
        from ui.pages.entity_page import EntityPage
        from ui.pages.pessoa_page import PessoaPage

        self.tabs = QTabWidget()
        self.setCentralWidget(self.tabs)

        for schema in (UF_SCHEMA, MUNICIPIO_SCHEMA, BAIRRO_SCHEMA):
            controller = EntityController(schema, api=self.api, dispatcher=self.dispatcher, parent=self)
            self._add_page(EntityPage(controller), f"page.{schema.key}")

        person_controller = PersonController(api=self.api, dispatcher=self.dispatcher, parent=self)
        self._add_page(PessoaPage(person_controller), "page.pessoa")

    def _add_page(self, page, title_key: str):
        self.pages.append(page)
        self.tabs.addTab(page, tr(title_key))

    def load_all(self):
        """Populate every table; each page loads independently."""
        logger.info("Loading all registry tables")
        for page in self.pages:
            page.load()
