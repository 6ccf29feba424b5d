#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Cadastro - UF, Municípios, Bairros e Pessoas
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from app import MainWindow
from services.translation_manager import get_language, set_language
from ui.error_handler import ErrorHandler
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info(f"API base URL: {Config.API_BASE_URL}")
        logger.info("=" * 80)

        set_language(Config.DEFAULT_LANGUAGE)
        logger.info(f"Language: {get_language()}")

        window = MainWindow()
        window.show()
        window.load_all()
        logger.info(">> Main window created and displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        message = ErrorHandler.handle(e, context="startup", show_dialog=False)
        print(f"\n[ERROR] {message}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
