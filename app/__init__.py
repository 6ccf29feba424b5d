# -*- coding: utf-8 -*-
"""
Cadastro Application Core Module
"""

from .config import Config
from .main_window import MainWindow

__all__ = ["Config", "MainWindow"]
