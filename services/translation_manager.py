# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from services.translations.en import EN_TRANSLATIONS
from services.translations.pt import PT_TRANSLATIONS
from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton Translation Manager."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = "pt"
            cls._instance._translations = {
                "pt": PT_TRANSLATIONS,
                "en": EN_TRANSLATIONS,
            }
        return cls._instance

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            lang_code = "pt"
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(
            self._current_language, {}
        ).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                pass
        return translation


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()
