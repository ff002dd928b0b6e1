"""User-facing message lookup for SkinGenie.

Messages live in one JSON file per language next to this module. English is
always loaded underneath the selected language, so a missing translation shows
the English text and a missing key shows the key itself.

Usage: from i18n import t; t("key", name=value)
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from PyQt6.QtCore import QSettings

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
SETTINGS_SCOPE = ("SkinGenie", "SkinGenie")

_messages: Dict[str, str] = {}


def _get_i18n_dir() -> Path:
    return Path(__file__).parent


def available_languages() -> List[str]:
    """Language codes that have a message file, English first."""
    codes = sorted(p.stem for p in _get_i18n_dir().glob("*.json"))
    if DEFAULT_LANGUAGE in codes:
        codes.remove(DEFAULT_LANGUAGE)
        codes.insert(0, DEFAULT_LANGUAGE)
    return codes


def _read_messages(code: str) -> Dict[str, str]:
    path = _get_i18n_dir() / f"{code}.json"
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read messages for %r: %s", code, e)
        return {}


def init(language: Optional[str] = None) -> str:
    """Load messages for `language`, or the stored preference when omitted.

    Unknown languages fall back to English. Returns the language in effect.
    """
    global _messages
    if language is None:
        language = QSettings(*SETTINGS_SCOPE).value("language", DEFAULT_LANGUAGE)
    if language not in available_languages():
        logger.warning("No messages for language %r, using %s", language, DEFAULT_LANGUAGE)
        language = DEFAULT_LANGUAGE

    messages = _read_messages(DEFAULT_LANGUAGE)
    if language != DEFAULT_LANGUAGE:
        messages.update(_read_messages(language))
    _messages = messages
    return language


def t(key: str, **kwargs) -> str:
    """Look up a message and fill in its {placeholders}."""
    if not _messages:
        init()
    text = _messages.get(key) or key
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return text
