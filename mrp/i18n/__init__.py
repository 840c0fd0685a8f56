"""
Report labels in English and Serbian.

Each locale is a nested JSON file under ``locales/``. It is flattened
once into dotted keys (``"table.material"``) and cached per language;
labels missing from a translation fall back to English.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

_LOCALES_DIR = Path(__file__).parent / "locales"
_FALLBACK = "en"

_active_language: str = _FALLBACK


def _flatten(tree: dict[str, Any], prefix: str = "") -> dict[str, str]:
    labels: dict[str, str] = {}
    for name, node in tree.items():
        if isinstance(node, dict):
            labels.update(_flatten(node, f"{prefix}{name}."))
        else:
            labels[f"{prefix}{name}"] = str(node)
    return labels


@lru_cache(maxsize=None)
def _catalog(language: str) -> dict[str, str]:
    with open(_LOCALES_DIR / f"{language}.json", encoding="utf-8") as f:
        return _flatten(json.load(f))


def load_locale(language: str = _FALLBACK) -> dict[str, str]:
    """Switch the active language.

    Unknown language codes select English.

    Returns:
        The active catalog, keyed by dotted label path
    """
    global _active_language

    if language not in get_available_languages():
        language = _FALLBACK
    _active_language = language
    return _catalog(language)


def t(key: str, **kwargs: Any) -> str:
    """Look up a label in the active language and fill in placeholders.

    Returns the key itself when no locale defines it.
    """
    label = _catalog(_active_language).get(key) or _catalog(_FALLBACK).get(key)
    if label is None:
        return key
    try:
        return label.format(**kwargs)
    except KeyError:
        return label


def get_available_languages() -> list[str]:
    """Language codes with a locale file, sorted."""
    return sorted(path.stem for path in _LOCALES_DIR.glob("*.json"))


def get_current_language() -> str:
    return _active_language
