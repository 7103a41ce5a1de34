from __future__ import annotations

import json
import os
from typing import Dict

from . import LOCALES_DIR

LANG_ENV = "STATION_LANG"
_CACHE: Dict[str, Dict[str, str]] = {}


def _load_language(lang: str) -> Dict[str, str]:
    if lang in _CACHE:
        return _CACHE[lang]
    path = LOCALES_DIR / f"{lang}.json"
    if not path.exists():
        if lang != "en":
            return _load_language("en")
        return {}
    with path.open("r", encoding="utf-8-sig") as handle:
        data = json.load(handle)
    _CACHE[lang] = data
    return data


def get_lang(default: str = "en") -> str:
    return os.getenv(LANG_ENV) or default


def t(key: str, **fmt) -> str:
    lang = get_lang()
    catalog = _load_language(lang)
    if key not in catalog and lang != "en":
        catalog = _load_language("en")
    value = catalog.get(key, key)
    if fmt:
        value = value.format(**fmt)
    return value
