"""
Module-level translation helpers.

These wrap a default TranslationEngine so view code can call ``trans("...")``
without carrying an engine around. The host installs the engine with
``configure()``; without it the first call builds one from the locale
configuration and no translation table.
"""

import threading
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, List, Optional, Union

from tolk.config_loader import LocaleConfig, load_locale_config
from tolk.engine import TranslationEngine, TranslationOptions
from tolk.plural_rules import PluralRule, get_plural_index
from tolk.utils import tolk_log

Options = Union[TranslationOptions, Mapping, None]

_engine: Optional[TranslationEngine] = None
_engine_lock = threading.Lock()


def configure(
    translations: Optional[Mapping],
    locale: Optional[str] = None,
    fallback_locale: Optional[str] = None,
    config: Optional[LocaleConfig] = None,
    plural_rule: PluralRule = get_plural_index,
) -> TranslationEngine:
    """Install the default engine; explicit locales override a copy of ``config``."""
    global _engine
    config = replace(config or load_locale_config())
    if locale is not None:
        config.locale = locale
    if fallback_locale is not None:
        config.fallback_locale = fallback_locale

    engine = TranslationEngine.from_config(translations, config, plural_rule)
    with _engine_lock:
        _engine = engine
    tolk_log("API", f"Configured locale [{config.locale}], fallback [{config.fallback_locale}]", level="DEBUG")
    return engine


def reset() -> None:
    """Forget the default engine."""
    global _engine
    with _engine_lock:
        _engine = None


def get_engine() -> TranslationEngine:
    """Return the default engine, building it on first use."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = TranslationEngine.from_config(None, load_locale_config())
    return _engine


def trans(key: str, options: Options = None) -> str:
    """Translate the given message."""
    return get_engine().translate(key, options)


def __(key: str, options: Options = None) -> str:
    """Translate the given message, returning the key when it is not found."""
    return get_engine().translate_or_key(key, options)


def trans_choice(key: str, count: Any, args: Optional[Mapping] = None, locale: Optional[str] = None) -> str:
    """Translate with pluralization on ``count``."""
    return get_engine().translate_choice(key, count, args, locale)


def set_locale(locale: str) -> None:
    get_engine().set_active_locale(locale)


def get_locale() -> str:
    return get_engine().get_active_locale()


def locales() -> List[str]:
    return get_engine().list_locales()
