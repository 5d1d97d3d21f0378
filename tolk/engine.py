"""
Translation engine.

Ties key resolution, pluralization and placeholder substitution together and
holds the active/fallback locale state. Each host builds its own engine from
the translation table it was handed.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from tolk.config_loader import LocaleConfig
from tolk.errors import InvalidArgument
from tolk.plural_rules import PluralRule, get_plural_index
from tolk.pluralizer import Pluralizer
from tolk.resolver import KeyResolver
from tolk.utils import tolk_log


@dataclass
class TranslationOptions:
    """Per-call translation options."""
    args: Dict[str, Any] = field(default_factory=dict)
    pluralize: bool = False
    locale: Optional[str] = None

    @classmethod
    def coerce(cls, options: Union["TranslationOptions", Mapping, None]) -> "TranslationOptions":
        """Accept an options object, a plain dict with the same fields, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls(
                args=dict(options.get("args") or {}),
                pluralize=bool(options.get("pluralize", False)),
                locale=options.get("locale"),
            )
        raise InvalidArgument("options", f"Unsupported translation options: {options!r}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_value(value: Any) -> str:
    """String form of a placeholder value.

    Booleans render lowercase and integral floats lose their ``.0``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class TranslationEngine:
    """Look up, pluralize and fill in translated sentences."""

    def __init__(
        self,
        translations: Optional[Mapping],
        locale: str,
        fallback_locale: Optional[str] = None,
        plural_rule: PluralRule = get_plural_index,
        locales: Optional[List[str]] = None,
    ):
        self.resolver = KeyResolver(translations)
        self.pluralizer = Pluralizer(plural_rule)
        self.config = LocaleConfig(
            locale=locale,
            fallback_locale=fallback_locale,
            locales=tuple(locales if locales is not None else self.resolver.locales()),
        )

    @classmethod
    def from_config(
        cls,
        translations: Optional[Mapping],
        config: LocaleConfig,
        plural_rule: PluralRule = get_plural_index,
    ) -> "TranslationEngine":
        """Build an engine from a LocaleConfig; empty ``locales`` means the table's."""
        return cls(
            translations,
            locale=config.locale,
            fallback_locale=config.fallback_locale,
            plural_rule=plural_rule,
            locales=list(config.locales) or None,
        )

    # Locale state

    @property
    def fallback_locale(self) -> Optional[str]:
        return self.config.fallback_locale

    def set_active_locale(self, locale: str) -> None:
        if self.config.locales and locale not in self.config.locales:
            tolk_log("ENGINE", f"Locale [{locale}] is not one of {list(self.config.locales)}", level="WARN")
        self.config.locale = locale

    def get_active_locale(self) -> str:
        return self.config.locale

    def list_locales(self) -> List[str]:
        return list(self.config.locales)

    # Translation

    def translate(
        self,
        key: str,
        options: Union[TranslationOptions, Mapping, None] = None,
        silent: bool = False,
    ) -> str:
        """Translate ``key``.

        The sentence is looked up in ``options.locale`` (or the active locale),
        pluralized on ``args["count"]`` when ``options.pluralize`` is set (the
        plural form always follows the active locale's rule), and
        every ``:name`` placeholder is replaced by the matching argument.

        Raises:
            LocaleNotFound: the locale is not in the table.
            TranslationKeyNotFound: the key is missing and ``silent`` is off.
            InvalidArgument: pluralization without a numeric ``count``.
        """
        options = TranslationOptions.coerce(options)
        args = options.args or {}
        locale = options.locale or self.config.locale

        sentence = self.resolver.resolve(key, locale, self.config.fallback_locale, silent)

        if options.pluralize:
            count = args.get("count")
            if not _is_number(count):
                raise InvalidArgument(
                    "count",
                    "On pluralization, the argument `count` must be a number and non-null.",
                )
            sentence = self.pluralizer.pluralize(sentence, count, self.config.locale)

        # Replace the placeholders, one pass per argument in argument order
        for name, value in args.items():
            sentence = sentence.replace(f":{name}", format_value(value))

        return sentence

    def translate_or_key(
        self,
        key: str,
        options: Union[TranslationOptions, Mapping, None] = None,
    ) -> str:
        """Like translate(), but a missing key comes back as the key itself."""
        return self.translate(key, options, silent=True)

    def translate_choice(
        self,
        key: str,
        count: Any,
        args: Optional[Mapping] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate ``key`` pluralized on ``count``, which is also exposed as ``:count``."""
        merged = dict(args or {})
        merged["count"] = count
        return self.translate(
            key,
            TranslationOptions(args=merged, pluralize=True, locale=locale or self.config.locale),
        )
