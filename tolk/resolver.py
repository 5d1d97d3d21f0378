"""Find the sentence a translation key points to."""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from tolk.errors import ErrorKind, LocaleNotFound, TranslationKeyNotFound
from tolk.utils import tolk_log

_MISSING = object()


def _step(node: Any, part: str) -> Any:
    """Descend one level into ``node``; ``_MISSING`` when ``part`` is not there."""
    if isinstance(node, Mapping):
        return node[part] if part in node else _MISSING
    if isinstance(node, Sequence) and not isinstance(node, str) and part.isdecimal():
        index = int(part)
        return node[index] if index < len(node) else _MISSING
    return _MISSING


class KeyResolver:
    """Walk a nested translation table with dotted keys.

    The table maps a locale to a tree of mappings whose leaves are sentences.
    It is only read, never modified. A resolver built without a table answers
    every lookup from an empty tree and logs one warning per lookup.
    """

    def __init__(self, translations: Optional[Mapping] = None):
        self._translations = translations

    @property
    def has_translations(self) -> bool:
        return self._translations is not None

    def locales(self) -> list:
        """Top-level locale identifiers of the table, in table order."""
        if self._translations is None:
            return []
        return list(self._translations.keys())

    def translations(self, locale: str) -> Mapping:
        """Translation tree of ``locale``; empty when no table was supplied."""
        if self._translations is None:
            return {}

        tree = self._translations.get(locale, _MISSING)
        if tree is _MISSING:
            raise LocaleNotFound(locale)
        return tree

    def resolve(
        self,
        key: str,
        locale: str,
        fallback_locale: Optional[str] = None,
        silent: bool = False,
    ) -> str:
        """Return the sentence for ``key`` in ``locale``.

        The key is first looked up as a whole, then split on dots and walked
        segment by segment. If both fail and a different fallback locale is
        set, the whole lookup is repeated there. A key still missing is
        returned as-is in silent mode, otherwise TranslationKeyNotFound is
        raised.
        """
        if self._translations is None:
            tolk_log(
                "RESOLVE",
                f"{ErrorKind.MISSING_TRANSLATION_SOURCE.name}: no translation table was "
                f'supplied, looking up "{key}" in an empty table. Pass the table '
                "to the engine or to tolk.api.configure().",
                level="WARN",
            )
        return self._find(key, locale, fallback_locale, silent)

    def _find(
        self,
        key: str,
        locale: str,
        fallback_locale: Optional[str],
        silent: bool,
        split_key: bool = False,
    ) -> str:
        node: Any = self.translations(locale)
        parts = key.split(".") if split_key else [key]

        for part in parts:
            node = _step(node, part)
            if node is not _MISSING:
                continue

            if not split_key:
                return self._find(key, locale, fallback_locale, silent, split_key=True)

            if fallback_locale and locale != fallback_locale:
                tolk_log(
                    "RESOLVE",
                    f'Key "{key}" missing in [{locale}], trying [{fallback_locale}]',
                    level="DEBUG",
                )
                return self._find(key, fallback_locale, fallback_locale, silent)

            if silent:
                return key

            raise TranslationKeyNotFound(key, part, locale)

        return str(node)
