"""
Plural rule table.

Maps a locale and a number to the index of the plural form to use, following
the rule groups of the Laravel/Symfony message selector. Any callable with the
same signature can be handed to the engine instead.
"""

from typing import Callable, Union

Number = Union[int, float]
PluralRule = Callable[[str, Number], int]

_NO_PLURAL = {
    "az", "bo", "dz", "id", "ja", "jv", "ka", "km", "kn", "ko", "ms", "th",
    "tr", "vi", "zh",
}

_ONE_OTHER = {
    "af", "bn", "bg", "ca", "da", "de", "el", "en", "eo", "es", "et", "eu",
    "fa", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he", "hu", "is", "it",
    "ku", "lb", "ml", "mn", "mr", "nah", "nb", "ne", "nl", "nn", "no", "om",
    "or", "pa", "pap", "ps", "pt", "so", "sq", "sv", "sw", "ta", "te", "tk",
    "ur", "zu",
}

# 0 and 1 share the singular form
_ZERO_ONE_OTHER = {
    "am", "bh", "fil", "fr", "gun", "hi", "hy", "ln", "mg", "nso", "xbr",
    "ti", "wa",
}

_EAST_SLAVIC = {"be", "bs", "hr", "ru", "sr", "uk"}


def normalize_locale(locale: str) -> str:
    """Reduce a locale identifier to the language code the rules are keyed on."""
    if locale in ("pt_BR", "pt-BR"):
        return "xbr"
    for separator in ("_", "-"):
        if separator in locale:
            return locale.split(separator, 1)[0]
    return locale


def get_plural_index(locale: str, number: Number) -> int:
    """Return the plural form index for ``number`` in ``locale``."""
    lang = normalize_locale(locale or "")
    n = abs(number)

    if lang in _NO_PLURAL:
        return 0
    if lang in _ONE_OTHER:
        return 0 if n == 1 else 1
    if lang in _ZERO_ONE_OTHER:
        return 0 if n in (0, 1) else 1
    if lang in _EAST_SLAVIC:
        if n % 10 == 1 and n % 100 != 11:
            return 0
        if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
            return 1
        return 2
    if lang in ("cs", "sk"):
        if n == 1:
            return 0
        return 1 if 2 <= n <= 4 else 2
    if lang == "ga":
        if n == 1:
            return 0
        return 1 if n == 2 else 2
    if lang == "lt":
        if n % 10 == 1 and n % 100 != 11:
            return 0
        if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20):
            return 1
        return 2
    if lang == "sl":
        if n % 100 == 1:
            return 0
        if n % 100 == 2:
            return 1
        return 2 if n % 100 in (3, 4) else 3
    if lang == "mk":
        return 0 if n % 10 == 1 else 1
    if lang == "mt":
        if n == 1:
            return 0
        if n == 0 or 1 < n % 100 < 11:
            return 1
        return 2 if 10 < n % 100 < 20 else 3
    if lang == "lv":
        if n == 0:
            return 0
        return 1 if n % 10 == 1 and n % 100 != 11 else 2
    if lang == "pl":
        if n == 1:
            return 0
        if 2 <= n % 10 <= 4 and (n % 100 < 12 or n % 100 > 14):
            return 1
        return 2
    if lang == "cy":
        if n == 1:
            return 0
        if n == 2:
            return 1
        return 2 if n in (8, 11) else 3
    if lang == "ro":
        if n == 1:
            return 0
        return 1 if n == 0 or 0 < n % 100 < 20 else 2
    if lang == "ar":
        if n == 0:
            return 0
        if n == 1:
            return 1
        if n == 2:
            return 2
        if 3 <= n % 100 <= 10:
            return 3
        return 4 if 11 <= n % 100 <= 99 else 5
    return 0
