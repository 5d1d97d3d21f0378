"""Choose the pluralized variant of a sentence."""

from tolk.conditions import Number, extract, strip_conditions
from tolk.plural_rules import PluralRule, get_plural_index


class Pluralizer:
    """Pick one ``|``-separated variant of a sentence for a given count.

    Inline conditions win over the plural rule: the first segment whose
    condition holds for the count is returned, whatever index the locale's
    plural rule would have chosen. Only when no condition holds is the rule
    consulted, over the segments with their conditions removed.
    """

    def __init__(self, plural_rule: PluralRule = get_plural_index):
        self.plural_rule = plural_rule

    def pluralize(self, sentence: str, count: Number, locale: str) -> str:
        parts = sentence.split("|")

        extracted = extract(parts, count)
        if extracted is not None:
            return extracted.strip()

        parts = strip_conditions(parts)
        index = self.plural_rule(locale, count)

        if len(parts) == 1 or not 0 <= index < len(parts) or not parts[index]:
            return parts[0]

        return parts[index]
