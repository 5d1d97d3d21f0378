"""Tests for the translation engine."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tolk.config_loader import LocaleConfig
from tolk.errors import InvalidArgument, LocaleNotFound, TranslationKeyNotFound
from tolk.engine import TranslationEngine, TranslationOptions, format_value

TRANSLATIONS = {
    "en": {
        "greet": "Hello :name",
        "echo": ":name, :name and :name",
        "items": "{0}no items|{1}one item|[2,*]:count items",
        "apples": "apple|apples",
        "menu": {"file": {"open": "Open :file"}},
    },
    "fr": {
        "greet": "Bonjour :name",
        "apples": "pomme|pommes",
        "only_fr": "seulement",
    },
}


@pytest.fixture
def engine():
    return TranslationEngine(TRANSLATIONS, locale="en", fallback_locale="fr")


class TestTranslate:
    def test_placeholder(self, engine):
        assert engine.translate("greet", {"args": {"name": "Amy"}}) == "Hello Amy"

    def test_every_occurrence_is_replaced(self, engine):
        assert engine.translate("echo", TranslationOptions(args={"name": "Bo"})) == "Bo, Bo and Bo"

    def test_nested_key_with_placeholder(self, engine):
        assert engine.translate("menu.file.open", {"args": {"file": "a.txt"}}) == "Open a.txt"

    def test_no_options(self, engine):
        assert engine.translate("greet") == "Hello :name"

    def test_locale_override(self, engine):
        assert engine.translate("greet", {"args": {"name": "Amy"}, "locale": "fr"}) == "Bonjour Amy"

    def test_fallback_locale(self, engine):
        assert engine.translate("only_fr") == "seulement"

    def test_missing_key_raises(self, engine):
        with pytest.raises(TranslationKeyNotFound):
            engine.translate("nope")

    def test_unknown_locale_raises(self, engine):
        with pytest.raises(LocaleNotFound):
            engine.translate_or_key("greet", {"locale": "de"})

    def test_substituted_value_is_not_rescanned_by_same_key(self, engine):
        assert engine.translate("greet", {"args": {"name": ":name"}}) == "Hello :name"

    def test_substitution_follows_argument_order(self):
        engine = TranslationEngine({"en": {"s": ":a"}}, locale="en")
        assert engine.translate("s", {"args": {"a": ":b", "b": "x"}}) == "x"
        assert engine.translate("s", {"args": {"b": "x", "a": ":b"}}) == ":b"

    def test_invalid_options_type(self, engine):
        with pytest.raises(InvalidArgument):
            engine.translate("greet", ["not", "options"])


class TestTranslateOrKey:
    def test_returns_key_on_miss(self, engine):
        assert engine.translate_or_key("missing.key") == "missing.key"

    def test_translates_when_found(self, engine):
        assert engine.translate_or_key("greet", {"args": {"name": "Amy"}}) == "Hello Amy"


class TestPluralization:
    def test_choice_with_conditions(self, engine):
        assert engine.translate_choice("items", 0, {}, "en") == "no items"
        assert engine.translate_choice("items", 1) == "one item"
        assert engine.translate_choice("items", 5) == "5 items"

    def test_choice_does_not_mutate_args(self, engine):
        args = {"name": "x"}
        engine.translate_choice("items", 3, args)
        assert args == {"name": "x"}

    def test_plural_rule_follows_active_locale(self, engine):
        assert engine.translate_choice("apples", 0) == "apples"
        assert engine.translate_choice("apples", 0, locale="fr") == "pommes"
        engine.set_active_locale("fr")
        assert engine.translate_choice("apples", 0) == "pomme"

    def test_plural_rule_ignores_locale_override(self):
        calls = []

        def rule(locale, count):
            calls.append(locale)
            return 0

        engine = TranslationEngine({"en": {"k": "a|b"}, "fr": {"k": "c|d"}}, locale="en", plural_rule=rule)
        assert engine.translate_choice("k", 3, locale="fr") == "c"
        assert calls == ["en"]

    def test_float_count_renders_without_fraction(self, engine):
        assert engine.translate_choice("items", 3.0) == "3 items"

    def test_missing_count_raises(self, engine):
        with pytest.raises(InvalidArgument) as exc_info:
            engine.translate("items", {"pluralize": True, "args": {}})
        assert exc_info.value.argument == "count"

    def test_non_numeric_count_raises(self, engine):
        for count in ("3", None, True):
            with pytest.raises(InvalidArgument):
                engine.translate("items", {"pluralize": True, "args": {"count": count}})

    def test_invalid_count_is_not_silenced(self, engine):
        with pytest.raises(InvalidArgument):
            engine.translate_or_key("items", {"pluralize": True})

    def test_custom_plural_rule(self):
        engine = TranslationEngine({"en": {"k": "a|b|c"}}, locale="en", plural_rule=lambda locale, count: 2)
        assert engine.translate_choice("k", 1) == "c"


class TestLocaleState:
    def test_locales_from_table(self, engine):
        assert engine.list_locales() == ["en", "fr"]

    def test_set_locale_keeps_fallback(self, engine):
        engine.set_active_locale("fr")
        assert engine.get_active_locale() == "fr"
        assert engine.fallback_locale == "fr"
        assert engine.translate("greet", {"args": {"name": "Amy"}}) == "Bonjour Amy"

    def test_set_unknown_locale_warns(self, engine, capsys):
        engine.set_active_locale("de")
        assert engine.get_active_locale() == "de"
        assert "Locale [de]" in capsys.readouterr().out

    def test_from_config(self):
        config = LocaleConfig(locale="fr", fallback_locale="en", locales=("fr",))
        engine = TranslationEngine.from_config(TRANSLATIONS, config)
        assert engine.get_active_locale() == "fr"
        assert engine.fallback_locale == "en"
        assert engine.list_locales() == ["fr"]

    def test_from_config_without_locales_uses_table(self):
        engine = TranslationEngine.from_config(TRANSLATIONS, LocaleConfig())
        assert engine.list_locales() == ["en", "fr"]


def test_format_value():
    assert format_value(2.0) == "2"
    assert format_value(2.5) == "2.5"
    assert format_value("x") == "x"
    assert format_value(3) == "3"
    assert format_value(True) == "true"
    assert format_value(False) == "false"
