"""Tests for i18n_provider.translation.resolver module."""

# pylint: disable=protected-access

import json
from collections import OrderedDict

import pytest

from i18n_provider.translation import (
    EmptyLanguageSetError,
    InvalidPayloadError,
    PayloadFormat,
    Resolver,
    TextDirection,
    UnsupportedLanguageError,
)


class TestResolverConstruction:
    """Tests for building a Resolver."""

    def test_from_raw_selects_first_language(self, greeting_translations):
        """The first language of the input becomes current and fallback."""
        resolver = Resolver.from_raw(greeting_translations)
        assert resolver.current_language == "en"
        assert resolver.fallback_language == "en"

    def test_fallback_follows_insertion_order(self):
        """Fallback is the first inserted language, not the sorted first."""
        raw = OrderedDict([("fr", '{"a": "fr"}'), ("en", '{"a": "en"}')])
        resolver = Resolver.from_raw(raw)
        assert resolver.fallback_language == "fr"
        assert resolver.available_languages == ["fr", "en"]

    def test_empty_input_raises(self):
        """An empty language set cannot produce a resolver."""
        with pytest.raises(EmptyLanguageSetError):
            Resolver.from_raw({})
        with pytest.raises(EmptyLanguageSetError):
            Resolver({})

    def test_invalid_payload_names_language(self):
        """A malformed payload is reported with its language."""
        raw = {"en": "{}", "fr": '{"greeting": '}
        with pytest.raises(InvalidPayloadError) as exc_info:
            Resolver.from_raw(raw)
        assert exc_info.value.language == "fr"
        assert exc_info.value.detail
        assert "fr" in str(exc_info.value)

    def test_one_bad_payload_rejects_the_batch(self):
        """No resolver is produced even when the other payloads are valid."""
        raw = {
            "en": json.dumps({"greeting": "Hello"}),
            "fr": "not json at all",
            "de": json.dumps({"greeting": "Hallo"}),
        }
        resolver = None
        with pytest.raises(InvalidPayloadError):
            resolver = Resolver.from_raw(raw)
        assert resolver is None

    def test_non_object_payload_is_invalid(self):
        """A payload must hold an object at the top level."""
        with pytest.raises(InvalidPayloadError) as exc_info:
            Resolver.from_raw({"en": "[1, 2, 3]"})
        assert "list" in exc_info.value.detail

    def test_yaml_payloads(self):
        """YAML payloads are parsed when requested."""
        raw = {"en": "greeting: Hello\nform:\n  name: Name\n"}
        resolver = Resolver.from_raw(raw, PayloadFormat.YAML)
        assert resolver.translate("form.name") == "Name"


class TestSetLanguage:
    """Tests for Resolver.set_language()."""

    def test_switch_to_supported_language(self, greeting_translations):
        """Scenario: switching to a loaded language changes lookups."""
        resolver = Resolver.from_raw(greeting_translations)
        assert resolver.translate("greeting") == "Hello"

        resolver.set_language("fr")

        assert resolver.current_language == "fr"
        assert resolver.translate("greeting") == "Bonjour"

    def test_unsupported_language_keeps_state(self, greeting_translations):
        """Scenario: an unknown language is rejected and nothing changes."""
        resolver = Resolver.from_raw(greeting_translations)
        resolver.set_language("fr")

        with pytest.raises(UnsupportedLanguageError) as exc_info:
            resolver.set_language("de")

        assert exc_info.value.language == "de"
        assert resolver.current_language == "fr"

    @pytest.mark.parametrize("code", ["en", "fr", "ar"])
    def test_every_loaded_language_is_accepted(self, resolver, code):
        """set_language() succeeds for each loaded language."""
        resolver.set_language(code)
        assert resolver.current_language == code

    @pytest.mark.parametrize("code", ["EN", "en-US", "", "de", " fr"])
    def test_codes_are_case_sensitive_and_exact(self, resolver, code):
        """Only exact language codes are accepted."""
        with pytest.raises(UnsupportedLanguageError):
            resolver.set_language(code)
        assert resolver.current_language == "en"


class TestTranslate:
    """Tests for Resolver.translate()."""

    def test_nested_key(self, resolver):
        """Dot-separated keys walk nested objects."""
        assert resolver.translate("form.name") == "Name"
        assert resolver.translate("menu.file.open") == "Open"

    def test_falls_back_to_first_language(self, resolver):
        """Keys missing in the current language come from the fallback."""
        resolver.set_language("fr")
        assert resolver.translate("form.submit") == "Send"
        assert resolver.translate("only_in_english") == "English only"
        assert resolver.translate("menu.file.close") == "Close"

    def test_fallback_for_empty_tree(self):
        """Scenario: an empty tree falls back entirely."""
        resolver = Resolver({"en": {"a": {"b": "X"}}, "fr": {}})
        resolver.set_language("fr")
        assert resolver.translate("a.b") == "X"

    def test_current_language_wins_over_fallback(self, resolver):
        """Keys present in the current language are not taken from fallback."""
        resolver.set_language("fr")
        assert resolver.translate("form.name") == "Nom"

    def test_missing_everywhere_returns_placeholder(self, resolver):
        """Scenario: unknown keys yield a placeholder naming key and language."""
        resolver.set_language("fr")
        message = resolver.translate("missing.key")
        assert "missing.key" in message
        assert "fr" in message
        assert message == "Key 'missing.key' not found for language 'fr'"

    @pytest.mark.parametrize(
        "key",
        ["", ".", "..", "greeting.extra", "form.name.deeper", "menu..file", "a" * 500],
    )
    def test_never_raises(self, resolver, key):
        """translate() always returns a string."""
        assert isinstance(resolver.translate(key), str)

    def test_nested_object_is_rendered_as_json(self, resolver):
        """A key ending on an object returns its JSON text, keys sorted."""
        rendered = resolver.translate("menu.file")
        assert rendered == '{"close":"Close","open":"Open"}'
        assert json.loads(rendered) == {"open": "Open", "close": "Close"}

    def test_object_rendering_is_deterministic(self):
        """Insertion order of the payload does not change the rendering."""
        first = Resolver({"en": {"o": {"b": "2", "a": "1"}}})
        second = Resolver({"en": {"o": {"a": "1", "b": "2"}}})
        assert first.translate("o") == second.translate("o")

    def test_non_string_leaves_are_rendered(self):
        """Numbers, booleans, lists and null are rendered as JSON."""
        resolver = Resolver(
            {"en": {"n": 5, "b": True, "l": ["x", "y"], "z": None, "u": "é"}}
        )
        assert resolver.translate("n") == "5"
        assert resolver.translate("b") == "true"
        assert resolver.translate("l") == '["x","y"]'
        assert resolver.translate("z") == "null"
        assert resolver.translate("u") == "é"

    def test_lists_are_not_walked(self):
        """Segments cannot index into lists."""
        resolver = Resolver({"en": {"l": ["x", "y"]}})
        assert resolver.translate("l.0") == "Key 'l.0' not found for language 'en'"

    def test_empty_segment_key(self):
        """An empty key looks up the empty-string entry."""
        resolver = Resolver({"en": {"": "blank"}})
        assert resolver.translate("") == "blank"

    def test_t_alias(self, resolver):
        """t() is an alias of translate()."""
        assert resolver.t("greeting") == resolver.translate("greeting")

    def test_translate_is_pure(self, resolver):
        """Lookups do not change the resolver."""
        before = resolver.copy()
        resolver.translate("greeting")
        resolver.translate("missing")
        assert resolver == before


class TestResolverHelpers:
    """Tests for the supporting Resolver API."""

    def test_has_key_does_not_fall_back(self, resolver):
        """has_key() only checks the requested language."""
        resolver.set_language("fr")
        assert resolver.has_key("form.name")
        assert not resolver.has_key("form.submit")
        assert resolver.has_key("form.submit", language="en")
        assert not resolver.has_key("greeting", language="de")

    def test_has_key_empty_language_is_not_current(self, resolver):
        """An empty language code is checked as given, not as the default."""
        assert resolver.has_key("greeting")
        assert not resolver.has_key("greeting", language="")

    def test_direction(self, resolver):
        """direction reflects the current language."""
        assert resolver.direction is TextDirection.LTR
        resolver.set_language("ar")
        assert resolver.direction is TextDirection.RTL

    def test_supports(self, resolver):
        assert resolver.supports("fr")
        assert not resolver.supports("de")

    def test_copy_is_independent(self, resolver):
        """Switching a copy leaves the original untouched."""
        clone = resolver.copy()
        clone.set_language("fr")

        assert resolver.current_language == "en"
        assert clone.current_language == "fr"
        assert clone is not resolver
        assert clone._trees is resolver._trees

    def test_equality(self, resolver):
        """Resolvers compare by current language and trees."""
        clone = resolver.copy()
        assert clone == resolver
        clone.set_language("fr")
        assert clone != resolver

    def test_repr(self, resolver):
        assert "current_language='en'" in repr(resolver)
