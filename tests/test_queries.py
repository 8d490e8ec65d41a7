"""Tests for query construction, resolution and failure messages."""

import re

import pytest
from pydantic import ValidationError

from nodematch.config import LocatorKind, configure, using_wait_time
from nodematch.queries import MatchQuery, SelectorQuery, TextQuery
from nodematch.queries.options import FieldOptions, LinkOptions, SelectOptions


# --- SelectorQuery construction ---


def test_bare_locator_uses_default_selector():
    query = SelectorQuery("p.foo")
    assert query.kind is LocatorKind.CSS
    assert query.locator == "p.foo"


def test_default_selector_is_configurable():
    configure(default_selector="xpath")
    assert SelectorQuery("//p").kind is LocatorKind.XPATH


def test_explicit_kind():
    query = SelectorQuery("xpath", './/p[@id="foo"]')
    assert query.kind is LocatorKind.XPATH
    assert SelectorQuery(LocatorKind.LINK, "Home").kind is LocatorKind.LINK


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        SelectorQuery("sizzle", "p")


def test_wrong_argument_count_rejected():
    with pytest.raises(TypeError):
        SelectorQuery()
    with pytest.raises(TypeError):
        SelectorQuery("css", "p", "extra")


def test_non_string_locator_rejected():
    with pytest.raises(TypeError, match="locator must be a string"):
        SelectorQuery("css", 42)


def test_options_are_validated_per_kind():
    assert isinstance(SelectorQuery("field", "Name", with_="Jonas").options, FieldOptions)
    assert isinstance(SelectorQuery("link", "Home", href="/").options, LinkOptions)
    assert isinstance(
        SelectorQuery("select", "Language", selected=["English"]).options, SelectOptions
    )
    with pytest.raises(ValidationError):
        SelectorQuery("css", "p", href="/")
    with pytest.raises(ValidationError):
        SelectorQuery("css", "p", cuont=3)


def test_field_with_option_accepts_its_alias():
    query = SelectorQuery("field", "Name", **{"with": "Jonas"})
    assert query.options.with_ == "Jonas"


def test_checked_and_unchecked_are_exclusive():
    with pytest.raises(ValidationError, match="both checked and unchecked"):
        SelectorQuery("field", "Agree", checked=True, unchecked=True)


def test_text_filter_must_be_string_or_regex():
    SelectorQuery("css", "li", text=re.compile("Horse"))
    with pytest.raises(ValidationError):
        SelectorQuery("css", "li", text=5)


# --- wait budget ---


def test_wait_defaults_to_settings():
    assert SelectorQuery("p").wait == 2.0
    configure(default_max_wait_time=0.5)
    assert SelectorQuery("p").wait == 0.5


def test_explicit_wait_wins():
    with using_wait_time(10):
        assert SelectorQuery("p").wait == 10
        assert SelectorQuery("p", wait=0).wait == 0


def test_using_wait_time_is_scoped():
    with using_wait_time(7):
        assert TextQuery("hello").wait == 7
    assert TextQuery("hello").wait == 2.0


def test_negative_wait_rejected():
    with pytest.raises(ValidationError):
        SelectorQuery("p", wait=-1)
    with pytest.raises(ValueError):
        with using_wait_time(-1):
            pass


# --- visibility defaults ---


def test_selector_query_filters_hidden_by_default():
    assert SelectorQuery("p").options.visible is True
    configure(ignore_hidden_elements=False)
    assert SelectorQuery("p").options.visible is False


def test_match_query_does_not_filter_visibility_by_default():
    assert MatchQuery("p").options.visible is False
    assert MatchQuery("p", visible=True).options.visible is True


# --- resolution and messages ---


def test_selector_query_resolves_against_scope(page):
    page.set_matches("css", "li", ["a", "b", "c"])
    query = SelectorQuery("li", text="x")
    result = query.resolve_for(page)
    assert result.size == 3
    assert list(result) == ["a", "b", "c"]
    kind, locator, options = page.calls[-1]
    assert kind is LocatorKind.CSS
    assert locator == "li"
    assert options.text == "x"


def test_selector_failure_messages(page):
    page.set_matches("css", "p", ["a", "b", "c"])
    result = SelectorQuery("p", count=4).resolve_for(page)
    assert result.failure_message() == 'expected to find css "p" 4 times, found 3 matches'
    assert (
        result.negative_failure_message()
        == 'expected not to find css "p" 4 times, found 3 matches'
    )


def test_selector_failure_message_without_count(page):
    result = SelectorQuery("p", text=re.compile("Ho.se")).resolve_for(page)
    assert result.failure_message() == (
        'expected to find css "p" with text "/Ho.se/" but there were no matches'
    )


def test_match_result_messages(page):
    result = MatchQuery("p").resolve_for(page)
    assert result.failure_message() == "Item does not match the provided selector"
    assert result.negative_failure_message() == "Item matched the provided selector"


# --- TextQuery ---


def test_text_query_counts_normalized_occurrences(page):
    page.text_at = lambda t: "Horse  and\nhorse and  Horse\tand"
    assert TextQuery("Horse and").resolve_for(page).size == 2
    assert TextQuery("horse").resolve_for(page).size == 1


def test_text_query_counts_regex_matches(page):
    page.text_at = lambda t: "a1 b22 c333"
    assert TextQuery(re.compile(r"\d+")).resolve_for(page).size == 3


def test_text_query_type_selects_text(page):
    page.text_at = lambda t: "shown"
    page.hidden_text_at = lambda t: "shown hidden"
    assert TextQuery("hidden").resolve_for(page).size == 0
    assert TextQuery("all", "hidden").resolve_for(page).size == 1
    assert page.text_calls == [True, False]


def test_text_query_default_type_follows_settings():
    assert TextQuery("x").type == "visible"
    configure(ignore_hidden_elements=False)
    assert TextQuery("x").type == "all"


def test_text_query_rejects_bad_arguments():
    with pytest.raises(ValueError, match="text type"):
        TextQuery("hidden", "x")
    with pytest.raises(ValueError, match="blank"):
        TextQuery("   ")
    with pytest.raises(TypeError):
        TextQuery(42)
    with pytest.raises(ValidationError):
        TextQuery("x", visible=True)


def test_text_failure_messages(page):
    page.text_at = lambda t: "one  fish two fish"
    result = TextQuery("fish", count=3).resolve_for(page)
    assert result.failure_message() == (
        'expected to find text "fish" 3 times in "one fish two fish", found 2 matches'
    )
    assert result.negative_failure_message().startswith('expected not to find text "fish"')
