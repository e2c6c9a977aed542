import pytest

from yahtml.element_key import Attribute, ParsedElement, parse_attributes, parse_element_key


def test_parses_tag_id_classes_and_attributes() -> None:
    parsed = parse_element_key('div#main.container.active class="extra" data-id=123')

    assert parsed.tag == "div"
    assert parsed.id == "main"
    assert parsed.classes == ["container", "active"]
    assert parsed.attributes == [
        Attribute("class", "extra"),
        Attribute("data-id", "123"),
    ]


def test_trailing_colon_is_stripped() -> None:
    parsed = parse_element_key("input type=text required:")

    assert parsed.tag == "input"
    assert parsed.attributes == [Attribute("type", "text"), Attribute("required", True)]


@pytest.mark.parametrize("key", ["", "   ", "  div", "#only-id", ".only-class", "href=x", "src=a.png alt=b"])
def test_keys_without_tag(key: str) -> None:
    assert parse_element_key(key).tag == ""


def test_tag_with_digits_and_hyphens() -> None:
    assert parse_element_key("my-element2.card").tag == "my-element2"
    assert parse_element_key("h1").tag == "h1"


def test_equals_after_shorthand_keeps_tag() -> None:
    parsed = parse_element_key("a#b=c")

    assert parsed.tag == "a"
    assert parsed.id == "b"


def test_duplicate_classes_are_kept() -> None:
    assert parse_element_key("p.a.b.a").classes == ["a", "b", "a"]


def test_first_shorthand_id_wins() -> None:
    assert parse_element_key("div#one#two").id == "one"


def test_attribute_id_overrides_shorthand() -> None:
    parsed = parse_element_key("div#a id=b")

    assert parsed.id == "a"
    assert parsed.resolved_id == "b"


def test_bare_id_attribute_resolves_to_true() -> None:
    assert parse_element_key("div#a id").resolved_id == "true"


def test_class_list_merges_shorthand_then_attribute() -> None:
    parsed = parse_element_key('div.x class="x y"')

    assert parsed.class_list == ["x", "x", "y"]
    assert parsed.extra_attributes == []


def test_extra_attributes_exclude_id_and_class() -> None:
    parsed = parse_element_key('a id=top class=nav href="/" hidden')

    assert parsed.extra_attributes == [Attribute("href", "/"), Attribute("hidden", True)]


def test_default_parsed_element_is_empty() -> None:
    assert parse_element_key("") == ParsedElement()


class TestAttributeScanner:
    def test_double_and_single_quoted_values(self) -> None:
        assert parse_attributes("title=\"Hello world\" alt='It is'") == [
            Attribute("title", "Hello world"),
            Attribute("alt", "It is"),
        ]

    def test_quotes_of_the_other_kind_stay_in_value(self) -> None:
        assert parse_attributes("title='say \"hi\"'") == [Attribute("title", 'say "hi"')]

    def test_unterminated_quote_runs_to_end(self) -> None:
        assert parse_attributes('title="oops and more') == [Attribute("title", "oops and more")]

    def test_unquoted_value_stops_before_final_colon(self) -> None:
        assert parse_attributes("href=x:") == [Attribute("href", "x")]
        assert parse_attributes("href=a:b") == [Attribute("href", "a:b")]

    def test_unquoted_value_reads_until_whitespace(self) -> None:
        assert parse_attributes("href=https://example.com/a?b=c target=_blank") == [
            Attribute("href", "https://example.com/a?b=c"),
            Attribute("target", "_blank"),
        ]

    def test_empty_values(self) -> None:
        assert parse_attributes('alt="" title=') == [Attribute("alt", ""), Attribute("title", "")]

    def test_boolean_attributes(self) -> None:
        assert parse_attributes("disabled  checked") == [
            Attribute("disabled", True),
            Attribute("checked", True),
        ]

    def test_invalid_name_stops_scanning(self) -> None:
        assert parse_attributes("data-a=1 123=x data-b=2") == [Attribute("data-a", "1")]

    def test_empty_input(self) -> None:
        assert parse_attributes("") == []
