import pytest

from style_engine.css.properties import PropertyID
from style_engine.css.resolver import (
    MatchingRule, StyleResolver, is_inherited_property, sort_matching_rules,
)
from style_engine.css.user_agent import UserAgentStyleSheets
from style_engine.css.values import ColorStyleValue, LengthStyleValue


def resolve(document, element, user_agent):
    return StyleResolver(document, user_agent).resolve_style(element)


@pytest.fixture
def body(document, append):
    return append(document.document_element, "body")


def test_inherited_property_allow_list():
    assert is_inherited_property(PropertyID.COLOR)
    assert is_inherited_property(PropertyID.FONT_SIZE)
    assert is_inherited_property(PropertyID.LIST_STYLE)
    assert is_inherited_property(PropertyID.TEXT_DECORATION_LINE)
    assert not is_inherited_property(PropertyID.MARGIN_TOP)
    assert not is_inherited_property(PropertyID.BACKGROUND_COLOR)
    assert not is_inherited_property(PropertyID.DISPLAY)


def test_matching_rule_coordinates(document, body, append, parse_css, empty_user_agent):
    p = append(body, "p", class_="note")
    document.add_style_sheet(parse_css("div { color: red } .x, p.note, p { color: blue }"))

    matches = StyleResolver(document, empty_user_agent).collect_matching_rules(p)

    assert len(matches) == 1
    match = matches[0]
    assert (match.style_sheet_index, match.rule_index, match.selector_index) == (1, 1, 1)
    assert match.selector.text == "p.note"
    assert match.specificity() == (0, 1, 1)


def test_first_matching_selector_of_a_rule_wins(document, body, append, parse_css, empty_user_agent):
    p = append(body, "p", id="intro")
    document.add_style_sheet(parse_css("p, #intro { color: red }"))

    matches = StyleResolver(document, empty_user_agent).collect_matching_rules(p)

    assert [match.selector_index for match in matches] == [0]


def test_quirks_sheet_only_in_quirks_mode(document, body, append, parse_css):
    user_agent = UserAgentStyleSheets(default_source="p { width: 1px }",
                                      quirks_source="p { width: 2px }")
    p = append(body, "p")
    document.add_style_sheet(parse_css("p { height: 3px }"))
    resolver = StyleResolver(document, user_agent)

    standards = resolver.collect_matching_rules(p)
    assert [match.style_sheet_index for match in standards] == [0, 1]
    assert resolve(document, p, user_agent).property(PropertyID.WIDTH) == LengthStyleValue.px(1)

    document.set_quirks_mode(True)
    quirks = resolver.collect_matching_rules(p)
    assert [match.style_sheet_index for match in quirks] == [0, 1, 2]
    assert resolve(document, p, user_agent).property(PropertyID.WIDTH) == LengthStyleValue.px(2)


def test_specificity_beats_source_order(document, body, append, parse_css, empty_user_agent):
    p = append(body, "p", id="intro", class_="note")
    document.add_style_sheet(parse_css("#intro { color: red } .note { color: green } p { color: blue }"))

    style = resolve(document, p, empty_user_agent)

    assert style.property(PropertyID.COLOR) == ColorStyleValue(255, 0, 0)


def test_later_rule_wins_on_equal_specificity(document, body, append, parse_css, empty_user_agent):
    p = append(body, "p")
    document.add_style_sheet(parse_css("p { color: red } p { color: blue }"))

    style = resolve(document, p, empty_user_agent)

    assert style.property(PropertyID.COLOR) == ColorStyleValue(0, 0, 255)


def test_later_sheet_wins_on_equal_specificity(document, body, append, parse_css, empty_user_agent):
    p = append(body, "p")
    document.add_style_sheet(parse_css("p { color: red }"))
    document.add_style_sheet(parse_css("p { color: blue }"))

    style = resolve(document, p, empty_user_agent)

    assert style.property(PropertyID.COLOR) == ColorStyleValue(0, 0, 255)


def test_sort_is_by_specificity_then_sheet_then_rule(document, parse_css):
    sheet = parse_css("#a { color: red } p { color: red } .b { color: red }")
    rules = sheet.rules
    matches = [
        MatchingRule(rules[0], 1, 0, 0),
        MatchingRule(rules[1], 2, 1, 0),
        MatchingRule(rules[1], 1, 5, 0),
        MatchingRule(rules[2], 0, 2, 0),
    ]

    sort_matching_rules(matches)

    assert [(m.style_sheet_index, m.rule_index) for m in matches] == [(1, 5), (2, 1), (0, 2), (1, 0)]


def test_only_inherited_properties_come_from_the_parent(document, body, append, parse_css,
                                                       empty_user_agent):
    div = append(body, "div")
    span = append(div, "span")
    document.add_style_sheet(parse_css("div { color: red; margin: 4px; text-decoration: underline }"))

    div.set_specified_css_values(resolve(document, div, empty_user_agent))
    style = resolve(document, span, empty_user_agent)

    assert style.property(PropertyID.COLOR) == ColorStyleValue(255, 0, 0)
    assert style.property(PropertyID.TEXT_DECORATION_LINE).to_string() == "underline"
    assert PropertyID.MARGIN_TOP not in style


def test_nothing_inherited_before_parent_is_resolved(document, body, append, parse_css,
                                                     empty_user_agent):
    div = append(body, "div")
    span = append(div, "span")
    document.add_style_sheet(parse_css("div { color: red }"))

    assert PropertyID.COLOR not in resolve(document, span, empty_user_agent)


def test_presentational_hints_lose_to_rules(document, body, append, parse_css, empty_user_agent):
    table = append(body, "table", bgcolor="red", width="100")
    document.add_style_sheet(parse_css("table { background-color: blue }"))

    style = resolve(document, table, empty_user_agent)

    assert style.property(PropertyID.BACKGROUND_COLOR) == ColorStyleValue(0, 0, 255)
    assert style.property(PropertyID.WIDTH) == LengthStyleValue.px(100)


def test_inline_style_is_applied_last(document, body, append, parse_css, empty_user_agent):
    p = append(body, "p", id="intro", style="color: green; margin: 1px 2px")
    document.add_style_sheet(parse_css("#intro { color: red }"))

    style = resolve(document, p, empty_user_agent)

    assert style.property(PropertyID.COLOR) == ColorStyleValue(0, 128, 0)
    assert style.property(PropertyID.MARGIN_LEFT) == LengthStyleValue.px(2)
    assert PropertyID.MARGIN not in style


def test_user_agent_defaults_apply(document, body):
    style = StyleResolver(document).resolve_style(body)

    assert style.property(PropertyID.MARGIN_TOP) == LengthStyleValue.px(8)
    assert style.property(PropertyID.DISPLAY).to_string() == "block"


def test_media_type_of_document_filters_rules(document, body, append, parse_css, empty_user_agent):
    p = append(body, "p")
    document.add_style_sheet(parse_css("@media print { p { color: black } } p { width: 1px }"))

    assert PropertyID.COLOR not in resolve(document, p, empty_user_agent)

    document.media_type = "print"
    assert PropertyID.COLOR in resolve(document, p, empty_user_agent)


def test_lone_element_gets_only_its_hints(document, empty_user_agent):
    td = document.create_element("td")
    td.set_attribute("bgcolor", "red")
    td.set_attribute("width", "20")

    style = resolve(document, td, empty_user_agent)

    assert style.to_dict() == {"background-color": "#ff0000", "width": "20px"}
    assert len(resolve(document, document.create_element("span"), empty_user_agent)) == 0
