import importlib

import pytest

from style_engine.css import expander, properties
from style_engine.css.expander import expand
from style_engine.css.parser import CSSParser
from style_engine.css.properties import PropertyID, StyleProperties
from style_engine.css.value_parser import parse_css_value
from style_engine.css.values import (
    ColorStyleValue, IdentifierStyleValue, ImageStyleValue, LengthStyleValue, StringStyleValue,
    ValueID,
)

BORDER_WIDTHS = (PropertyID.BORDER_TOP_WIDTH, PropertyID.BORDER_RIGHT_WIDTH,
                 PropertyID.BORDER_BOTTOM_WIDTH, PropertyID.BORDER_LEFT_WIDTH)
BORDER_COLORS = (PropertyID.BORDER_TOP_COLOR, PropertyID.BORDER_RIGHT_COLOR,
                 PropertyID.BORDER_BOTTOM_COLOR, PropertyID.BORDER_LEFT_COLOR)
BORDER_STYLES = (PropertyID.BORDER_TOP_STYLE, PropertyID.BORDER_RIGHT_STYLE,
                 PropertyID.BORDER_BOTTOM_STYLE, PropertyID.BORDER_LEFT_STYLE)
MARGINS = (PropertyID.MARGIN_TOP, PropertyID.MARGIN_RIGHT,
           PropertyID.MARGIN_BOTTOM, PropertyID.MARGIN_LEFT)


class FakeDocument:
    def complete_url(self, url):
        return f"http://example.com/{url}"


def declare(property_id, text, context=None):
    style = StyleProperties()
    applied = expand(style, property_id, parse_css_value(text), context)
    return style, applied


def px(value):
    return LengthStyleValue.px(value)


def ident(value_id):
    return IdentifierStyleValue(value_id)


def test_longhands_are_set_directly():
    style, applied = declare(PropertyID.COLOR, "red")

    assert applied
    assert style.to_dict() == {"color": "#ff0000"}


def test_invalid_property_is_ignored():
    style = StyleProperties()

    assert not expand(style, PropertyID.INVALID, px(1))
    assert len(style) == 0


def test_pseudo_properties_need_internal_writes():
    style = StyleProperties()
    value = ident(ValueID.NO_REPEAT)

    assert not expand(style, PropertyID.BACKGROUND_REPEAT_X, value)
    assert PropertyID.BACKGROUND_REPEAT_X not in style

    assert expand(style, PropertyID.BACKGROUND_REPEAT_X, value, is_internal=True)
    assert style.property(PropertyID.BACKGROUND_REPEAT_X) == value


def test_text_decoration():
    style, applied = declare(PropertyID.TEXT_DECORATION, "underline")

    assert applied
    assert style.to_dict() == {"text-decoration-line": "underline"}

    style, applied = declare(PropertyID.TEXT_DECORATION, "wavy")
    assert not applied
    assert len(style) == 0


def test_overflow_sets_both_axes():
    style, _ = declare(PropertyID.OVERFLOW, "hidden")

    assert style.to_dict() == {"overflow-x": "hidden", "overflow-y": "hidden"}


def test_border_width_single_value_sets_four_longhands():
    style, applied = declare(PropertyID.BORDER_WIDTH, "2px")

    assert applied
    assert set(style) == set(BORDER_WIDTHS)
    assert all(style.property(pid) == px(2) for pid in BORDER_WIDTHS)
    assert PropertyID.BORDER_WIDTH not in style


def test_border_color_and_style_lists():
    style, _ = declare(PropertyID.BORDER_COLOR, "red blue")
    assert [style.property(pid).to_string() for pid in BORDER_COLORS] == \
        ["#ff0000", "#0000ff", "#ff0000", "#0000ff"]

    style, _ = declare(PropertyID.BORDER_STYLE, "solid dashed dotted")
    assert [style.property(pid).to_string() for pid in BORDER_STYLES] == \
        ["solid", "dashed", "dotted", "dashed"]


def test_margin_four_values():
    style, applied = declare(PropertyID.MARGIN, "1px 2px 3px 4px")

    assert applied
    assert [style.property(pid) for pid in MARGINS] == [px(1), px(2), px(3), px(4)]


def test_margin_two_values():
    style, _ = declare(PropertyID.MARGIN, "1px 2px")

    assert [style.property(pid) for pid in MARGINS] == [px(1), px(2), px(1), px(2)]


def test_margin_three_values():
    style, _ = declare(PropertyID.MARGIN, "1px 2px 3px")

    assert [style.property(pid) for pid in MARGINS] == [px(1), px(2), px(3), px(2)]


def test_border_width_three_values():
    style, _ = declare(PropertyID.BORDER_WIDTH, "1px 2px 3px")

    assert [style.property(pid) for pid in BORDER_WIDTHS] == [px(1), px(2), px(3), px(2)]


def test_margin_single_value_and_auto():
    style, _ = declare(PropertyID.MARGIN, "5px")
    assert all(style.property(pid) == px(5) for pid in MARGINS)

    style, _ = declare(PropertyID.MARGIN, "auto")
    assert all(style.property(pid) == ident(ValueID.AUTO) for pid in MARGINS)


def test_padding_with_too_many_values_is_ignored():
    style, applied = declare(PropertyID.PADDING, "1px 2px 3px 4px 5px")

    assert not applied
    assert len(style) == 0


def test_border_with_width_style_and_color():
    style, applied = declare(PropertyID.BORDER, "1px solid red")

    assert applied
    assert len(style) == 12
    assert all(style.property(pid) == px(1) for pid in BORDER_WIDTHS)
    assert all(style.property(pid) == ColorStyleValue(255, 0, 0) for pid in BORDER_COLORS)
    assert all(style.property(pid) == ident(ValueID.SOLID) for pid in BORDER_STYLES)


def test_border_with_two_colors_sets_nothing():
    style, applied = declare(PropertyID.BORDER, "red blue")

    assert not applied
    assert len(style) == 0


def test_border_edge_with_lone_line_style_gets_defaults():
    style, applied = declare(PropertyID.BORDER_TOP, "dashed")

    assert applied
    assert style.to_dict() == {
        "border-top-style": "dashed",
        "border-top-color": "#000000",
        "border-top-width": "3px",
    }


def test_border_edge_with_single_typed_value():
    style, _ = declare(PropertyID.BORDER_LEFT, "4px")
    assert style.to_dict() == {"border-left-width": "4px"}

    style, _ = declare(PropertyID.BORDER_RIGHT, "green")
    assert style.to_dict() == {"border-right-color": "#008000"}


def test_border_edge_keyword_width():
    style, _ = declare(PropertyID.BORDER_BOTTOM, "thin dotted")

    assert style.to_dict() == {"border-bottom-width": "1px", "border-bottom-style": "dotted"}


def test_background_none():
    style, applied = declare(PropertyID.BACKGROUND, "none")

    assert applied
    assert style.to_dict() == {"background-color": "transparent"}


def test_background_color_image_and_repeat():
    style, applied = declare(PropertyID.BACKGROUND, "url(bg.png) red no-repeat", FakeDocument())

    assert applied
    assert style.property(PropertyID.BACKGROUND_COLOR) == ColorStyleValue(255, 0, 0)
    assert style.property(PropertyID.BACKGROUND_IMAGE) == ImageStyleValue("http://example.com/bg.png")
    assert style.property(PropertyID.BACKGROUND_REPEAT_X) == ident(ValueID.NO_REPEAT)
    assert style.property(PropertyID.BACKGROUND_REPEAT_Y) == ident(ValueID.NO_REPEAT)
    assert PropertyID.BACKGROUND not in style
    assert PropertyID.BACKGROUND_REPEAT not in style


def test_background_two_repeat_keywords_map_to_axes():
    style, _ = declare(PropertyID.BACKGROUND, "repeat no-repeat")

    assert style.property(PropertyID.BACKGROUND_REPEAT_X) == ident(ValueID.REPEAT)
    assert style.property(PropertyID.BACKGROUND_REPEAT_Y) == ident(ValueID.NO_REPEAT)


def test_background_with_broken_part_sets_nothing():
    style = StyleProperties()

    assert not expand(style, PropertyID.BACKGROUND, StringStyleValue("red a)"))
    assert len(style) == 0


def test_background_image_needs_url():
    style, applied = declare(PropertyID.BACKGROUND_IMAGE, "linear-gradient(red, blue)")
    assert not applied

    style, applied = declare(PropertyID.BACKGROUND_IMAGE, "url('a.png')")
    assert applied
    assert style.property(PropertyID.BACKGROUND_IMAGE) == ImageStyleValue("a.png")


def test_background_repeat_single_axis_keywords():
    style, _ = declare(PropertyID.BACKGROUND_REPEAT, "repeat-x")
    assert style.to_dict() == {"background-repeat-x": "repeat", "background-repeat-y": "no-repeat"}

    style, _ = declare(PropertyID.BACKGROUND_REPEAT, "repeat-y")
    assert style.to_dict() == {"background-repeat-x": "no-repeat", "background-repeat-y": "repeat"}

    style, _ = declare(PropertyID.BACKGROUND_REPEAT, "space round")
    assert style.to_dict() == {"background-repeat-x": "space", "background-repeat-y": "round"}


def test_background_repeat_rejects_other_keywords():
    style, applied = declare(PropertyID.BACKGROUND_REPEAT, "solid")

    assert not applied
    assert len(style) == 0


def test_repeat_axis_rejects_single_axis_keywords_even_internally():
    style = StyleProperties()

    for value_id in (ValueID.REPEAT_X, ValueID.REPEAT_Y):
        for axis in (PropertyID.BACKGROUND_REPEAT_X, PropertyID.BACKGROUND_REPEAT_Y):
            assert not expand(style, axis, ident(value_id), is_internal=True)
    assert len(style) == 0


def test_function_values_keep_their_arguments_together():
    declaration = CSSParser().parse_declaration(
        "border: 1px solid rgb(255,0,0); background: rgb(0,0,255) url(x.png)")
    style = StyleProperties()
    for declared in declaration.properties:
        expand(style, declared.property_id, declared.value)

    assert all(style.property(pid) == ColorStyleValue(255, 0, 0) for pid in BORDER_COLORS)
    assert all(style.property(pid) == px(1) for pid in BORDER_WIDTHS)
    assert style.property(PropertyID.BACKGROUND_COLOR) == ColorStyleValue(0, 0, 255)
    assert style.property(PropertyID.BACKGROUND_IMAGE) == ImageStyleValue("x.png")


def test_list_style_takes_the_type():
    style, _ = declare(PropertyID.LIST_STYLE, "square inside")

    assert style.to_dict() == {"list-style-type": "square"}


def test_font_size_line_height_and_family():
    style, applied = declare(PropertyID.FONT, "12px/1.5 serif")

    assert applied
    assert style.to_dict() == {"font-size": "12px", "line-height": "1.5", "font-family": "serif"}


def test_font_needs_size_and_family():
    style, applied = declare(PropertyID.FONT, "12px")

    assert not applied
    assert len(style) == 0


def test_every_shorthand_has_an_expander():
    handled = set(expander._EXPANDERS)

    assert properties.SHORTHAND_PROPERTIES <= handled
    assert properties.PSEUDO_PROPERTIES <= handled


def test_missing_expander_fails_at_import(monkeypatch):
    monkeypatch.setattr(properties, "SHORTHAND_PROPERTIES",
                        properties.SHORTHAND_PROPERTIES | {PropertyID.COLOR})

    with pytest.raises(RuntimeError, match="color"):
        importlib.reload(expander)

    monkeypatch.undo()
    importlib.reload(expander)
