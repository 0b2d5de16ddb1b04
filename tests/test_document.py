from style_engine.css.properties import PropertyID
from style_engine.css.values import ColorStyleValue, LengthStyleValue
from style_engine.dom.document import Document, parse_html

PAGE = """<!DOCTYPE html>
<html>
<head>
  <style>p { color: red } .note { background: url(img/bg.png) }</style>
  <style>@media print { p { color: black } }</style>
</head>
<body bgcolor="#eeeeee">
  <div style="color: blue"><p class="note">Hello <b>world</b></p></div>
</body>
</html>
"""


def test_complete_url():
    assert Document(url="http://example.com/a/b.html").complete_url("c.png") == "http://example.com/a/c.png"
    assert Document().complete_url("c.png") == "c.png"


def test_quirks_mode_flag():
    document = Document()

    assert not document.in_quirks_mode()
    document.set_quirks_mode(True)
    assert document.in_quirks_mode()


def test_parse_html_builds_tree_and_sheets():
    document = parse_html(PAGE, url="http://example.com/dir/index.html")

    assert not document.in_quirks_mode()
    assert document.document_element.tag_name == "html"
    assert [element.tag_name for element in document.document_element.children] == ["head", "body"]
    assert len(document.style_sheets()) == 2
    assert document.style_sheets()[0].href == "http://example.com/dir/index.html"


def test_missing_or_legacy_doctype_means_quirks():
    assert parse_html("<p>hi</p>").in_quirks_mode()
    assert parse_html("<!DOCTYPE svg><p>hi</p>").in_quirks_mode()
    assert not parse_html("<!doctype HTML><p>hi</p>").in_quirks_mode()


def test_update_style_resolves_top_down():
    document = parse_html(PAGE, url="http://example.com/dir/index.html")

    count = document.update_style()
    elements = list(document.elements())
    by_tag = {element.tag_name: element for element in elements}

    assert count == len(elements)
    body = by_tag["body"].specified_css_values()
    p = by_tag["p"].specified_css_values()
    b = by_tag["b"].specified_css_values()

    assert body.property(PropertyID.BACKGROUND_COLOR) == ColorStyleValue(238, 238, 238)
    assert body.property(PropertyID.MARGIN_TOP) == LengthStyleValue.px(8)
    assert p.property(PropertyID.COLOR) == ColorStyleValue(255, 0, 0)
    assert p.property(PropertyID.BACKGROUND_IMAGE).url == "http://example.com/dir/img/bg.png"
    assert b.property(PropertyID.COLOR) == ColorStyleValue(255, 0, 0)
    assert b.property(PropertyID.FONT_WEIGHT).to_string() == "bold"
    assert by_tag["div"].specified_css_values().property(PropertyID.COLOR) == ColorStyleValue(0, 0, 255)


def test_print_media_type():
    document = parse_html(PAGE, media_type="print")
    document.update_style()
    p = next(element for element in document.elements() if element.tag_name == "p")

    assert p.specified_css_values().property(PropertyID.COLOR) == ColorStyleValue(0, 0, 0)


def test_standards_page_skips_quirks_sheet():
    document = parse_html("<!DOCTYPE html><html><body><p>x</p></body></html>")
    document.update_style()
    by_tag = {element.tag_name: element for element in document.elements()}

    assert document.doctype == "html"
    assert not document.in_quirks_mode()
    assert by_tag["p"].specified_css_values().property(PropertyID.MARGIN_TOP) == LengthStyleValue(1, "em")


def test_quirks_page_gets_quirks_sheet():
    document = parse_html("<html><body><p>x</p></body></html>")
    document.update_style()
    by_tag = {element.tag_name: element for element in document.elements()}

    assert document.doctype is None
    assert by_tag["p"].specified_css_values().property(PropertyID.MARGIN_TOP) == LengthStyleValue.px(0)
