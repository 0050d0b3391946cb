"""Tests for Document."""

import logging

import pytest
from pydantic import ValidationError

from qwsvg import Document, DocumentConfig, UnbalancedContentError
from qwsvg.engine.template import CLASS_NAME


class TestDocumentConfig:
    def test_defaults(self):
        doc = Document()
        assert doc.width == 1200
        assert doc.height == 1200
        assert doc.view_box == "0 0 1200 1200"
        assert doc.template == "svg"
        assert doc.container == "body"
        assert doc.attributes == {}

    def test_none_values_take_defaults(self):
        doc = Document({"width": None, "template": None, "attributes": None})
        assert doc.width == 1200
        assert doc.template == "svg"
        assert doc.attributes == {}

    def test_view_box_derived_from_size(self):
        doc = Document(width=300, height=150)
        assert doc.view_box == "0 0 300 150"

    def test_view_box_override_accepts_alias(self):
        doc = Document({"viewBox": "-1 -1 2 2"})
        assert doc.view_box == "-1 -1 2 2"
        assert Document(view_box="0 0 5 5").view_box == "0 0 5 5"

    def test_config_object_with_overrides(self):
        cfg = DocumentConfig(width=10, height=20, template="html")
        doc = Document(cfg, height=30)
        assert (doc.width, doc.height, doc.template) == (10, 30, "html")

    def test_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            Document(width=-5)

    def test_unknown_template_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="qwsvg"):
            Document(template="xml")
        assert "Unrecognized template mode 'xml'" in caplog.text


class TestMarkup:
    def test_circle_scenario(self):
        markup = Document({"width": 100, "height": 100}).circle(50, 50, 10, {"fill": "red"}).markup()
        assert markup.startswith("<svg ")
        assert 'width="100" height="100"' in markup
        assert '<circle cx="50" cy="50" r="10" fill="red" />' in markup
        assert "<head>" not in markup

    def test_svg_root_attributes(self):
        markup = Document(width=10, height=10, attributes={"id": "pic"}).markup()
        assert f'class="{CLASS_NAME}" id="pic">' in markup
        assert 'xmlns="http://www.w3.org/2000/svg"' in markup
        assert 'viewBox="0 0 10 10"' in markup

    def test_html_document(self):
        doc = Document(template="html")
        doc.tag("title", None, "Page", location="head")
        doc.group(lambda d: d.tag("p", {"class": "x"}, "hi"))
        markup = doc.markup()
        assert markup.startswith(f'<html class="{CLASS_NAME}">')
        assert "<head>\n<title>Page</title>\n</head>" in markup
        assert '<body>\n<div>\n<p class="x">hi</p>\n</div>\n</body>' in markup

    def test_unknown_template_is_unwrapped(self):
        doc = Document(template="xml")
        doc.head("<h />").circle(0, 0, 1).body("<b />")
        assert doc.markup() == '<h /><circle cx="0" cy="0" r="1" /><b />'

    def test_str_is_markup(self):
        doc = Document().circle(1, 1, 1)
        assert str(doc) == doc.markup()

    def test_markup_is_recomputed_each_call(self):
        doc = Document()
        first = doc.markup()
        doc.circle(1, 1, 1)
        assert doc.markup() != first


class TestContent:
    def test_head_and_body_append(self):
        doc = Document().head("<defs />").body("<rect />").head("<style />")
        assert doc.content.head == ["<defs />", "<style />"]
        assert doc.content.body == ["<rect />"]

    def test_reset_then_rebuild_is_identical(self):
        def draw(doc):
            doc.head("<defs />")
            doc.circle(1, 2, 3)
            doc.group(lambda d: d.triangle(5, 5, 4, {"fill": "red"}), {"id": "t"})
            return doc

        doc = draw(Document(width=20, height=20))
        first = doc.markup()

        doc.reset()
        assert doc.content.is_empty
        assert draw(doc).markup() == first

    def test_reset_keeps_document_state(self):
        doc = Document(width=5, height=6, attributes={"id": "a"}).circle(0, 0, 1)
        doc.reset()
        assert (doc.width, doc.height, doc.attributes) == (5, 6, {"id": "a"})

    def test_set_attributes_merges(self):
        doc = Document(attributes={"id": "a", "class": "x"})
        assert doc.set_attributes({"class": "y", "role": "img"}) is doc
        assert doc.attributes == {"id": "a", "class": "y", "role": "img"}

    def test_failed_group_needs_reset(self, caplog):
        doc = Document()

        def bad(d):
            d.circle(0, 0, 1)
            raise ValueError("bad shape")

        with pytest.raises(ValueError):
            doc.group(bad)

        assert not doc.content.balanced
        with caplog.at_level(logging.WARNING, logger="qwsvg"):
            doc.markup()
        assert "unclosed tags" in caplog.text

        doc.reset()
        assert doc.content.balanced

    def test_zero_argument_callback_in_head(self):
        doc = Document()
        doc.tag(
            "defs",
            None,
            lambda: doc.tag("linearGradient", {"id": "a"}, location="head"),
            location="head",
        )
        assert doc.content.head == ["<defs>", '<linearGradient id="a" />', "</defs>"]
        assert doc.content.body == []

    def test_reset_inside_group_raises_typed_error(self):
        doc = Document().circle(0, 0, 1)
        with pytest.raises(UnbalancedContentError):
            doc.group(lambda d: d.reset())
        assert doc.content.is_empty
        assert doc.content.balanced

    def test_documents_do_not_share_content(self):
        a = Document().circle(0, 0, 1)
        b = Document()
        assert b.content.body == []
        assert a.content.body != b.content.body
