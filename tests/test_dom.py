from __future__ import annotations

import unittest

from justhtml.node import Document, Element, Template, Text

from tagsieve import dom, sanitize_tree
from tagsieve.constants import REQUIRED_TAGS


def _names(nodes) -> list[str]:
    return [str(n.name) for n in nodes]


class TestDomTraversal(unittest.TestCase):
    def _tree(self):
        root = Document()
        div = Element("div", {}, "html")
        root.append_child(div)
        p = Element("p", {}, "html")
        div.append_child(p)
        p.append_child(Text("a"))
        div.append_child(Element("span", {}, "html"))
        root.append_child(Element("b", {}, "html"))
        return root, div, p

    def test_iter_document_order_includes_root(self) -> None:
        root, _, _ = self._tree()
        assert _names(dom.iter_document_order(root)) == ["#document", "div", "p", "#text", "span", "b"]

    def test_collect_skips_descendants_of_matches(self) -> None:
        root, div, _ = self._tree()
        found = dom.collect(root, lambda n: n.name in ("div", "p", "b"))
        assert _names(found) == ["div", "b"]
        assert found[0] is div

    def test_detach_removes_subtree(self) -> None:
        root, div, p = self._tree()
        assert dom.detach(div) is True
        assert _names(root.children) == ["b"]
        assert p.parent is div

    def test_detach_root_is_a_no_op(self) -> None:
        root, _, _ = self._tree()
        assert dom.detach(root) is False

    def test_template_contents_are_visited(self) -> None:
        root = Document()
        template = Template("template", {}, None, "html")
        root.append_child(template)
        assert template.template_content is not None
        template.template_content.append_child(Element("i", {}, "html"))

        names = _names(dom.iter_document_order(root))
        assert names[:2] == ["#document", "template"]
        assert names[-1] == "i"

    def test_node_attrs_on_text(self) -> None:
        assert dom.node_attrs(Text("x")) == {}


class TestDomParsing(unittest.TestCase):
    def test_fragment_parse_has_no_document_skeleton(self) -> None:
        doc = dom.parse_markup("<p>x</p>")
        names = {str(n.name) for n in dom.iter_document_order(doc.root)}
        assert names == {"#document-fragment", "p", "#text"}
        assert dom.serialize(doc) == "<p>x</p>"

    def test_serialize_keeps_parser_dropped_newline_stable(self) -> None:
        doc = dom.parse_markup("<pre>\n\nx</pre><listing>\nz</listing>")
        assert dom.serialize(doc) == "<pre>\n\nx</pre><listing>z</listing>"

    def test_malformed_input_is_coerced(self) -> None:
        doc = dom.parse_markup("<p><b>unclosed")
        assert dom.serialize(doc) == "<p><b>unclosed</b></p>"


class TestSanitizeTree(unittest.TestCase):
    def test_sanitize_tree_filters_in_place(self) -> None:
        root = Document()
        a = Element("A", {"title": "t", "HREF": "JAVASCRIPT:x", "onclick": "y", "disabled": None}, "html")
        root.append_child(a)
        root.append_child(Element("script", {}, "html"))

        sanitize_tree(root, ["a"], ["title", "href", "disabled"], ["href"])

        assert _names(root.children) == ["A"]
        assert a.attrs == {"title": "t", "disabled": None}
        assert list(a.attrs) == ["title", "disabled"]

    def test_sanitize_tree_reaches_template_contents(self) -> None:
        doc = dom.parse_markup("<template><b>x</b><i>y</i></template>")
        sanitize_tree(doc.root, ["template", "b"], [])

        template = doc.root.children[0]
        assert type(template) is Template
        assert template.template_content is not None
        assert _names(template.template_content.children) == ["b"]

    def test_required_tags_survive_empty_effective_lists(self) -> None:
        doc = dom.parse_markup("text <em>gone</em>")
        sanitize_tree(doc.root, ["p"], [])
        for node in dom.iter_document_order(doc.root):
            assert str(node.name) in REQUIRED_TAGS
        assert dom.serialize(doc) == "text "


if __name__ == "__main__":
    unittest.main()
