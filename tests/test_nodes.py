"""Tests for tree-node adapters."""

from __future__ import annotations

from bs4 import BeautifulSoup

from amp_timeline.nodes import SoupNode, TreeNode, describe_node, is_service_node, real_children
from amp_timeline.schemas import ElementNode


class TestRealChildren:
    """Tests for real_children and is_service_node."""

    def test_skips_text_and_service_nodes(self) -> None:
        """Should keep only authored element children."""
        soup = BeautifulSoup(
            "<amp-timeline>text<div placeholder></div>"
            "<section></section><i-amphtml-sizer></i-amphtml-sizer>"
            "<div fallback></div><section></section></amp-timeline>",
            "lxml",
        )
        timeline = soup.find("amp-timeline")

        children = real_children(timeline)

        assert [child.name for child in children] == ["section", "section"]

    def test_overflow_is_a_service_node(self) -> None:
        """Should treat an overflow element as a service node."""
        soup = BeautifulSoup('<button overflow="">more</button>', "lxml")

        assert is_service_node(soup.find("button"))

    def test_plain_element_is_not_a_service_node(self) -> None:
        soup = BeautifulSoup('<div class="card"></div>', "lxml")

        assert not is_service_node(soup.find("div"))


class TestSoupNode:
    """Tests for the BeautifulSoup adapter."""

    def test_exposes_tag_classes_and_children(self) -> None:
        """Should expose tag name, classes and element children."""
        soup = BeautifulSoup('<li class="item left"><div class="card"></div> </li>', "lxml")
        node = SoupNode(soup.find("li"))

        assert node.tag_name == "li"
        assert node.classes == ["item", "left"]
        assert node.has_class("left")
        assert not node.has_class("right")
        assert [child.tag_name for child in node.children] == ["div"]

    def test_element_without_class(self) -> None:
        soup = BeautifulSoup("<section></section>", "lxml")
        node = SoupNode(soup.find("section"))

        assert node.classes == []
        assert not node.has_class("heading")

    def test_children_keep_service_nodes(self) -> None:
        """Should drop service nodes only from real_children()."""
        soup = BeautifulSoup(
            '<div class="card"><div placeholder></div><div class="content"></div></div>',
            "lxml",
        )
        node = SoupNode(soup.find("div", class_="card"))

        assert len(node.children) == 2
        assert [child.classes for child in node.real_children()] == [["content"]]

    def test_satisfies_tree_node_protocol(self) -> None:
        """Both node kinds should satisfy the TreeNode protocol."""
        soup = BeautifulSoup("<section></section>", "lxml")

        assert isinstance(SoupNode(soup.find("section")), TreeNode)
        assert isinstance(ElementNode(tag_name="section"), TreeNode)


class TestDescribeNode:
    """Tests for describe_node."""

    def test_with_classes(self) -> None:
        """Should render a lowercase opening tag with its classes."""
        node = ElementNode(tag_name="LI", classes=["item", "left"])

        assert describe_node(node) == '<li class="item left">'

    def test_without_classes(self) -> None:
        assert describe_node(ElementNode(tag_name="section")) == "<section>"

    def test_missing_node(self) -> None:
        assert describe_node(None) == "nothing"
