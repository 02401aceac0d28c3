"""Tests for class list operations."""

import tagattrs
from tagattrs import Tag, Text
from tagattrs.api.classes import class_tokens


def _classes(selection):
    return [node.attributes.get("class") for node in selection]


class TestHasClass:
    """Tests for has_class()."""

    def test_any_node_matches(self, list_doc):
        """Test the check is existential across the selection."""
        items = list_doc.find("li")
        assert items.has_class("pear")
        assert items.has_class("red")
        assert not items.has_class("banana")

    def test_ignores_non_tags(self):
        """Test text nodes never match."""
        selection = tagattrs.wrap([Text(content="apple")])
        assert not selection.has_class("apple")


class TestAddClass:
    """Tests for add_class()."""

    def test_no_duplicates_and_order(self):
        """Test adding to an existing class keeps order without duplicates."""
        node = Tag(name="p", attributes={"class": "a"})
        tagattrs.wrap(node).add_class("a b")
        assert class_tokens(node) == ["a", "b"]

    def test_without_existing_class(self):
        """Test a node without class gets the joined tokens."""
        node = Tag(name="p")
        tagattrs.wrap(node).add_class("  x   y ")
        assert node.attributes["class"] == "x y"

    def test_first_seen_order(self):
        """Test tokens repeated in the argument are added once."""
        node = Tag(name="p", attributes={"class": "a"})
        tagattrs.wrap(node).add_class("c b c a")
        assert node.attributes["class"] == "a c b"

    def test_callable(self, list_doc):
        """Test the per-node callable form."""
        seen = []

        def extra(index, current):
            seen.append((index, current))
            return f"item-{index}"

        items = list_doc.find("li").add_class(extra)
        assert seen == [(0, "apple"), (1, "orange"), (2, "pear red")]
        assert _classes(items) == ["apple item-0", "orange item-1", "pear red item-2"]

    def test_skips_non_tags_and_chains(self):
        """Test non-tag nodes are skipped and later tags still updated."""
        tag = Tag(name="p")
        selection = tagattrs.wrap([Text(content="x"), tag])
        assert selection.add_class("on") is selection
        assert tag.attributes["class"] == "on"

    def test_empty_value(self):
        """Test empty and non-string values do nothing."""
        node = Tag(name="p")
        tagattrs.wrap(node).add_class("").add_class(None)
        assert "class" not in node.attributes


class TestRemoveClass:
    """Tests for remove_class()."""

    def test_set_difference_keeps_order(self):
        """Test survivors keep their relative order."""
        node = Tag(name="p", attributes={"class": "a b c a d"})
        tagattrs.wrap(node).remove_class("a c")
        assert node.attributes["class"] == "b d"

    def test_no_argument_removes_everything(self, list_doc):
        """Test removing all classes from every node."""
        items = list_doc.find("li").remove_class()
        assert _classes(items) == ["", "", ""]

    def test_callable(self, list_doc):
        """Test the per-node callable form."""
        items = list_doc.find("li").remove_class(lambda index, current: current.split()[0])
        assert _classes(items) == ["", "", "red"]

    def test_explicit_none_removes_nothing(self):
        """Test that passing None is not the remove-all form."""
        node = Tag(name="p", attributes={"class": "a b"})
        tagattrs.wrap(node).remove_class(None)
        assert node.attributes["class"] == "a b"


class TestToggleClass:
    """Tests for toggle_class()."""

    def test_toggle_adds_and_removes(self):
        """Test toggling without state."""
        node = Tag(name="p", attributes={"class": "a"})
        selection = tagattrs.wrap(node)
        selection.toggle_class("x")
        assert class_tokens(node) == ["a", "x"]
        selection.toggle_class("x")
        assert class_tokens(node) == ["a"]

    def test_forced_state(self):
        """Test state True/False forces presence/absence."""
        node = Tag(name="p", attributes={"class": "x"})
        selection = tagattrs.wrap(node)
        selection.toggle_class("x", True)
        assert class_tokens(node) == ["x"]
        selection.toggle_class("x", False)
        assert class_tokens(node) == []
        selection.toggle_class("x", False)
        assert class_tokens(node) == []
        selection.toggle_class("x", True)
        assert class_tokens(node) == ["x"]

    def test_multiple_tokens(self):
        """Test each token is toggled independently."""
        node = Tag(name="p", attributes={"class": "a"})
        tagattrs.wrap(node).toggle_class("a b")
        assert node.attributes["class"] == "b"

    def test_later_tokens_see_earlier_changes(self):
        """Test a repeated token is toggled twice."""
        node = Tag(name="p", attributes={"class": "a"})
        tagattrs.wrap(node).toggle_class("x x")
        assert node.attributes["class"] == "a"

    def test_callable_receives_state(self, list_doc):
        """Test the callable form gets index, class and state."""
        seen = []

        def pick(index, current, state):
            seen.append((index, current, state))
            return "hot"

        items = list_doc.find("li").toggle_class(pick, True)
        assert seen == [(0, "apple", True), (1, "orange", True), (2, "pear red", True)]
        assert all("hot" in class_tokens(node) for node in items)


class TestIs:
    """Tests for is_()."""

    def test_selector(self, list_doc):
        """Test matching against a selector."""
        items = list_doc.find("li")
        assert items.is_(".orange")
        assert items.is_("li#c.red")
        assert not items.is_("span")

    def test_no_argument(self, list_doc):
        """Test that no selector never matches."""
        assert not list_doc.find("li").is_()

    def test_callable(self, list_doc):
        """Test matching with a predicate."""
        items = list_doc.find("li")
        assert items.is_(lambda index, node: index == 2)
        assert not items.is_(lambda index, node: False)

    def test_reflects_class_changes(self, list_doc):
        """Test matching sees the current class state."""
        items = list_doc.find("li")
        assert not items.is_(".ripe")
        items.add_class("ripe")
        assert items.is_(".ripe")
