"""Unit tests for merge and path helpers."""

from checkpoint.utils.merge import deep_merge
from checkpoint.utils.paths import count_messages, flatten_messages, resolve_path, split_path


class TestDeepMerge:
    """Test recursive merging of declarations."""

    def test_nested_mappings_merge(self):
        """Test nested mappings merge recursively."""
        base = {"person": {"name": True}}
        override = {"person": {"email": True}, "terms": True}
        assert deep_merge(base, override) == {
            "person": {"name": True, "email": True},
            "terms": True
        }

    def test_leaf_values_replace(self):
        """Test leaf values are replaced."""
        assert deep_merge({"name": ["alpha", "lowercase"]}, {"name": ["alnum"]}) == {"name": ["alnum"]}
        assert deep_merge({"person": {"name": True}}, {"person": False}) == {"person": False}
        assert deep_merge({"person": False}, {"person": {"name": True}}) == {"person": {"name": True}}

    def test_inputs_not_mutated(self):
        """Test neither input is modified."""
        base = {"person": {"name": ["alpha"]}}
        override = {"person": {"email": ["email"]}}
        merged = deep_merge(base, override)

        merged["person"]["name"].append("lowercase")
        merged["person"]["email"].append("lowercase")

        assert base == {"person": {"name": ["alpha"]}}
        assert override == {"person": {"email": ["email"]}}


class TestPaths:
    """Test dotted path helpers."""

    MESSAGES = {
        "email": ["Bad email"],
        "person": {"name": ["Blank"], "address": {"zip": ["Bad zip"]}},
        "a.b": ["Verbatim"],
    }

    def test_split_path(self):
        """Test splitting dotted paths."""
        assert split_path("person.address.zip") == (["person", "address"], "zip")
        assert split_path("email") == ([], "email")

    def test_resolve_path(self):
        """Test resolving dotted paths."""
        assert resolve_path(self.MESSAGES, "email") == ["Bad email"]
        assert resolve_path(self.MESSAGES, "person.address.zip") == ["Bad zip"]
        assert resolve_path(self.MESSAGES, "person") == {
            "name": ["Blank"],
            "address": {"zip": ["Bad zip"]}
        }
        assert resolve_path(self.MESSAGES, "a.b") == ["Verbatim"]

    def test_resolve_missing_path(self):
        """Test missing paths resolve to an empty mapping."""
        assert resolve_path(self.MESSAGES, "missing.path") == {}
        assert resolve_path(self.MESSAGES, "email.extra") == {}

    def test_count_messages(self):
        """Test counting nested messages."""
        assert count_messages(self.MESSAGES) == 4
        assert count_messages({}) == 0

    def test_flatten_messages(self):
        """Test flattening nested messages to dotted paths."""
        assert flatten_messages(self.MESSAGES) == {
            "email": ["Bad email"],
            "person.name": ["Blank"],
            "person.address.zip": ["Bad zip"],
            "a.b": ["Verbatim"],
        }
