"""
Unit tests for the token registry and token model.
"""

import pytest

from deckstyle.errors import NotInitializedError
from deckstyle.themes import DEFAULT_TOKENS, DesignTokens, TokenRegistry


class TestTokenRegistry:
    """Tests for TokenRegistry."""

    def test_get_tokens_before_register_raises(self):
        """Test reading tokens before registration fails with NotInitialized."""
        registry = TokenRegistry()
        with pytest.raises(NotInitializedError):
            registry.get_tokens()

    def test_has_tokens_never_raises(self):
        """Test has_tokens reports state without failing."""
        registry = TokenRegistry()
        assert registry.has_tokens() is False
        registry.register_tokens(DEFAULT_TOKENS)
        assert registry.has_tokens() is True

    def test_register_then_get_returns_same_tokens(self):
        """Test the registered set is returned unchanged."""
        registry = TokenRegistry()
        registry.register_tokens(DEFAULT_TOKENS)
        assert registry.get_tokens() == DEFAULT_TOKENS
        assert registry.get_tokens() is DEFAULT_TOKENS

    def test_register_replaces_whole_set(self):
        """Test a second registration discards keys of the first."""
        registry = TokenRegistry()
        registry.register_tokens(DEFAULT_TOKENS)
        replacement = DesignTokens(colors={"ink": "#000"})
        registry.register_tokens(replacement)

        tokens = registry.get_tokens()
        assert tokens.colors == {"ink": "#000"}
        assert "primary" not in tokens.colors
        assert tokens.typography == {}

    def test_clear_returns_to_uninitialized(self):
        """Test clear drops the current set."""
        registry = TokenRegistry()
        registry.register_tokens(DEFAULT_TOKENS)
        registry.clear()
        assert registry.has_tokens() is False
        with pytest.raises(NotInitializedError):
            registry.get_tokens()


class TestDesignTokens:
    """Tests for the DesignTokens model."""

    def test_category_set_is_fixed(self):
        """Test unknown top-level categories are rejected."""
        with pytest.raises(ValueError):
            DesignTokens.model_validate({"colors": {}, "motion": {"fast": "100ms"}})

    def test_numeric_keys_become_strings(self):
        """Test spacing keys such as 4 are stored as "4"."""
        tokens = DesignTokens(spacing={4: "1rem", 8: "2rem"})
        assert list(tokens.spacing) == ["4", "8"]

    def test_key_level_copy_preserves_siblings(self, brand_tokens):
        """Test spreading a category keeps keys that were not overridden."""
        assert brand_tokens.colors["primary"] == "#e11d48"
        assert brand_tokens.colors["secondary"] == DEFAULT_TOKENS.colors["secondary"]
        assert DEFAULT_TOKENS.colors["primary"] == "#3b82f6"

    def test_category_replacement_drops_siblings(self):
        """Test replacing a whole category loses keys not re-specified."""
        tokens = DEFAULT_TOKENS.model_copy(update={"colors": {"primary": "#e11d48"}})
        assert list(tokens.colors) == ["primary"]

    def test_default_tokens_have_nested_groups(self):
        """Test the default set carries the nested typography and border groups."""
        assert set(DEFAULT_TOKENS.typography) == {
            "fontFamily",
            "fontSize",
            "fontWeight",
            "lineHeight",
        }
        assert set(DEFAULT_TOKENS.borders) == {"radius", "width"}
