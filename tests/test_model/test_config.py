"""Tests for UntangleConfig."""

import dataclasses

import pytest

from untangle.config import DEFAULT_CONCURRENCY, UntangleConfig


class TestUntangleConfig:
    def test_defaults(self):
        config = UntangleConfig(input_path="main.less")
        assert config.ignore == ()
        assert config.root_glob is None
        assert config.extension == "less"
        assert config.concurrency == DEFAULT_CONCURRENCY == 10
        assert config.preprocessor == "lessc"
        assert config.search_timeout == 30.0
        assert config.preprocess_timeout == 120.0
        assert config.precompile is True
        assert not config.print_queries
        assert not config.show_unmatched
        assert not config.verbose

    def test_frozen(self):
        config = UntangleConfig(input_path="main.less")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.extension = "css"  # type: ignore[misc]

    def test_input_is_always_ignored(self):
        config = UntangleConfig(input_path="main.less")
        assert config.effective_ignore == frozenset({"main.less"})

    def test_explicit_ignores_are_added(self):
        config = UntangleConfig(input_path="./styles/main.less", ignore=("vendor/x.less",))
        assert config.effective_ignore == frozenset({"styles/main.less", "vendor/x.less"})

    def test_concurrency_must_be_positive(self):
        with pytest.raises(ValueError):
            UntangleConfig(input_path="main.less", concurrency=0)
