"""
Unit tests for Config.

Tests the severity threshold, the include/exclude module filter and the
indentation gate.
"""

import itertools

import pytest

from scopelog import Config, LogLevel, module_of


ALL_LEVELS = list(LogLevel)


@pytest.mark.unit
class TestConfigDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        """Defaults: TRACE threshold, two spaces per scope, arrow markers, no filters."""
        config = Config()
        assert config.log_level is LogLevel.TRACE
        assert config.indentation_per_scope == 2
        assert config.indentation_character == " "
        assert config.scope_in_symbol == "->"
        assert config.scope_out_symbol == "<-"
        assert config.include_modules is None
        assert config.exclude_modules is None

    def test_log_level_accepts_names(self):
        """log_level can be set from a level name."""
        config = Config(log_level="info")
        assert config.log_level is LogLevel.INFO

        config.log_level = "error"
        assert config.log_level is LogLevel.ERROR

    def test_module_sets_are_copied(self):
        """Module iterables passed to the constructor become sets."""
        modules = ["a.py", "a.py", "b.py"]
        config = Config(include_modules=modules)
        assert config.include_modules == {"a.py", "b.py"}


@pytest.mark.unit
class TestThreshold:
    """Test severity threshold filtering."""

    @pytest.mark.parametrize(
        "level,threshold", list(itertools.product(ALL_LEVELS, ALL_LEVELS))
    )
    def test_monotonic_threshold(self, level, threshold):
        """A message is emitted iff its level is not more verbose than the threshold."""
        config = Config(log_level=threshold)
        assert config.should_log(level, "any.py") == (level <= threshold)

    def test_none_threshold_suppresses_errors(self):
        """Threshold NONE suppresses even errors."""
        config = Config(log_level=LogLevel.NONE)
        assert not config.should_log(LogLevel.ERROR, "any.py")


@pytest.mark.unit
class TestModuleFilter:
    """Test include/exclude module filtering."""

    def test_no_sets_always_passes(self):
        """Without include or exclude sets every module passes."""
        config = Config()
        assert config.should_log_module("anything.py")

    def test_include_restricts_to_members(self):
        """Once a module is included, only included modules pass."""
        config = Config()
        config.include("a.py")
        assert config.should_log_module("a.py")
        assert not config.should_log_module("b.py")

    def test_exclude_suppresses_members(self):
        """Excluded modules never pass."""
        config = Config(exclude_modules={"a.ext"})
        assert not config.should_log(LogLevel.ERROR, "a.ext")
        assert config.should_log(LogLevel.ERROR, "b.ext")

    def test_excluded_at_every_level(self):
        """An excluded module is suppressed at every level."""
        config = Config(exclude_modules={"a.ext"})
        for level in ALL_LEVELS:
            assert not config.should_log(level, "a.ext")

    def test_not_included_at_every_level(self):
        """A module outside the include set is suppressed at every level."""
        config = Config(include_modules={"a.ext"})
        for level in ALL_LEVELS:
            assert not config.should_log(level, "b.ext")

    def test_exclude_wins_over_include(self):
        """A module both included and excluded is suppressed."""
        config = Config()
        config.include("a.py")
        config.exclude("a.py")
        assert not config.should_log_module("a.py")

    def test_include_is_idempotent(self):
        """Including a module twice has the same effect as once."""
        once, twice = Config(), Config()
        once.include("x")
        twice.include("x")
        twice.include("x")
        assert once.include_modules == twice.include_modules == {"x"}

    def test_exclude_is_idempotent(self):
        """Excluding a module twice has the same effect as once."""
        once, twice = Config(), Config()
        once.exclude("x")
        twice.exclude("x")
        twice.exclude("x")
        assert once.exclude_modules == twice.exclude_modules == {"x"}

    def test_full_path_uses_basename(self):
        """Source paths are matched by their last path component."""
        config = Config(exclude_modules={"worker.py"})
        assert not config.should_log(LogLevel.INFO, "/srv/app/jobs/worker.py")

    def test_same_basename_in_different_directories_conflated(self):
        """Files with the same name in different directories share a module identity."""
        config = Config(exclude_modules={"util.py"})
        assert not config.should_log_module("/a/util.py")
        assert not config.should_log_module("/b/util.py")


@pytest.mark.unit
class TestShouldIndent:
    """Test the indentation gate."""

    def test_follows_module_filter(self):
        """should_indent matches the module filter."""
        config = Config(exclude_modules={"a.py"})
        assert not config.should_indent("a.py")
        assert config.should_indent("b.py")

    def test_ignores_level(self):
        """should_indent does not depend on the threshold."""
        config = Config(log_level=LogLevel.NONE)
        assert config.should_indent("a.py")


@pytest.mark.unit
def test_module_of():
    """module_of returns the last path component."""
    assert module_of("/x/y/z.py") == "z.py"
    assert module_of("z.py") == "z.py"
