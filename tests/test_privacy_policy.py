"""Tests for the privacy policy."""

import re
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from doccover.analysis.privacy_policy import DEFAULT_PRIVATE_PATTERNS, PrivacyPolicy


class TestPrivacyPolicy:
    """Test suite for PrivacyPolicy."""

    @pytest.fixture
    def policy(self):
        """Return a policy with the default patterns."""
        return PrivacyPolicy()

    @pytest.mark.parametrize(
        "name", ["_helper", "__init__", "import", "DESTROY", "AUTOLOAD", "bootstrap"]
    )
    def test_default_patterns_exclude(self, policy, name):
        """Test that the default patterns mark the expected names private."""
        assert policy.is_private(name)

    @pytest.mark.parametrize("name", ["foo", "importer", "my_import", "bootstrapper"])
    def test_default_patterns_are_anchored(self, policy, name):
        """Test that exact-match defaults do not exclude longer names."""
        assert not policy.is_private(name)

    def test_default_pattern_order(self, policy):
        """Test that patterns keep their declared order."""
        assert [p.pattern for p in policy.patterns] == list(DEFAULT_PRIVATE_PATTERNS)

    def test_also_private_appends(self):
        """Test that also_private keeps the defaults and adds patterns."""
        policy = PrivacyPolicy(also_private=[r"^bar$"])

        assert policy.is_private("bar")
        assert policy.is_private("_hidden")
        assert not policy.is_private("foo")
        assert policy.patterns[-1].pattern == r"^bar$"

    def test_private_replaces_defaults(self):
        """Test that private overrides the whole default set."""
        policy = PrivacyPolicy(private=[r"^bar$"])

        assert policy.is_private("bar")
        assert not policy.is_private("_hidden")

    def test_private_ignores_also_private(self):
        """Test that also_private has no effect once private is given."""
        policy = PrivacyPolicy(private=[r"^bar$"], also_private=[r"^foo$"])

        assert not policy.is_private("foo")

    def test_empty_private_excludes_nothing(self):
        """Test that an empty override leaves every name public."""
        policy = PrivacyPolicy(private=[])

        assert policy.patterns == ()
        assert not policy.is_private("_hidden")

    def test_substring_matching(self):
        """Test that unanchored patterns match anywhere in the name."""
        policy = PrivacyPolicy(private=["deprecated"])

        assert policy.is_private("old_deprecated_call")

    def test_accepts_compiled_patterns(self):
        """Test that precompiled regexes are accepted."""
        policy = PrivacyPolicy(also_private=[re.compile(r"^test_")])

        assert policy.is_private("test_something")
