"""
Wildcard Matcher Tests

Tests for matching required permissions against granted permissions,
covering exact, positional, trailing and global wildcards.
"""

from neo_permissions.config import setup_logging
from neo_permissions.features.permissions import (
    DefaultWildcardMatcher,
    WildcardMatcherProtocol,
    covers,
    create_wildcard_matcher,
    is_wildcard_permission,
    matches,
    split_permission,
)


class TestMatches:
    """Test the matches predicate."""

    def test_exact_permission_match(self):
        assert matches("users.read", "users.read")
        assert matches("assets.files.write", "assets.files.write")

    def test_domain_wildcard(self):
        assert matches("users.read", "users.*")
        assert matches("users.write", "users.*")
        assert matches("assets.files.read", "assets.*")

    def test_action_wildcard(self):
        assert matches("users.read", "*.read")
        assert matches("assets.files.read", "*.*.read")

    def test_global_wildcard(self):
        assert matches("users.read", "*")
        assert matches("assets.files.write", "*")

    def test_global_wildcard_matches_anything(self, sample_required_permissions):
        for permission in sample_required_permissions + ["", "a..b", ".", "*", "x.*"]:
            assert matches(permission, "*")

    def test_reflexive_for_identical_strings(self, sample_required_permissions, sample_granted_permissions):
        for permission in sample_required_permissions + sample_granted_permissions + ["", "a..b", "."]:
            assert matches(permission, permission)

    def test_mixed_wildcards(self):
        assert matches("assets.files.read", "assets.*.read")
        assert matches("assets.stats.read", "assets.*.read")

    def test_non_matching_permissions(self):
        assert not matches("users.read", "users.write")
        assert not matches("assets.files.read", "assets.stats.read")
        assert not matches("users.read", "assets.*")

    def test_insufficient_permission_depth(self):
        assert not matches("assets.files.read", "assets")
        assert not matches("assets.files.read", "assets.files")

    def test_multiple_subdomain_levels(self):
        assert matches("assets.files.archive.read", "assets.files.archive.*")
        assert matches("assets.files.archive.read", "assets.files.*")
        assert matches("assets.files.archive.read", "assets.*")
        assert matches("assets.files.archive.read", "*")
        assert matches("assets.stats.history.monthly.view", "assets.stats.history.monthly.*")
        assert matches("assets.stats.history.monthly.view", "assets.stats.history.*")
        assert matches("assets.stats.history.monthly.view", "assets.stats.*")
        assert matches("assets.stats.history.monthly.view", "assets.*")

    def test_trailing_wildcard_requires_matching_prefix(self):
        assert not matches("assets.files.read", "assets.stats.*")
        assert not matches("users.profile.read", "assets.*")

    def test_trailing_wildcard_covers_its_own_prefix(self):
        assert matches("assets.files", "assets.files.*")
        assert matches("users", "users.*")

    def test_trailing_wildcard_prefix_deeper_than_required(self):
        assert not matches("assets", "assets.files.*")
        assert not matches("assets.files", "assets.files.archive.*")

    def test_wildcards_at_different_levels(self):
        assert matches("assets.files.archive.read", "assets.*.*.read")
        assert matches("assets.files.archive.delete", "assets.*.archive.*")
        assert matches("users.profile.settings.edit", "users.*.*.edit")
        assert matches("users.profile.settings.edit", "*.profile.settings.*")

    def test_mid_wildcard_matches_exactly_one_segment(self):
        assert not matches("assets.read", "assets.*.read")
        assert not matches("assets.files.archive.read", "assets.*.read")

    def test_insufficient_subdomain_depth(self):
        assert not matches("assets.files.archive.read", "assets")
        assert not matches("assets.files.archive.read", "assets.files")
        assert not matches("users.profile.settings.edit", "users.profile")
        assert not matches("users.profile.settings.edit", "users.profile.settings")

    def test_longer_grant_without_trailing_wildcard(self):
        """Extra grant segments beyond the required depth never produce a match."""
        assert not matches("assets.files", "assets.files.read")
        assert not matches("users", "users.read")
        assert not matches("assets.files", "assets.*.read")
        assert not matches("assets.files", "assets.files.*.read")

    def test_segments_are_case_sensitive(self):
        assert not matches("Users.read", "users.read")
        assert not matches("users.READ", "users.*.read")

    def test_empty_segments_compared_literally(self):
        assert matches("a..b", "a..b")
        assert matches("a..b", "a.*.b")
        assert not matches("a.b", "a..b")
        assert not matches("a..b", "a.b")
        assert matches("a.", "a.*")
        assert matches("", "")
        assert not matches("", "a")

    def test_partial_segment_wildcard_is_literal(self):
        assert not matches("users.read", "users.re*")
        assert matches("users.re*", "users.re*")


class TestCovers:
    """Test the argument-swapped coverage helper."""

    def test_covers_delegates_to_matches(self):
        assert covers("users.*", "users.read")
        assert not covers("users.read", "users.*")
        assert covers("assets.*.read", "assets.files.read")


class TestHelpers:
    """Test permission string helpers."""

    def test_split_permission(self):
        assert split_permission("assets.files.read") == ["assets", "files", "read"]
        assert split_permission("users") == ["users"]
        assert split_permission("") == [""]
        assert split_permission("a..b") == ["a", "", "b"]

    def test_is_wildcard_permission(self):
        assert is_wildcard_permission("*")
        assert is_wildcard_permission("users.*")
        assert is_wildcard_permission("*.*.read")
        assert not is_wildcard_permission("users.read")
        assert not is_wildcard_permission("users.re*")


class TestMatchTracing:
    """Test debug logging of match decisions."""

    def test_no_trace_by_default(self, log_messages):
        matches("users.read", "users.*")
        assert not any("Permission match" in message for message in log_messages)

    def test_trace_when_enabled(self, log_messages, tracing_settings):
        setup_logging(tracing_settings)
        matches("users.read", "users.*")
        assert "Permission match: 'users.*' vs 'users.read' -> True" in log_messages


class TestDefaultWildcardMatcher:
    """Test the injectable matcher facade."""

    def setup_method(self):
        """Set up test fixtures."""
        self.matcher = create_wildcard_matcher()

    def test_factory_returns_protocol_implementation(self):
        assert isinstance(self.matcher, DefaultWildcardMatcher)
        assert isinstance(self.matcher, WildcardMatcherProtocol)

    def test_matches_permission(self):
        assert self.matcher.matches_permission("users.read", "users.*")
        assert not self.matcher.matches_permission("users.read", "assets.*")

    def test_is_wildcard_permission(self):
        assert self.matcher.is_wildcard_permission("assets.*.read")
        assert not self.matcher.is_wildcard_permission("assets.files.read")

    def test_check_permissions_list_require_all(self):
        granted = ["users.*", "assets.files.*"]
        assert self.matcher.check_permissions_list(["users.read", "assets.files.write"], granted)
        assert not self.matcher.check_permissions_list(["users.read", "assets.stats.read"], granted)
        assert self.matcher.check_permissions_list([], granted)

    def test_check_permissions_list_require_any(self):
        granted = ["users.*"]
        assert self.matcher.check_permissions_list(
            ["assets.stats.read", "users.read"], granted, require_all=False
        )
        assert not self.matcher.check_permissions_list(
            ["assets.stats.read"], granted, require_all=False
        )
        assert not self.matcher.check_permissions_list([], granted, require_all=False)
