"""Tests for reviewer parsing and resolution."""

import logging

import pytest

from setupenv_core.errors import NotFoundError, ResolutionError
from setupenv_core.models import EnvReviewer, ReviewerType
from setupenv_core.resolver import parse_reviewer_spec, resolve_reviewers


class TestParseReviewerSpec:
    @pytest.mark.parametrize("raw", ["org/infra", "@org/infra"])
    def test_slash_means_team(self, raw):
        spec = parse_reviewer_spec(raw)
        assert spec.type is ReviewerType.TEAM
        assert spec.org == "org"
        assert spec.name == "infra"
        assert spec.raw == raw

    @pytest.mark.parametrize("raw", ["alice", "@alice"])
    def test_no_slash_means_user(self, raw):
        spec = parse_reviewer_spec(raw)
        assert spec.type is ReviewerType.USER
        assert spec.name == "alice"
        assert spec.org is None

    def test_only_one_leading_at_stripped_for_team(self):
        spec = parse_reviewer_spec("@@org/infra")
        assert spec.org == "@org"

    def test_only_one_leading_at_stripped_for_user(self):
        assert parse_reviewer_spec("@@alice").name == "@alice"

    def test_team_split_on_first_slash(self):
        spec = parse_reviewer_spec("org/infra/extra")
        assert spec.org == "org"
        assert spec.name == "infra/extra"

    @pytest.mark.parametrize("raw", ["org/", "/infra", "@/infra", "/"])
    def test_team_with_empty_segment_rejected(self, raw):
        with pytest.raises(ResolutionError, match="cannot resolve team"):
            parse_reviewer_spec(raw)

    @pytest.mark.parametrize("raw", ["", "@"])
    def test_empty_user_rejected(self, raw):
        with pytest.raises(ResolutionError, match="cannot resolve user"):
            parse_reviewer_spec(raw)


class TestResolveReviewers:
    def test_empty_list_makes_no_calls(self, platform):
        assert resolve_reviewers(platform, []) == []
        assert platform.calls == []

    def test_resolves_users_and_teams_in_order(self, platform):
        result = resolve_reviewers(platform, ["alice", "org/infra"])

        assert result == [
            EnvReviewer(type=ReviewerType.USER, id=1, name="alice"),
            EnvReviewer(type=ReviewerType.TEAM, id=100, name="infra", team_org="org"),
        ]
        assert [c[0] for c in platform.calls] == ["get_user_id", "get_team_id"]

    def test_at_prefixed_entries_looked_up_without_at(self, platform):
        resolve_reviewers(platform, ["@alice", "@org/infra"])

        assert platform.calls_to("get_user_id") == [("alice",)]
        assert platform.calls_to("get_team_id") == [("org", "infra")]

    def test_duplicates_are_kept(self, platform):
        result = resolve_reviewers(platform, ["alice", "@alice"])
        assert [r.id for r in result] == [1, 1]

    def test_unknown_user_raises_with_raw_string(self, platform):
        with pytest.raises(ResolutionError) as exc_info:
            resolve_reviewers(platform, ["@ghost"])

        assert 'cannot resolve user "@ghost"' in str(exc_info.value)
        assert "404" in str(exc_info.value)
        assert exc_info.value.reviewer == "@ghost"
        assert isinstance(exc_info.value.__cause__, NotFoundError)

    def test_unknown_team_raises_with_raw_string(self, platform):
        with pytest.raises(ResolutionError, match='cannot resolve team "org/ghosts"'):
            resolve_reviewers(platform, ["org/ghosts"])

    def test_any_platform_failure_is_fatal(self, platform, server_error):
        platform.failures["get_team_id"] = server_error
        with pytest.raises(ResolutionError, match="500"):
            resolve_reviewers(platform, ["org/infra"])

    def test_stops_at_first_failure(self, platform):
        with pytest.raises(ResolutionError):
            resolve_reviewers(platform, ["alice", "ghost", "bob"])

        assert platform.calls_to("get_user_id") == [("alice",), ("ghost",)]

    def test_warns_above_six_reviewers(self, make_platform, caplog):
        platform = make_platform(users={f"user{i}": i for i in range(7)})

        with caplog.at_level(logging.WARNING, logger="setupenv_core.resolver"):
            result = resolve_reviewers(platform, [f"user{i}" for i in range(7)])

        assert len(result) == 7
        assert "at most 6" in caplog.text
