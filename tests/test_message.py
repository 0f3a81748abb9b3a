"""
Unit tests for the commit message model and header overrides.

Run with:
    pytest tests/test_message.py -v
"""

import pytest

from smartcommit import COMMIT_TYPE_NAMES
from smartcommit.message import (
    BREAKING_CHANGE_FOOTER,
    ConventionalCommit,
    limit_title,
    override_scope,
    override_type,
    parse_commit_type,
    parse_header,
    truncate_title,
)


# ---------------------------------------------------------------------------
# ConventionalCommit.format()
# ---------------------------------------------------------------------------

class TestFormat:

    def test_scope_and_body(self):
        commit = ConventionalCommit(
            type="fix", scope="api", title="handle nil pointer",
            body=["guard nil input"], breaking_change=False,
        )
        assert commit.format() == "fix(api): handle nil pointer\n\n- guard nil input\n"

    def test_no_scope_no_body(self):
        commit = ConventionalCommit(type="docs", title="describe config precedence")
        assert commit.format() == "docs: describe config precedence"

    def test_multiple_body_lines_keep_order(self):
        commit = ConventionalCommit(type="feat", scope="cli", title="add copy flag", body=["first", "second"])
        assert commit.format() == "feat(cli): add copy flag\n\n- first\n- second\n"

    def test_breaking_change_footer(self):
        commit = ConventionalCommit(type="refactor", title="drop v1 endpoints", body=["remove /v1"], breaking_change=True)
        assert commit.format() == (
            "refactor: drop v1 endpoints\n\n- remove /v1\n\n" + BREAKING_CHANGE_FOOTER
        )

    def test_breaking_change_without_body(self):
        commit = ConventionalCommit(type="feat", title="switch to v2 api", breaking_change=True)
        assert commit.format() == "feat: switch to v2 api\n\n" + BREAKING_CHANGE_FOOTER
        assert commit.format().split("\n")[1] == ""

    def test_format_is_pure(self):
        commit = ConventionalCommit(type="fix", scope="db", title="close cursor", body=["x"])
        assert commit.format() == commit.format()


# ---------------------------------------------------------------------------
# parse_commit_type / truncate_title
# ---------------------------------------------------------------------------

class TestParseCommitType:

    @pytest.mark.parametrize("candidate, expected", [
        ("FEAT ", "feat"),
        ("  fix", "fix"),
        ("Revert", "revert"),
        ("ci", "ci"),
        ("bogus", "chore"),
        ("", "chore"),
        ("feat!", "chore"),
    ])
    def test_lookup(self, candidate, expected):
        assert parse_commit_type(candidate) == expected

    @pytest.mark.parametrize("name", COMMIT_TYPE_NAMES)
    def test_every_type_recognized(self, name):
        assert parse_commit_type(name.upper()) == name


class TestTruncateTitle:

    def test_short_title_unchanged(self):
        assert truncate_title("add flag", 72) == "add flag"

    def test_exact_length_unchanged(self):
        assert truncate_title("abcdefghij", 10) == "abcdefghij"

    def test_long_title_cut_with_ellipsis(self):
        result = truncate_title("a title exceeding ten chars", 10)
        assert result == "a title..."
        assert len(result) == 10

    def test_minimum_length(self):
        assert truncate_title("abcdef", 4) == "a..."

    @pytest.mark.parametrize("max_len", [3, 2, 0, -1])
    def test_degenerate_max_len_rejected(self, max_len):
        with pytest.raises(ValueError):
            truncate_title("abcdef", max_len)

    def test_degenerate_max_len_ok_when_title_fits(self):
        assert truncate_title("ab", 3) == "ab"


# ---------------------------------------------------------------------------
# parse_header / from_message
# ---------------------------------------------------------------------------

class TestParseHeader:

    @pytest.mark.parametrize("commit", [
        ConventionalCommit(type="fix", scope="api", title="handle nil pointer", body=["guard nil input"]),
        ConventionalCommit(type="chore", title="bump deps"),
        ConventionalCommit(type="feat", scope="ui", title="add button", breaking_change=True),
    ])
    def test_round_trip(self, commit):
        header = parse_header(commit.format().split("\n")[0])
        assert (header.type, header.scope, header.title) == (commit.type, commit.scope, commit.title)

    def test_breaking_marker(self):
        header = parse_header("feat(api)!: remove v1")
        assert header.breaking is True
        assert header.scope == "api"
        assert header.title == "remove v1"

    @pytest.mark.parametrize("line", ["just some words", "", "(scope): no type"])
    def test_not_conventional(self, line):
        assert parse_header(line) is None

    def test_from_message(self):
        message = (
            "feat(auth): add token refresh\n\n"
            "- refresh before expiry\n"
            "- store token in cookie\n\n"
            "BREAKING CHANGE: This commit contains breaking changes"
        )
        commit = ConventionalCommit.from_message(message)
        assert commit.type == "feat"
        assert commit.scope == "auth"
        assert commit.title == "add token refresh"
        assert commit.body == ["refresh before expiry", "store token in cookie"]
        assert commit.breaking_change is True

    def test_from_message_normalizes_type(self):
        commit = ConventionalCommit.from_message("Feature: something")
        assert commit.type == "chore"

    def test_from_message_rejects_free_text(self):
        assert ConventionalCommit.from_message("Updated some files") is None


# ---------------------------------------------------------------------------
# override_type / override_scope / limit_title
# ---------------------------------------------------------------------------

class TestOverrideType:

    def test_with_scope(self):
        assert override_type("feat(ui): add button\n\n- x", "fix") == "fix(ui): add button\n\n- x"

    def test_without_scope(self):
        assert override_type("chore: cleanup", "refactor") == "refactor: cleanup"

    def test_unrecognized_header_unchanged(self):
        message = "Add a button to the toolbar\n\n- x: y"
        assert override_type(message, "feat") == message

    def test_empty_message_unchanged(self):
        assert override_type("", "feat") == ""

    def test_only_first_line_touched(self):
        message = "feat: add thing\n\nchore: not a header\n- (note): keep"
        assert override_type(message, "fix") == "fix: add thing\n\nchore: not a header\n- (note): keep"


class TestOverrideScope:

    def test_adds_scope(self):
        assert override_scope("chore: cleanup", "build") == "chore(build): cleanup"

    def test_replaces_scope(self):
        assert override_scope("feat(ui): add button\n\n- x", "api") == "feat(api): add button\n\n- x"

    def test_keeps_breaking_marker(self):
        assert override_scope("feat(ui)!: drop prop", "core") == "feat(core)!: drop prop"

    def test_unrecognized_header_unchanged(self):
        message = "Add a button"
        assert override_scope(message, "ui") == message

    def test_added_scope_matches_format(self):
        overridden = override_scope("fix: handle nil pointer", "api")
        expected = ConventionalCommit(type="fix", scope="api", title="handle nil pointer").format()
        assert overridden == expected

    def test_type_then_scope(self):
        message = override_scope(override_type("docs: explain flags\n\n- a", "feat"), "cli")
        assert message == "feat(cli): explain flags\n\n- a"


class TestLimitTitle:

    def test_truncates_title_only(self):
        message = "feat(cli): add a very long title that keeps going\n\n- body"
        assert limit_title(message, 10) == "feat(cli): add a v...\n\n- body"

    def test_short_title_unchanged(self):
        message = "fix: typo\n\n- body"
        assert limit_title(message, 72) == message

    def test_free_text_unchanged(self):
        assert limit_title("Some long free text line", 5) == "Some long free text line"
