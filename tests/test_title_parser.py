"""Unit tests for pull request URL and title parsing."""

import pytest

from pr_title_labeler.models import TitleType
from pr_title_labeler.services.title_parser import parse_title, parse_url


class TestParseUrl:
    """Test pull request URL parsing."""

    def test_parse_valid_url(self) -> None:
        """Test parsing a regular pull request URL."""
        reference = parse_url("https://github.com/acme/widgets/pull/42")

        assert reference is not None
        assert reference.owner == "acme"
        assert reference.repository == "widgets"
        assert reference.number == 42

    def test_parse_url_strips_whitespace(self) -> None:
        """Test surrounding whitespace is ignored."""
        reference = parse_url("  https://github.com/acme/widgets/pull/7\n")

        assert reference is not None
        assert reference.number == 7

    def test_parse_url_with_trailing_path(self) -> None:
        """Test sub-pages of a pull request still resolve to the pull request."""
        reference = parse_url("https://github.com/acme/widgets/pull/42/files")

        assert reference is not None
        assert reference.repository == "widgets"
        assert reference.number == 42

    def test_parse_url_custom_host(self) -> None:
        """Test parsing a URL from a GitHub Enterprise host."""
        url = "https://github.example.com/acme/widgets/pull/3"

        assert parse_url(url) is None
        assert parse_url(url, host="github.example.com").owner == "acme"

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "   ",
            "random text",
            "http://github.com/acme/widgets/pull/42",
            "https://gitlab.com/acme/widgets/pull/42",
            "https://github.com/acme/widgets/issues/42",
            "https://github.com/acme/widgets/pull/",
            "https://github.com/acme/widgets/pull/abc",
            "https://github.com/acme/widgets/pull/42abc",
            "https://github.com/acme/widgets/pull/0",
            "https://github.com//widgets/pull/42",
            "https://github.com/acme/team/widgets/pull/42",
            "https://github.com.evil.com/acme/widgets/pull/42",
        ],
    )
    def test_parse_invalid_url(self, url: str | None) -> None:
        """Test non pull request URLs are rejected."""
        assert parse_url(url) is None


class TestParseTitle:
    """Test pull request title classification."""

    def test_parse_fix_title(self) -> None:
        """Test a fix title."""
        classification = parse_title("fix(login): handle expired sessions")

        assert classification is not None
        assert classification.type == TitleType.FIX
        assert classification.feature == "login"

    def test_parse_title_without_description(self) -> None:
        """Test a title consisting only of the prefix."""
        classification = parse_title("feature(oauth):")

        assert classification is not None
        assert classification.type == TitleType.FEATURE
        assert classification.feature == "oauth"

    def test_parse_title_stops_at_first_closing_paren(self) -> None:
        """Test the feature ends at the first closing parenthesis before a colon."""
        classification = parse_title("chore(build): bump deps (again):")

        assert classification.feature == "build"

    def test_parse_title_feature_with_spaces(self) -> None:
        """Test a multi-word feature."""
        assert parse_title("fix(user settings): typo").feature == "user settings"

    @pytest.mark.parametrize(
        "title",
        [
            None,
            "",
            "random text",
            "update readme",
            "Fix(login): wrong case",
            "docs(readme): unknown type",
            "fix(): empty feature",
            "fix(login) missing colon",
            "fix login: missing parentheses",
            "hotfix(db): type is the tail of a longer word",
            "prefix(x): y",
            "bugfix(api): retry",
        ],
    )
    def test_parse_title_not_following_guidelines(self, title: str | None) -> None:
        """Test titles that do not follow the convention."""
        assert parse_title(title) is None

    def test_labels_from_classification(self) -> None:
        """Test the label set derived from a classification."""
        classification = parse_title("chore(build): update deps")

        assert classification.labels() == ["type: chore", "feature: build", "Review PR"]

    @pytest.mark.parametrize(
        ("title", "expected_type"),
        [
            ("[fix(db): z]", TitleType.FIX),
            ("WIP fix(db): z", TitleType.FIX),
            ("feature(ui): z", TitleType.FEATURE),
        ],
    )
    def test_parse_title_type_after_non_letter(self, title: str, expected_type: TitleType) -> None:
        """Test a type preceded by a non-letter is still recognised."""
        assert parse_title(title).type == expected_type
