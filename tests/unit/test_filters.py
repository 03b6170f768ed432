"""Tests for name filters."""

import pytest

from cadence.testing.filters import KeywordMatcher, filter_tests, glob_to_regex


class TestGlob:
    def test_star_matches_any_run(self):
        pattern = glob_to_regex("db.*insert*")

        assert pattern.fullmatch("db.bulk insert rows")
        assert pattern.fullmatch("db.insert")
        assert not pattern.fullmatch("cache.insert")

    def test_other_characters_are_literal(self):
        pattern = glob_to_regex("a.b?[c]")

        assert pattern.fullmatch("a.b?[c]")
        assert not pattern.fullmatch("aXb?[c]")


class TestFilterTests:
    def test_no_arguments_keep_everything(self):
        keep = filter_tests("suite", [])

        assert keep("anything")

    def test_only_matches_full_name(self):
        keep = filter_tests("math", ["-o", "math.add*"])

        assert keep("adds")
        assert not keep("subtracts")

    def test_only_is_repeatable(self):
        keep = filter_tests("math", ["--only", "math.adds", "--only=math.subtracts"])

        assert keep("adds")
        assert keep("subtracts")
        assert not keep("divides")

    def test_only_pattern_for_other_suite_excludes_all(self):
        keep = filter_tests("math", ["-o", "strings.*"])

        assert not keep("adds")

    def test_keyword_combines_with_only(self):
        keep = filter_tests("math", ["-o", "math.*", "-k", "not slow"])

        assert keep("adds")
        assert not keep("slow division")

    def test_keyword_ignores_suite_name(self):
        keep = filter_tests("math", ["-k", "math"])

        assert not keep("subtracts")
        assert keep("math on floats")

    def test_negated_keyword_ignores_suite_name(self):
        keep = filter_tests("math", ["-k", "not math"])

        assert keep("adds")

    def test_unrelated_arguments_are_ignored(self):
        keep = filter_tests("math", ["--verbose", "positional"])

        assert keep("adds")

    def test_invalid_keyword_raises(self):
        with pytest.raises(ValueError):
            filter_tests("math", ["-k", "adds and"])


class TestKeywordMatcher:
    @pytest.mark.parametrize(
        ("expression", "text", "expected"),
        [
            ("db", "suite.db insert", True),
            ("db and insert", "suite.db insert", True),
            ("db and not insert", "suite.db insert", False),
            ("cache or insert", "suite.db insert", True),
            ("not (cache or db)", "suite.db insert", False),
            ("(cache or db) and insert", "suite.db insert", True),
            ("'db insert'", "suite.db insert", True),
        ],
    )
    def test_expressions(self, expression, text, expected):
        assert KeywordMatcher(expression).match(text) is expected

    @pytest.mark.parametrize("expression", ["(db", "db)", "", "db or", "not"])
    def test_malformed_expressions(self, expression):
        with pytest.raises(ValueError):
            KeywordMatcher(expression)
