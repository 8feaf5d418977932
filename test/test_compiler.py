"""Tests for the author name query compiler."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AuthorSearch.core.compiler import compile_author_query, tokenize
from AuthorSearch.core.query import FuzzyOptions


class TestTokenize(unittest.TestCase):
    def test_splits_on_whitespace_and_punctuation(self) -> None:
        self.assertEqual(tokenize("henry f. beecher"), ["henry", "f", "beecher"])

    def test_keeps_order_and_lowercases(self) -> None:
        self.assertEqual(tokenize("Ward, Henry"), ["ward", "henry"])

    def test_keeps_digits_and_non_ascii_letters(self) -> None:
        self.assertEqual(tokenize("josé martí 2nd"), ["josé", "martí", "2nd"])

    def test_underscore_separates_words(self) -> None:
        self.assertEqual(tokenize("a_b"), ["a", "b"])

    def test_empty(self) -> None:
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("  .,- "), [])


class TestCompileAuthorQuery(unittest.TestCase):
    def test_autocomplete_splits_last_word(self) -> None:
        clause = compile_author_query("henry ward beech", autocomplete=True)
        assert clause is not None
        self.assertEqual(len(clause.must), 2)
        prefix, fuzzy = clause.must
        self.assertTrue(prefix.prefix_match)
        self.assertEqual(prefix.terms, "beech")
        self.assertEqual(fuzzy.terms, ("henry", "ward"))
        self.assertEqual(fuzzy.fuzzy, FuzzyOptions(max_edits=1, prefix_length=2))
        self.assertEqual(clause.should, ())

    def test_without_autocomplete_all_words_are_fuzzy(self) -> None:
        clause = compile_author_query("henry ward", autocomplete=False)
        assert clause is not None
        self.assertEqual(len(clause.must), 1)
        self.assertFalse(clause.must[0].prefix_match)
        self.assertEqual(clause.must[0].terms, ("henry", "ward"))

    def test_single_word_autocomplete_has_only_prefix_clause(self) -> None:
        clause = compile_author_query("h", autocomplete=True)
        assert clause is not None
        self.assertEqual(len(clause.must), 1)
        self.assertEqual(clause.must[0].terms, "h")
        self.assertTrue(clause.must[0].prefix_match)

    def test_no_words_returns_none(self) -> None:
        self.assertIsNone(compile_author_query("   ", autocomplete=True))
        self.assertIsNone(compile_author_query("...", autocomplete=False))

    def test_fields_and_fuzzy_options(self) -> None:
        clause = compile_author_query(
            "ann lee",
            autocomplete=False,
            fields=("name",),
            fuzzy=FuzzyOptions(max_edits=2, prefix_length=0),
        )
        assert clause is not None
        self.assertEqual(clause.must[0].fields, ("name",))
        self.assertEqual(clause.must[0].fuzzy, FuzzyOptions(max_edits=2, prefix_length=0))

    def test_to_dict_shape(self) -> None:
        clause = compile_author_query("henry ward beech", autocomplete=True)
        assert clause is not None
        self.assertEqual(
            clause.to_dict(),
            {
                "must": [
                    {"fields": ["name", "aka"], "terms": "beech", "prefixMatch": True},
                    {
                        "fields": ["name", "aka"],
                        "terms": ["henry", "ward"],
                        "fuzzy": {"maxEdits": 1, "prefixLength": 2},
                    },
                ],
                "should": [],
            },
        )


if __name__ == "__main__":
    unittest.main()
