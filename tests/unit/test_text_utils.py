"""텍스트 유틸리티 테스트."""

from unified_search.utils.text_utils import clean_html_text, tokenize, truncate, unique_tokens


class TestTokenize:
    def test_lowercases_and_splits_on_punctuation(self):
        assert tokenize("Rust-Lang: The Book!") == ["rust", "lang", "the", "book"]

    def test_drops_single_character_tokens(self):
        assert tokenize("a b cd e") == ["cd"]

    def test_keeps_underscore_and_digits(self):
        assert tokenize("snake_case v2 42") == ["snake_case", "v2", "42"]

    def test_cjk_runs_are_kept(self):
        assert tokenize("统一 搜索引擎。对比") == ["统一", "搜索引擎", "对比"]

    def test_other_scripts_are_separators(self):
        # 한글은 구분자로 취급되어 사라짐
        assert tokenize("rust 러스트 lang") == ["rust", "lang"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize("!!! ...") == []


class TestUniqueTokens:
    def test_order_preserving_dedup(self):
        assert unique_tokens("rust web rust Web") == ["rust", "web"]


class TestCleanHtmlText:
    def test_strips_tags_and_entities(self):
        assert clean_html_text("Rust <b>Programming</b> &amp; more") == "Rust Programming & more"

    def test_collapses_whitespace(self):
        assert clean_html_text("  a\n\n  b\t c ") == "a b c"

    def test_empty(self):
        assert clean_html_text("") == ""


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("abc", 5) == "abc"

    def test_long_text_cut(self):
        assert truncate("abcdef", 3) == "abc"

    def test_none_safe(self):
        assert truncate(None, 3) == ""
