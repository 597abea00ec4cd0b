from curl2py.parser.detect import is_curl_command, normalize_command
from curl2py.parser.tokenizer import tokenize


class TestNormalizeCommand:
    def test_joins_continued_lines(self):
        raw = "curl \\\n  -X  POST \\\r\n  https://x.com"
        assert normalize_command(raw) == "curl -X POST https://x.com"

    def test_collapses_whitespace_and_trims(self):
        assert normalize_command("  curl\t\thttps://x.com\n\n") == "curl https://x.com"


class TestIsCurlCommand:
    def test_case_insensitive_prefix(self):
        assert is_curl_command("CURL https://x.com")

    def test_bare_curl(self):
        assert is_curl_command("curl")

    def test_rejects_other_programs(self):
        assert not is_curl_command("wget https://x.com")
        assert not is_curl_command("curlx https://x.com")
        assert not is_curl_command("")


class TestTokenize:
    def test_splits_on_spaces(self):
        assert tokenize("curl -X GET https://x.com") == ["curl", "-X", "GET", "https://x.com"]

    def test_quoted_space_kept(self):
        assert tokenize("curl -H 'Accept: text/html'") == ["curl", "-H", "Accept: text/html"]

    def test_single_quote_inside_double_quotes(self):
        assert tokenize('curl -d "it\'s"') == ["curl", "-d", "it's"]

    def test_double_quote_inside_single_quotes(self):
        assert tokenize("curl -d 'say \"hi\"'") == ["curl", "-d", 'say "hi"']

    def test_backslash_escapes_space(self):
        assert tokenize("curl a\\ b") == ["curl", "a b"]

    def test_backslash_escapes_quote_inside_quotes(self):
        assert tokenize('curl -d "{\\"a\\": 1}"') == ["curl", "-d", '{"a": 1}']

    def test_adjacent_quoted_parts_join(self):
        assert tokenize("curl 'a'\"b\"c") == ["curl", "abc"]

    def test_empty_quotes_produce_no_token(self):
        assert tokenize("curl '' https://x.com") == ["curl", "https://x.com"]

    def test_unterminated_quote_flushes_at_end(self):
        assert tokenize("curl 'a b") == ["curl", "a b"]
