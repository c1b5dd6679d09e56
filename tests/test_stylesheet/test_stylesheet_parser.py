"""Tests for the stylesheet parser and specificity scoring."""

import pytest

from stylefold.stylesheet import Declaration, Selector, Stylesheet, calculate_specificity, parse_stylesheet


# ---------------------------------------------------------------------------
# Specificity
# ---------------------------------------------------------------------------


class TestSpecificity:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            (".a.b", 20),
            ("#id", 100),
            ("div", 1),
            ("#id.cls div", 111),
            (".container", 10),
            ("*", 0),
            ("", 0),
        ],
    )
    def test_known_values(self, selector, expected):
        assert calculate_specificity(selector) == expected

    def test_pseudo_class_counts_as_class(self):
        assert calculate_specificity("a:hover") == 11

    def test_pseudo_element_counts_as_element(self):
        assert calculate_specificity("p::before") == 2

    def test_attribute_selector_contents_ignored(self):
        assert calculate_specificity('input[type="text"]') == 11

    def test_nth_child_argument_is_not_an_element(self):
        assert calculate_specificity("li:nth-child(2n+1)") == 11

    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("li:nth-child(odd)", 11),
            ("li:nth-child(even)", 11),
            ("p:lang(en)", 11),
            ("a:not(.x)", 11),
            ("a:not(:nth-child(odd))", 11),
            ("div:not([hidden])", 21),
        ],
    )
    def test_functional_pseudo_class_arguments_not_scored(self, selector, expected):
        assert calculate_specificity(selector) == expected

    def test_selector_list_sums_all_parts(self):
        assert calculate_specificity("h1, h2") == 2

    def test_never_negative(self):
        for text in ["", "{}", "::", "###", "[[]]", "1234"]:
            assert calculate_specificity(text) >= 0


# ---------------------------------------------------------------------------
# Rule parsing
# ---------------------------------------------------------------------------


class TestSingleRule:
    def test_container_rule(self):
        ss = parse_stylesheet(".container { width: 100px; height: 100px; }")
        assert ss.selectors == (Selector(text=".container", index=0, specificity=10),)
        assert ss.declarations == (
            Declaration(name="width", value="100px", selector_index=0),
            Declaration(name="height", value="100px", selector_index=0),
        )

    def test_selector_text_is_trimmed(self):
        ss = parse_stylesheet("\n\t  #main   {color:red}")
        assert ss.selectors[0].text == "#main"

    def test_value_split_on_first_colon_only(self):
        ss = parse_stylesheet(".a { background: url(http://example.com/x.png); }")
        assert ss.declarations[0].name == "background"
        assert ss.declarations[0].value == "url(http://example.com/x.png)"

    def test_last_declaration_without_semicolon(self):
        ss = parse_stylesheet(".a { color: red; margin: 0 }")
        assert [d.name for d in ss.declarations] == ["color", "margin"]


class TestMultipleRules:
    def test_indices_are_dense_and_ordered(self):
        source = """
        .grid { display: grid; gap: 20px; }
        .item { grid-column: span 2; }
        #footer a:hover { color: blue; }
        """
        ss = parse_stylesheet(source)
        assert [s.index for s in ss.selectors] == [0, 1, 2]
        assert [s.text for s in ss.selectors] == [".grid", ".item", "#footer a:hover"]
        assert [d.selector_index for d in ss.declarations] == [0, 0, 1, 2]

    def test_rules_groups_declarations(self):
        ss = parse_stylesheet(".a { x: 1; y: 2; } .b { z: 3; }")
        rules = ss.rules()
        assert [sel.text for sel, _ in rules] == [".a", ".b"]
        assert [d.name for d in rules[0][1]] == ["x", "y"]
        assert [d.name for d in rules[1][1]] == ["z"]


# ---------------------------------------------------------------------------
# Leniency
# ---------------------------------------------------------------------------


class TestLenientParsing:
    def test_fragment_without_colon_dropped(self):
        ss = parse_stylesheet(".a { color red; margin: 0; }")
        assert ss.declarations == (Declaration(name="margin", value="0", selector_index=0),)

    def test_empty_fragments_dropped(self):
        ss = parse_stylesheet(".a { ;; color: red;  ; }")
        assert len(ss.declarations) == 1

    def test_empty_body_is_not_a_rule(self):
        ss = parse_stylesheet(".a {}")
        assert ss.is_empty

    @pytest.mark.parametrize(
        "source",
        ["", "   \n\t  ", "no braces here", "}}}{{{", "color: red;", "{"],
    )
    def test_malformed_input_yields_empty(self, source):
        ss = parse_stylesheet(source)
        assert ss == Stylesheet()

    def test_nested_block_does_not_raise(self):
        ss = parse_stylesheet("@media screen { .a { color: red; } }")
        assert len(ss.selectors) == 1
        for d in ss.declarations:
            assert d.selector_index == 0


class TestDeterminism:
    def test_parse_twice_is_equal(self):
        source = ".a { color: red; } #b .c { margin: 0 auto; padding: 1px; }"
        assert parse_stylesheet(source) == parse_stylesheet(source)


class TestStylesheetDataclass:
    def test_stylesheet_is_frozen(self):
        ss = parse_stylesheet(".a { color: red; }")
        with pytest.raises(AttributeError):
            ss.selectors = ()  # type: ignore[misc]

    def test_selector_is_frozen(self):
        sel = Selector(text="div", index=0, specificity=1)
        with pytest.raises(AttributeError):
            sel.text = "span"  # type: ignore[misc]
