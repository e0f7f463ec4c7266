"""
Tests for the awk program generator.

The first classes check the generated text. The end-to-end classes run
the program through a real awk (skipped when none is installed), since
the only meaningful check of a generated program is what awk prints.
"""

import subprocess

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fieldprint.backends.awk_generator import (
    PRELUDE,
    ProgramSpec,
    build_program_spec,
    compile_group,
    compile_token,
    generate_program,
    quote_awk_string,
    render_program,
)
from fieldprint.errors import FieldSpecSyntaxError
from fieldprint.tokenizer import tokenize, tokenize_all
from fieldprint.tokens import RangeBound, Token, TokenKind

from conftest import AWK, requires_awk


class TestCompileToken:

    def test_positive_field(self):
        assert compile_token(Token(TokenKind.FIELD_POSITIVE, "3", number=3)) == "$3"

    def test_field_zero(self):
        assert compile_token(Token(TokenKind.FIELD_POSITIVE, "0", number=0)) == "$0"

    def test_negative_field_uses_runtime_nf(self):
        fragment = compile_token(Token(TokenKind.FIELD_NEGATIVE, "-2", number=2))
        assert fragment == "_fp_field_from_end(2)"

    def test_literals_are_quoted(self):
        assert compile_token(Token(TokenKind.LITERAL_NUMBER, "@-1", text="-1")) == '"-1"'
        assert compile_token(Token(TokenKind.LITERAL_ESCAPED_CHAR, "%%", text="%")) == '"%"'
        assert compile_token(Token(TokenKind.PLAIN_TEXT, "pre", text="pre")) == '"pre"'

    def test_block_is_not_interpreted(self):
        token = Token(TokenKind.LITERAL_BLOCK, "@{2 %3}", text="2 %3")
        assert compile_token(token) == '"2 %3"'

    def test_range_bounds(self):
        token = Token(
            TokenKind.RANGE_FIELD,
            "%{2:-1}",
            start=RangeBound(2),
            end=RangeBound(1, from_end=True),
        )
        assert compile_token(token) == "_fp_range(2, NF - 1 + 1)"

    def test_open_range(self):
        token = Token(TokenKind.RANGE_FIELD, "%{:}")
        assert compile_token(token) == "_fp_range(1, NF)"

    def test_invalid_field_raises_with_token_text(self):
        token = Token(TokenKind.INVALID_FIELD, "%{1something}", text="1something")
        with pytest.raises(FieldSpecSyntaxError) as exc_info:
            compile_token(token, "2%{1something}1")
        assert "invalid explicit field specifier" in str(exc_info.value)
        assert "%{1something}" in str(exc_info.value)
        assert exc_info.value.token_text == "%{1something}"


class TestQuoting:

    def test_double_quote(self):
        assert quote_awk_string('say "hi"') == '"say \\"hi\\""'

    def test_backslash_not_doubled_twice(self):
        assert quote_awk_string("a\\b") == '"a\\\\b"'
        assert quote_awk_string('\\"') == '"\\\\\\""'

    def test_newline(self):
        assert quote_awk_string("a\nb") == '"a\\nb"'


class TestAssembly:

    def test_fragments_in_group_are_juxtaposed(self):
        assert compile_group(tokenize("2%1")) == ["$2", "$1"]
        spec = build_program_spec([tokenize("2%1")])
        assert spec.print_arguments() == ['$2 $1 ""']

    def test_groups_become_print_arguments(self):
        spec = build_program_spec(tokenize_all(["1", "3"]))
        assert spec.group_fragments == [["$1"], ["$3"]]
        assert spec.print_arguments() == ["$1", '$3 ""']

    def test_empty_spec_prints_empty_string(self):
        assert ProgramSpec().print_arguments() == ['""']

    def test_empty_argument_keeps_its_column(self):
        spec = build_program_spec(tokenize_all(["1", "", "2"]))
        assert spec.print_arguments() == ["$1", '""', '$2 ""']

    def test_program_layout(self):
        program = generate_program(tokenize_all(["1", "3"]))
        assert program.startswith(PRELUDE)
        assert "OFS = FS" in program
        assert "function _fp_range(" in program
        assert program.rstrip().endswith('{ print $1, $3 "" }')

    def test_render_is_deterministic(self):
        spec = build_program_spec(tokenize_all(["%{2:}", "-1"]))
        assert render_program(spec) == render_program(spec)

    def test_error_aborts_whole_build(self):
        with pytest.raises(FieldSpecSyntaxError):
            build_program_spec(tokenize_all(["1", "2%{1something}1", "3"]))


@requires_awk
class TestEndToEnd:
    """Behaviour on real input, through awk."""

    def test_select_fields(self, p, two_records):
        assert p(two_records, "1", "3") == "a c\nd f\n"

    def test_literal_words(self, p, two_records):
        assert p(two_records, "pre", "1", "post") == "pre a post\npre d post\n"

    def test_negative_indexing(self, p, two_records):
        assert p(two_records, "-1", "-2") == "c b\nf e\n"
        assert p("a b c\n", "-1", "-2", "1") == "c b a\n"

    def test_out_of_range_negative_is_empty(self, p, two_records):
        assert p(two_records, "1", "-200", "-1") == "a  c\nd  f\n"

    @pytest.mark.parametrize(
        "spec,expected",
        [
            ("1@1", "a1\nd1\n"),
            ("1@-1", "a-1\nd-1\n"),
            ("3@{2 %3 anything}1", "c2 %3 anythinga\nf2 %3 anythingd\n"),
            ("2@{-1}1", "b-1a\ne-1d\n"),
            ("2@@@1", "b@1\ne@1\n"),
            ("2%1", "ba\ned\n"),
            ("2%-1", "bc\nef\n"),
            ("3%{2}1", "cba\nfed\n"),
            ("2%{-1}1", "bca\nefd\n"),
            ("2%%%1", "b%a\ne%d\n"),
        ],
    )
    def test_sigil_forms(self, p, two_records, spec, expected):
        assert p(two_records, spec) == expected

    def test_attached_option_value(self, p):
        assert p("a.b.c\nd.e.f\n", "-F.", "3") == "c\nf\n"

    def test_separate_option_value_with_double_dash(self, p):
        assert p("a.b.c\nd.e.f\n", "-F", ".", "--", "3") == "c\nf\n"

    def test_ofs_follows_fs(self, p):
        assert p("a.b.c\nd.e.f\n", "-F", ".", "--", "1", "3") == "a.c\nd.f\n"

    def test_explicit_ofs_is_kept(self, p):
        assert p("a.b.c\n", "-F", ".", "-v", "OFS=-", "--", "1", "3") == "a-c\n"

    def test_ranges_in_one_group(self, p):
        assert p("a b c\n", "%{2:3}%{1:2}") == "b ca b\n"

    def test_range_sits_in_place(self, p):
        assert p("a b c\n", "<%{2:}>") == "<b c>\n"
        assert p("a b c\n", "1", "%{2:3}", "x") == "a b c x\n"

    @pytest.mark.parametrize(
        "spec,expected",
        [
            ("%{:}", "a b c d"),
            ("%{2:}", "b c d"),
            ("%{:2}", "a b"),
            ("%{-2:}", "c d"),
            ("%{-3:-2}", "b c"),
            ("%{0:2}", "a b"),
            ("%{3:99}", "c d"),
            ("%{3:2}", ""),
            ("%{5:9}", ""),
            ("%{-9:-8}", ""),
            ("%{-1:-2}", ""),
        ],
    )
    def test_range_clamping(self, p, spec, expected):
        assert p("a b c d\n", "[" + spec + "]") == f"[{expected}]\n"

    def test_range_uses_active_separator(self, p):
        assert p("a:b:c\n", "-F:", "%{1:2}", "-1") == "a:b:c\n"

    def test_ragged_records(self, p):
        assert p("a\na b\na b c\n", "-2", "%{2:}") == " \na b\nb b c\n"

    def test_no_spec_prints_empty_lines(self, p, two_records):
        assert p(two_records, "-F,") == "\n\n"

    @pytest.mark.parametrize("nf", [1, 2, 3, 5])
    @pytest.mark.parametrize("n", [1, 2, 3, 4])
    def test_negative_field_property(self, p, nf, n):
        fields = [f"f{i}" for i in range(1, nf + 1)]
        expected = "" if nf < n else fields[nf - n]
        assert p(" ".join(fields) + "\n", f"[%{{-{n}}}]") == f"[{expected}]\n"

    @pytest.mark.parametrize("n", [1, 2, 3])
    def test_positive_field_property(self, p, n):
        assert p("x y z\n", str(n)) == ["x", "y", "z"][n - 1] + "\n"


@requires_awk
@settings(max_examples=30, deadline=None)
@given(st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=1, max_size=20))
def test_plain_text_prints_back_unchanged(text):
    program = render_program(ProgramSpec(group_fragments=[[quote_awk_string(text)]]))
    result = subprocess.run([AWK, program], input="x\n", capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
    assert result.stdout == text + "\n"
