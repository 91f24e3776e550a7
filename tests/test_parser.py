"""Unit tests for the placeholder parser."""

from decimal import Decimal
from fractions import Fraction

import pytest

from prompt_sdk import parser
from prompt_sdk.errors import InvalidTemplateError, MissingVariableError, PromptError
from prompt_sdk.parser import DEFAULT_SYNTAX, Placeholder, PlaceholderSyntax

pytestmark = pytest.mark.unit


class TestPlaceholderSyntax:
    """Tests for PlaceholderSyntax."""

    def test_default_is_double_braces(self) -> None:
        assert DEFAULT_SYNTAX.open == "{{"
        assert DEFAULT_SYNTAX.close == "}}"
        assert DEFAULT_SYNTAX.wrap("name") == "{{name}}"

    @pytest.mark.parametrize("open_, close", [("", "}}"), ("{{", "")])
    def test_empty_delimiter_rejected(self, open_: str, close: str) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            PlaceholderSyntax(open_, close)


class TestExtractVariables:
    """Tests for extract_variables and find_placeholders."""

    def test_no_placeholders(self) -> None:
        assert parser.extract_variables("Just text.") == frozenset()

    def test_distinct_names(self) -> None:
        template = "{{a}} {{b}} {{a}} {{c_1}}"
        assert parser.extract_variables(template) == {"a", "b", "c_1"}

    def test_spaces_inside_braces_are_not_variables(self) -> None:
        assert parser.extract_variables("Hi {{ name }}") == frozenset()

    def test_non_identifier_characters_are_ignored(self) -> None:
        assert parser.extract_variables("{{first-name}} {{a.b}} {{ok}}") == {"ok"}

    def test_extra_brace_is_skipped(self) -> None:
        assert parser.extract_variables("{{{name}}}") == {"name"}

    def test_custom_syntax(self) -> None:
        syntax = PlaceholderSyntax("<%", "%>")
        template = "<%user%> said {{not_this}} to <%target%>"
        assert parser.extract_variables(template, syntax) == {"user", "target"}

    def test_find_placeholders_positions(self) -> None:
        tokens = parser.find_placeholders("Hi {{name}}!")
        assert tokens == [Placeholder("name", 3, 11)]


class TestRender:
    """Tests for render."""

    def test_global_substitution(self) -> None:
        assert parser.render("{{x}} and {{x}}", {"x": "A"}, {"x"}) == "A and A"

    def test_missing_variable(self) -> None:
        with pytest.raises(MissingVariableError) as exc_info:
            parser.render("Hello {{name}}", {}, {"name"})
        assert exc_info.value.variable == "name"

    def test_none_counts_as_missing(self) -> None:
        with pytest.raises(MissingVariableError, match="'name'"):
            parser.render("Hello {{name}}", {"name": None}, {"name"})

    def test_missing_variable_is_prompt_error(self) -> None:
        with pytest.raises(PromptError):
            parser.render("{{a}}", {}, {"a"})

    def test_first_missing_in_sorted_order(self) -> None:
        with pytest.raises(MissingVariableError) as exc_info:
            parser.render("{{b}} {{a}}", {}, {"b", "a"})
        assert exc_info.value.variable == "a"

    def test_no_placeholders_returns_template(self) -> None:
        template = "Nothing to see {{ here }}"
        assert parser.render(template, {"here": "x"}, set()) == template

    def test_extra_inputs_ignored(self) -> None:
        assert parser.render("Hi {{name}}", {"name": "Ann", "age": 3}, {"name"}) == "Hi Ann"

    def test_substituted_text_not_rescanned(self) -> None:
        result = parser.render("{{a}} {{b}}", {"a": "{{b}}", "b": "B"}, {"a", "b"})
        assert result == "{{b}} B"

    def test_only_required_variables_replaced(self) -> None:
        result = parser.render("{{a}} {{b}}", {"a": "A", "b": "B"}, {"a"})
        assert result == "A {{b}}"

    def test_scalar_values(self) -> None:
        template = "{{flag}} {{off}} {{count}} {{ratio}}"
        inputs = {"flag": True, "off": False, "count": 1000000, "ratio": 0.5}
        required = parser.extract_variables(template)
        assert parser.render(template, inputs, required) == "true false 1000000 0.5"

    def test_custom_syntax(self) -> None:
        syntax = PlaceholderSyntax("${", "}")
        assert parser.render("Hi ${name}", {"name": "Ann"}, {"name"}, syntax) == "Hi Ann"

    def test_inputs_not_mutated(self) -> None:
        inputs = {"x": 1}
        required = frozenset({"x"})
        first = parser.render("{{x}}", inputs, required)
        second = parser.render("{{x}}", inputs, required)
        assert first == second == "1"
        assert inputs == {"x": 1}


class TestFormatValue:
    """Tests for format_value."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("text", "text"),
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (-42, "-42"),
            (3.0, "3"),
            (2.5, "2.5"),
            (1e-7, "0.0000001"),
            (1e20, "100000000000000000000"),
            (-0.0, "0"),
            (Decimal("1E+5"), "100000"),
            (Decimal("2.50"), "2.5"),
            (Decimal("1E-7"), "0.0000001"),
            (Fraction(1, 4), "0.25"),
            (float("inf"), "Infinity"),
        ],
    )
    def test_canonical_text(self, value: object, expected: str) -> None:
        assert parser.format_value(value) == expected


class TestValidate:
    """Tests for validate."""

    def test_valid_template(self) -> None:
        assert parser.validate("Hello {{name}}") is None

    @pytest.mark.parametrize("template", ["Hi {{}}", "Hi {{   }}", "{{\n}} tail"])
    def test_empty_placeholder(self, template: str) -> None:
        with pytest.raises(InvalidTemplateError, match="empty placeholder"):
            parser.validate(template)

    def test_custom_syntax(self) -> None:
        syntax = PlaceholderSyntax("[[", "]]")
        parser.validate("{{}}", syntax)
        with pytest.raises(InvalidTemplateError):
            parser.validate("[[ ]]", syntax)

    def test_unmatched_delimiters_not_checked(self) -> None:
        parser.validate("Hello {{name")
