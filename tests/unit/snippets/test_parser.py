from unittest.mock import Mock

import pytest

from snippet_kit.observability import names
from snippet_kit.snippets.errors import GrammarSyntaxError
from snippet_kit.snippets.models import ParsedSnippet
from snippet_kit.snippets.parser import SnippetParser, parse_snippet

FULL = """// Name: greet
// Scope: javascript
// Prefix: hi
// ----
console.log("hi");"""


@pytest.fixture
def parser() -> SnippetParser:
    return SnippetParser()


class TestParse:
    def test_extracts_all_fields(self, parser: SnippetParser) -> None:
        result = parser.parse(FULL)

        assert result == ParsedSnippet(
            name="greet",
            scope="javascript",
            prefix="hi",
            body='console.log("hi");',
        )

    def test_body_keeps_trailing_newline(self, parser: SnippetParser) -> None:
        assert parser.parse(FULL + "\n").body == 'console.log("hi");\n'

    def test_scope_is_optional(self, parser: SnippetParser) -> None:
        text = "// Name: greet\n// Prefix: hi\n// ----\nbody"

        result = parser.parse(text)

        assert result.scope is None
        assert result.prefix == "hi"
        assert result.body == "body"

    def test_body_is_verbatim(self, parser: SnippetParser) -> None:
        body = "    indented\n\n// ----\n${1:x} // Name: not a field\n"
        text = "// Name: a\n// Prefix: b\n// -\n" + body

        assert parser.parse(text).body == body

    def test_crlf_line_endings(self, parser: SnippetParser) -> None:
        text = "// Name: a\r\n// Prefix: b\r\n// --\r\nx\r\ny"

        result = parser.parse(text)

        assert (result.name, result.prefix, result.body) == ("a", "b", "x\r\ny")

    def test_tabs_and_missing_spaces(self, parser: SnippetParser) -> None:
        text = "//\tName\t:\tgreet\n//Prefix:hi\n//---  \nbody"

        result = parser.parse(text)

        assert result.name == "greet"
        assert result.prefix == "hi"

    def test_blank_lines_between_fields(self, parser: SnippetParser) -> None:
        text = "// Name: a\n\n\n// Prefix: b\n// -\n\nbody"

        result = parser.parse(text)

        assert result.prefix == "b"
        assert result.body == "body"

    def test_values_keep_trailing_spaces(self, parser: SnippetParser) -> None:
        text = "// Name: a b  \n// Prefix: x, y\n// -\nbody"

        result = parser.parse(text)

        assert result.name == "a b  "
        assert result.prefix == "x, y"

    def test_module_level_helper(self) -> None:
        assert parse_snippet(FULL).name == "greet"


class TestParseErrors:
    def test_missing_name_points_at_start(self, parser: SnippetParser) -> None:
        with pytest.raises(GrammarSyntaxError) as exc_info:
            parser.parse("hello\n")

        error = exc_info.value
        assert error.location.start.line == 1
        assert error.location.start.column == 1
        assert [e.describe() for e in error.expected] == ['"//"']
        assert error.found == "h"
        assert error.message == 'Expected "//" but "h" found.'

    def test_wrong_first_field(self, parser: SnippetParser) -> None:
        with pytest.raises(GrammarSyntaxError) as exc_info:
            parser.parse("// Scope: js\n// Name: a\n// Prefix: b\n// -\nx")

        error = exc_info.value
        assert (error.location.start.line, error.location.start.column) == (1, 4)
        assert error.location.start.offset == 3
        assert str(error) == 'Expected "Name" or whitespace but "S" found.'

    def test_missing_separator(self, parser: SnippetParser) -> None:
        with pytest.raises(GrammarSyntaxError) as exc_info:
            parser.parse("// Name: a\n// Prefix: b\nbody")

        error = exc_info.value
        assert (error.location.start.line, error.location.start.column) == (3, 1)
        assert error.message == 'Expected "//" or newline but "b" found.'

    def test_missing_body(self, parser: SnippetParser) -> None:
        text = "// Name: a\n// Prefix: b\n// ---\n"

        with pytest.raises(GrammarSyntaxError) as exc_info:
            parser.parse(text)

        error = exc_info.value
        assert error.found is None
        assert error.location.start.offset == len(text)
        assert error.location.end.offset == len(text)
        assert (error.location.start.line, error.location.start.column) == (4, 1)
        assert error.message == (
            "Expected any character or newline but end of input found."
        )

    def test_missing_prefix(self, parser: SnippetParser) -> None:
        with pytest.raises(GrammarSyntaxError) as exc_info:
            parser.parse("// Name: a\n// Scope: js\n// -\nbody")

        error = exc_info.value
        assert (error.location.start.line, error.location.start.column) == (3, 4)
        assert "\"Prefix\"" in error.message

    def test_empty_name_value(self, parser: SnippetParser) -> None:
        with pytest.raises(GrammarSyntaxError) as exc_info:
            parser.parse("// Name:\n// Prefix: b\n// -\nbody")

        assert exc_info.value.location.start.column == 9
        assert "[^\\r,\\n]" in exc_info.value.message

    def test_empty_input(self, parser: SnippetParser) -> None:
        with pytest.raises(GrammarSyntaxError, match='Expected "//" but end of input'):
            parser.parse("")

    def test_source_name_is_reported(self, parser: SnippetParser) -> None:
        with pytest.raises(GrammarSyntaxError) as exc_info:
            parser.parse("x", source="greet.snippet")

        assert exc_info.value.location.source == "greet.snippet"


class TestParserMetrics:
    def test_success_records_latency(self) -> None:
        hook = Mock()

        SnippetParser(metrics_hook=hook).parse(FULL)

        hook.increment.assert_called_once_with(names.PARSE_REQUESTS_TOTAL)
        assert hook.record_latency.call_args.args[0] == names.PARSE_DURATION

    def test_failure_counts_error(self) -> None:
        hook = Mock()

        with pytest.raises(GrammarSyntaxError):
            SnippetParser(metrics_hook=hook).parse("nope")

        hook.increment.assert_any_call(names.PARSE_ERRORS_TOTAL)
        hook.record_latency.assert_not_called()
