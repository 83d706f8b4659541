"""
Tests for the chat output parser and JSON repair helpers.
"""

import pytest

from react_agent.core.agent import parsers
from react_agent.core.agent.errors import OutputParserError
from react_agent.core.agent.parsers import ChatOutputParser, parse_json_markdown, parse_partial_json
from react_agent.core.primitives import AgentAction, AgentFinish


def _fenced(body: str, tag: str = "json") -> str:
    return f"Thought: let me decide.\n```{tag}\n{body}\n```"


class TestParsePartialJson:
    """Tests for the truncation repair scan."""

    def test_valid_json_is_returned_directly(self):
        assert parse_partial_json('{"a": 1}') == {"a": 1}

    def test_closes_missing_brace(self):
        assert parse_partial_json('{"action": "Foo", "action_input": "bar"') == {
            "action": "Foo",
            "action_input": "bar",
        }

    def test_closes_nested_structures_in_order(self):
        assert parse_partial_json('{"a": [1, {"b": [2') == {"a": [1, {"b": [2]}]}

    def test_brackets_inside_strings_are_ignored(self):
        assert parse_partial_json('{"a": "}]{[", "b": 1') == {"a": "}]{[", "b": 1}

    def test_escaped_quote_does_not_end_string(self):
        assert parse_partial_json('{"a": "say \\"hi\\" {"') == {"a": 'say "hi" {'}

    def test_escaped_backslash_before_quote_ends_string(self):
        assert parse_partial_json('{"a": "dir\\\\"') == {"a": "dir\\"}

    def test_mismatched_closer_yields_nothing(self):
        assert parse_partial_json('{"a": [1,2}') is parsers._NOT_FOUND

    def test_unbalanced_closer_yields_nothing(self):
        assert parse_partial_json('{"a": 1}}') is parsers._NOT_FOUND

    def test_unrepairable_text_yields_nothing(self):
        assert parse_partial_json("not json at all") is parsers._NOT_FOUND

    def test_null_is_a_value(self):
        assert parse_partial_json("null") is None


class TestParseJsonMarkdown:
    """Tests for fenced block extraction."""

    def test_extracts_json_tagged_block(self):
        assert parse_json_markdown(_fenced('{"a": 1}')) == {"a": 1}

    def test_untagged_block_is_not_structured(self):
        assert parse_json_markdown(_fenced('{"a": 1}', tag="")) is parsers._NOT_FOUND

    def test_untagged_block_without_closing_fence_is_not_structured(self):
        assert parse_json_markdown('Here:\n```\n{"a": 1') is parsers._NOT_FOUND

    def test_first_block_wins(self):
        text = _fenced('{"a": 1}') + "\n" + _fenced('{"a": 2}')
        assert parse_json_markdown(text) == {"a": 1}

    def test_no_block(self):
        assert parse_json_markdown('{"a": 1}') is parsers._NOT_FOUND

    def test_block_without_closing_fence_is_repaired(self):
        text = 'Sure.\n```json\n{"action": "Search", "action_input": "weather"'
        assert parse_json_markdown(text) == {"action": "Search", "action_input": "weather"}


class TestChatOutputParser:
    """Tests for ChatOutputParser.parse."""

    def setup_method(self):
        self.parser = ChatOutputParser()

    def test_final_answer(self):
        text = _fenced('{"action": "Final Answer", "action_input": "It is 42."}')

        event = self.parser.parse(text)

        assert event == AgentFinish(output="It is 42.")

    def test_tool_action_keeps_original_text_as_log(self):
        text = _fenced('{"action": "Calculator", "action_input": "2 + 2"}')

        event = self.parser.parse(text)

        assert event == [AgentAction(tool="Calculator", tool_input="2 + 2", log=text)]

    def test_plain_prose_is_final_answer(self):
        text = "The capital of France is Paris."

        assert self.parser.parse(text) == AgentFinish(output=text)

    def test_prose_with_untagged_code_block_is_final_answer(self):
        text = "Here are the numbers you asked for:\n```\n[1, 2, 3]\n```"

        assert self.parser.parse(text) == AgentFinish(output=text)

    def test_plain_prose_passthrough_is_idempotent(self):
        text = "No structure here."
        first = self.parser.parse(text)

        assert self.parser.parse(first.output) == first

    def test_truncated_block_matches_closed_equivalent(self):
        truncated = self.parser.parse(_fenced('{"action": "Foo", "action_input": "bar"'))
        closed = self.parser.parse(_fenced('{"action": "Foo", "action_input": "bar"}'))

        assert [(a.tool, a.tool_input) for a in truncated] == [(a.tool, a.tool_input) for a in closed]
        assert truncated[0].tool == "Foo"
        assert truncated[0].tool_input == "bar"

    def test_mismatched_closer_falls_back_to_raw_text(self):
        text = _fenced('{"a": [1,2}')

        assert self.parser.parse(text) == AgentFinish(output=text)

    def test_wrong_field_type_is_hard_error(self):
        with pytest.raises(OutputParserError):
            self.parser.parse(_fenced('{"action": "Foo", "action_input": 3}'))

    def test_missing_fields_is_hard_error(self):
        with pytest.raises(OutputParserError):
            self.parser.parse(_fenced('{"tool": "Foo", "input": "bar"}'))

    def test_non_object_value_is_hard_error(self):
        with pytest.raises(OutputParserError):
            self.parser.parse(_fenced('["Foo", "bar"]'))

    def test_extra_fields_are_ignored(self):
        event = self.parser.parse(_fenced('{"action": "Foo", "action_input": "bar", "thought": "hm"}'))

        assert event[0].tool == "Foo"

    def test_format_instructions_mention_final_answer(self):
        assert '"action": "Final Answer"' in self.parser.get_format_instructions()
