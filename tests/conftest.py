"""
Pytest configuration and fixtures for react_agent tests.
"""

import pytest

from react_agent.core.primitives import Tool


@pytest.fixture
def echo_calls():
    return []


@pytest.fixture
def echo_tool(echo_calls):
    def _echo(tool_input: str) -> str:
        echo_calls.append(tool_input)
        return f"echo: {tool_input}"

    return Tool(name="echo", description="Repeats its input", func=_echo)


@pytest.fixture
def failing_tool():
    def _fail(tool_input: str) -> str:
        raise RuntimeError("backend unavailable")

    return Tool(name="flaky", description="Always fails", func=_fail)
