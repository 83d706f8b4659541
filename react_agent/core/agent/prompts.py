"""
Prompt templates for the conversational and tool-calling agents.

Placeholders use `string.Template` syntax (`$name`).
"""

from __future__ import annotations

from textwrap import dedent
from typing import Sequence

from ...chains.base import AGENT_SCRATCHPAD_KEY, CHAT_HISTORY_KEY
from ...chains.prompt import (
    ChatPromptTemplate,
    HumanMessageTemplate,
    MessagesPlaceholder,
    render_template,
)
from ..primitives.messages import system_message
from ..primitives.tools import Tool


FINAL_ANSWER_ACTION = "Final Answer"

PREFIX = dedent(
    """
    Assistant is designed to be able to assist with a wide range of tasks, from answering simple questions to providing in-depth explanations and discussions on a wide range of topics. As a language model, Assistant is able to generate human-like text based on the input it receives, allowing it to engage in natural-sounding conversations and provide responses that are coherent and relevant to the topic at hand.

    Assistant is constantly learning and improving, and its capabilities are constantly evolving. It is able to process and understand large amounts of text, and can use this knowledge to provide accurate and informative responses to a wide range of questions. Additionally, Assistant is able to generate its own text based on the input it receives, allowing it to engage in discussions and provide explanations and descriptions on a wide range of topics.

    Overall, Assistant is a powerful system that can help with a wide range of tasks and provide valuable insights and information on a wide range of topics. Whether you need help with a specific question or just want to have a conversation about a particular topic, Assistant is here to assist.
    """
).strip()

FORMAT_INSTRUCTIONS = dedent(
    """
    RESPONSE FORMAT INSTRUCTIONS
    ----------------------------

    When responding to me, please output a response in one of two formats:

    **Option 1:**
    Use this if you want the human to use a tool.
    Markdown code snippet formatted in the following schema:

    ```json
    {
        "action": string, \\\\ The action to take. Must be one of $tool_names
        "action_input": string \\\\ The input to the action
    }
    ```

    **Option #2:**
    Use this if you want to respond directly to the human. Markdown code snippet formatted in the following schema:

    ```json
    {
        "action": "Final Answer",
        "action_input": string \\\\ You should put what you want to return to use here
    }
    ```
    """
).strip()

SUFFIX = dedent(
    """
    TOOLS
    ------
    Assistant can ask the user to use tools to look up information that may be helpful in answering the users original question. The tools the human can use are:

    $tools

    $format_instructions

    USER'S INPUT
    Here is the user's input (remember to respond with a markdown code snippet of a json blob with a single action, and NOTHING else):

    $input
    """
).strip()

TEMPLATE_TOOL_RESPONSE = dedent(
    """
    TOOL RESPONSE:
    ---------------------
    $observation

    USER'S INPUT
    --------------------

    Okay, so what is the response to my last comment? If using information obtained from the tools you must mention it explicitly without mentioning the tool names - I have forgotten all TOOL RESPONSES! Remember to respond with a markdown code snippet of a json blob with a single action, and NOTHING else.
    """
).strip()

TOOL_CALLING_PREFIX = dedent(
    """
    You are a helpful assistant. Use the provided tools when they help answer the user's request.
    When you have enough information, reply to the user directly without calling any tool.
    """
).strip()


def describe_tools(tools: Sequence[Tool]) -> str:
    return "\n".join(f"> {tool.name}: {tool.description}" for tool in tools)


def format_instructions(tools: Sequence[Tool]) -> str:
    tool_names = ", ".join(tool.name for tool in tools)
    return render_template(FORMAT_INSTRUCTIONS, {"tool_names": tool_names})


def format_tool_response(observation: str) -> str:
    return render_template(TEMPLATE_TOOL_RESPONSE, {"observation": observation})


def build_conversational_prompt(
    tools: Sequence[Tool],
    *,
    prefix: str = PREFIX,
    suffix: str = SUFFIX,
) -> ChatPromptTemplate:
    """System prefix, history, suffix with tool listing, then the scratchpad."""
    return ChatPromptTemplate(
        [
            system_message(prefix),
            MessagesPlaceholder(CHAT_HISTORY_KEY, optional=True),
            HumanMessageTemplate(
                suffix,
                partial_variables={
                    "tools": describe_tools(tools),
                    "format_instructions": format_instructions(tools),
                },
            ),
            MessagesPlaceholder(AGENT_SCRATCHPAD_KEY),
        ]
    )


def build_tool_calling_prompt(prefix: str = TOOL_CALLING_PREFIX) -> ChatPromptTemplate:
    return ChatPromptTemplate(
        [
            system_message(prefix),
            MessagesPlaceholder(CHAT_HISTORY_KEY, optional=True),
            HumanMessageTemplate("$input"),
            MessagesPlaceholder(AGENT_SCRATCHPAD_KEY),
        ]
    )
