"""
Basic usage example for the ReAct agent framework.
"""

import ast
import logging
import operator

from react_agent import AgentExecutor, ConversationalAgent, ExecutorConfig, SimpleMemory, Tool
from react_agent.llm import create_chat_completion_client

_OPERATORS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.USub: operator.neg,
}


def _evaluate(node):
    if isinstance(node, ast.Expression):
        return _evaluate(node.body)
    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)):
        return node.value
    if isinstance(node, ast.BinOp) and type(node.op) in _OPERATORS:
        return _OPERATORS[type(node.op)](_evaluate(node.left), _evaluate(node.right))
    if isinstance(node, ast.UnaryOp) and type(node.op) in _OPERATORS:
        return _OPERATORS[type(node.op)](_evaluate(node.operand))
    raise ValueError(f"Unsupported expression: {ast.dump(node)}")


def calculator(expression: str) -> str:
    return str(_evaluate(ast.parse(expression, mode="eval")))


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    llm = create_chat_completion_client("deepseek", model="deepseek-chat")
    agent = ConversationalAgent.from_llm(
        llm,
        tools=[
            Tool(
                name="Calculator",
                description="Evaluates arithmetic expressions such as (24 + 18) * 0.75",
                func=calculator,
            )
        ],
    )
    executor = AgentExecutor(agent, config=ExecutorConfig(max_iterations=5), memory=SimpleMemory())
    result = executor.call({"input": "What is (24 + 18) * 0.75? Explain each step."})
    print("Outcome:", result.outcome.value)
    print("Final answer:", result.output)
    follow_up = executor.invoke({"input": "Now double that number."})
    print("Follow-up:", follow_up)


if __name__ == "__main__":
    main()
