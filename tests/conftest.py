import logging

import pytest

from qa_store import AnswerStore, QuestionStore


@pytest.fixture
def questions():
    return QuestionStore()


@pytest.fixture
def answers(questions):
    return AnswerStore(questions)


class ScriptedInput:
    """Feeds canned lines to the menu and records the prompts it asked."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def root_logger():
    """Restores the root logger after a test reconfigures it."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for h in root.handlers:
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)
