#!/usr/bin/env python3
"""
Text menu over the in-memory question/answer board.

Usage:
    python qa_menu.py            # start with an empty board
    python qa_menu.py --demo     # start with a few sample questions

Environment:
    LOGLEVEL        logging level (default WARNING)
    QA_SUGGESTIONS  max "did you mean" suggestions after an empty search (default 3, 0 disables)
"""

import logging
import os
import sys
from typing import Callable, List, Optional

from qa_match import QuestionMatcher
from qa_models import Question
from qa_store import (
    AlreadyResolvedError,
    AnswerStore,
    NotFoundError,
    QuestionStore,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_LOGLEVEL = "WARNING"
DEFAULT_SUGGESTIONS = 3

MENU = """
--- Question and Answer System ---
1. Ask a question
2. Search questions
3. Display all questions
4. Remove a question
5. Answer a question
6. Remove an answer
7. Resolve a question
0. Exit"""


class QAMenu:
    def __init__(
        self,
        questions: QuestionStore,
        answers: AnswerStore,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
        matcher: Optional[QuestionMatcher] = None,
        max_suggestions: int = DEFAULT_SUGGESTIONS,
    ):
        self.questions = questions
        self.answers = answers
        self.input_fn = input_fn or input
        self.output = output or print
        self.matcher = matcher if matcher is not None else QuestionMatcher(questions)
        self.max_suggestions = max_suggestions
        self.actions = {
            1: self.ask_question,
            2: self.search_questions,
            3: self.display_questions,
            4: self.remove_question,
            5: self.answer_question,
            6: self.remove_answer,
            7: self.resolve_question,
        }

    def run(self):
        while True:
            self.output(MENU)
            try:
                choice = self._read_int("Enter your choice: ", "Invalid choice number. Try again.")
                if choice == 0:
                    self.output("Exiting... Goodbye!")
                    return
                action = self.actions.get(choice)
                if action is None:
                    self.output("Invalid choice. Please try again.")
                    continue
                logger.debug("Menu choice %d", choice)
                action()
            except EOFError:
                logger.debug("Input closed, leaving menu")
                return

    def _read_int(self, prompt: str, error_message: str) -> int:
        while True:
            raw = self.input_fn(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self.output(error_message)

    def _read_id(self, prompt: str) -> int:
        return self._read_int(prompt, "Invalid ID. Please enter a valid number.")

    def show(self, questions: List[Question]):
        if not questions:
            self.output("No questions available.")
            return
        for question in questions:
            self.output(str(question))
            for answer in question.answers:
                self.output(f"    {answer}")

    def ask_question(self):
        text = self.input_fn("Enter your question (minimum 10 characters): ")
        try:
            self.questions.add(text)
        except ValidationError:
            self.output("Please input a valid question and make it longer than 10 characters.")
            return
        self.output("Question added successfully.")

    def search_questions(self):
        term = self.input_fn("Enter a search term: ")
        found = self.questions.search(term)
        self.show(found)
        if found or self.max_suggestions <= 0:
            return
        suggestions = self.matcher.suggest(term, limit=self.max_suggestions)
        if suggestions:
            self.output("Did you mean:")
            for question in suggestions:
                self.output(f"  {question}")

    def display_questions(self):
        self.show(self.questions.all())

    def remove_question(self):
        self.display_questions()
        question_id = self._read_id("Enter the question ID to remove: ")
        if self.questions.remove(question_id):
            self.output(f"Question {question_id} removed.")
        else:
            self.output("Question not found.")

    def answer_question(self):
        self.display_questions()
        question_id = self._read_id("Enter the question ID to answer: ")
        text = self.input_fn("Enter your answer (minimum 10 characters): ")
        try:
            self.answers.add_answer(question_id, text)
        except ValidationError:
            self.output("Please input a valid answer and make it longer than 10 characters.")
            return
        except NotFoundError:
            self.output("Question not found.")
            return
        self.output("Answer added successfully.")

    def remove_answer(self):
        self.display_questions()
        question_id = self._read_id("Enter the question ID for the answer: ")
        answer_id = self._read_id("Enter the answer ID to remove: ")
        if self.answers.remove_answer(question_id, answer_id):
            self.output(f"Answer {answer_id} removed.")
        else:
            self.output("Answer not found.")

    def resolve_question(self):
        self.display_questions()
        question_id = self._read_id("Enter the question ID to resolve: ")
        try:
            self.questions.resolve(question_id)
        except NotFoundError:
            self.output("Question not found.")
            return
        except AlreadyResolvedError:
            self.output("This question is already resolved.")
            return
        self.output(f"Question {question_id} marked as resolved.")


def configure_logging(level_name: Optional[str] = None) -> int:
    level_name = (level_name or os.environ.get("LOGLEVEL", DEFAULT_LOGLEVEL)).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = getattr(logging, DEFAULT_LOGLEVEL)

    root = logging.getLogger()
    root.setLevel(level)
    # reuse an existing console handler if one is already installed
    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) in (sys.stdout, sys.stderr):
            h.setLevel(level)
            break
    else:
        sh = logging.StreamHandler(sys.stdout)
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(sh)
    return level


def suggestions_from_env() -> int:
    raw = os.environ.get("QA_SUGGESTIONS", str(DEFAULT_SUGGESTIONS))
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning("Ignoring invalid QA_SUGGESTIONS=%r", raw)
        return DEFAULT_SUGGESTIONS


def seed_demo(questions: QuestionStore, answers: AnswerStore):
    q1 = questions.add("What is a linked list?")
    q2 = questions.add("How does recursion work?")
    questions.add("When should I use a hash table?")
    answers.add_answer(q1, "A linked list is a data structure of chained nodes.")
    answers.add_answer(q2, "A function calls itself on a smaller input until a base case.")
    questions.resolve(q1)
    logger.debug("Seeded %d demo questions", len(questions))


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()

    questions = QuestionStore()
    answers = AnswerStore(questions)
    if "--demo" in argv:
        seed_demo(questions, answers)

    QAMenu(questions, answers, max_suggestions=suggestions_from_env()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
