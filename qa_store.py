import logging
from typing import List

from qa_models import Answer, Question

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 10

# In-memory question/answer store.
# QuestionStore keeps questions in insertion order; each Question owns its
# answers. AnswerStore has no storage of its own and works on the live
# questions of the QuestionStore it was built with.


class QAError(Exception):
    """Base class for recoverable store errors."""


class ValidationError(QAError, ValueError):
    pass


class NotFoundError(QAError, KeyError):
    def __init__(self, question_id: int):
        super().__init__(f"Unknown question id: {question_id}")
        self.question_id = question_id

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class AlreadyResolvedError(QAError):
    def __init__(self, question_id: int):
        super().__init__(f"Question {question_id} is already resolved")
        self.question_id = question_id


def is_valid_input(text, min_length: int = MIN_TEXT_LENGTH) -> bool:
    if not isinstance(text, str):
        return False
    stripped = text.strip()
    return bool(stripped) and len(stripped) >= min_length


class IdAllocator:
    """Monotonic id counter. Ids are never handed out twice."""

    def __init__(self, start: int = 1):
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        return self._next


class QuestionStore:
    def __init__(self, ids: IdAllocator = None):
        self._ids = ids or IdAllocator()
        self._questions: List[Question] = []

    def __len__(self):
        return len(self._questions)

    def __contains__(self, question_id):
        return any(q.id == question_id for q in self._questions)

    def add(self, text: str) -> int:
        if not is_valid_input(text):
            raise ValidationError(
                f"Question text must be at least {MIN_TEXT_LENGTH} characters long"
            )
        question = Question(id=self._ids.next(), text=text)
        self._questions.append(question)
        logger.debug("Added question %d: %r", question.id, text)
        return question.id

    def find_by_id(self, question_id: int) -> Question:
        for question in self._questions:
            if question.id == question_id:
                return question
        raise NotFoundError(question_id)

    def all(self) -> List[Question]:
        return list(self._questions)

    def search(self, term: str) -> List[Question]:
        """Questions whose text contains ``term``, ignoring case.

        An empty term matches every question.
        """
        needle = (term or "").lower()
        results = [q for q in self._questions if needle in q.text.lower()]
        logger.debug("Search %r matched %d question(s)", term, len(results))
        return results

    def remove(self, question_id: int) -> bool:
        for index, question in enumerate(self._questions):
            if question.id == question_id:
                # answers go with the question
                del self._questions[index]
                logger.debug("Removed question %d with %d answer(s)",
                             question_id, len(question.answers))
                return True
        logger.debug("Remove: question %d not found", question_id)
        return False

    def resolve(self, question_id: int) -> None:
        question = self.find_by_id(question_id)
        if question.resolved:
            raise AlreadyResolvedError(question_id)
        question.resolved = True
        logger.debug("Resolved question %d", question_id)


class AnswerStore:
    def __init__(self, questions: QuestionStore, ids: IdAllocator = None):
        self.questions = questions
        self._ids = ids or IdAllocator()

    def add_answer(self, question_id: int, text: str) -> int:
        if not is_valid_input(text):
            raise ValidationError(
                f"Answer text must be at least {MIN_TEXT_LENGTH} characters long"
            )
        question = self.questions.find_by_id(question_id)
        answer = Answer(id=self._ids.next(), text=text)
        question.answers.append(answer)
        logger.debug("Added answer %d to question %d", answer.id, question_id)
        return answer.id

    def answers_for(self, question_id: int) -> List[Answer]:
        # a missing question reads the same as one without answers
        try:
            question = self.questions.find_by_id(question_id)
        except NotFoundError:
            return []
        return list(question.answers)

    def remove_answer(self, question_id: int, answer_id: int) -> bool:
        try:
            question = self.questions.find_by_id(question_id)
        except NotFoundError:
            logger.debug("Remove answer: question %d not found", question_id)
            return False
        for index, answer in enumerate(question.answers):
            if answer.id == answer_id:
                del question.answers[index]
                logger.debug("Removed answer %d from question %d", answer_id, question_id)
                return True
        logger.debug("Remove answer: answer %d not on question %d", answer_id, question_id)
        return False
