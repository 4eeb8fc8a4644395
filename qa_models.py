from dataclasses import dataclass, field
from typing import List


@dataclass
class Answer:
    """Answer attached to exactly one question."""
    id: int
    text: str = ""

    def __str__(self):
        return f"A{self.id}: {self.text}"


@dataclass
class Question:
    """Question with its owned answers and a one-way resolved flag."""
    id: int
    text: str = ""
    answers: List[Answer] = field(default_factory=list)
    resolved: bool = False

    @property
    def answered(self) -> bool:
        return bool(self.answers)

    def __str__(self):
        status = "Resolved" if self.resolved else "Unresolved"
        answered = "Answered" if self.answered else "Unanswered"
        return f"Q{self.id}: {self.text} [{status}, {answered}]"
