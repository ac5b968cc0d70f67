from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum


class Difficulty(str, Enum):
    EASY = 'Easy'
    MEDIUM = 'Medium'
    HARD = 'Hard'

    @classmethod
    def values(cls) -> list[str]:
        return [d.value for d in cls]


class ProblemStatus(str, Enum):
    TODO = 'Todo'
    IN_PROGRESS = 'In Progress'
    SOLVED = 'Solved'
    REVIEWED = 'Reviewed'

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]


@dataclass
class ProblemRecord:
    """A problem that has not been persisted yet (form input or CSV row)."""

    title: str
    platform: str
    difficulty: str
    topic: str
    status: str = ProblemStatus.TODO.value
    problem_url: str | None = None
    solution_url: str | None = None
    notes: str | None = None
    solved_at: datetime | None = None

    def to_dict(self) -> dict:
        return asdict(self)
