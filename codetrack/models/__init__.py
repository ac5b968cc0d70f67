from .user import User
from .problem import Problem
from .record import Difficulty, ProblemStatus, ProblemRecord

__all__ = [
    'User',
    'Problem',
    'Difficulty',
    'ProblemStatus',
    'ProblemRecord',
]
