from datetime import datetime

from codetrack.extensions import db
from .record import Difficulty, ProblemStatus, ProblemRecord


def _in_clause(column: str, values: list[str]) -> str:
    quoted = ', '.join(f"'{v}'" for v in values)
    return f'{column} IN ({quoted})'


class Problem(db.Model):
    """A coding-practice problem tracked by one user."""

    __tablename__ = 'problem'
    __table_args__ = (
        db.CheckConstraint(
            _in_clause('difficulty', Difficulty.values()),
            name='ck_problem_difficulty',
        ),
        db.CheckConstraint(
            _in_clause('status', ProblemStatus.values()),
            name='ck_problem_status',
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'),
        nullable=False, index=True,
    )
    title = db.Column(db.String(300), nullable=False)
    platform = db.Column(db.String(100), nullable=False, index=True)
    difficulty = db.Column(db.String(10), nullable=False)
    topic = db.Column(db.String(100), nullable=False, index=True)
    status = db.Column(
        db.String(20), nullable=False, default=ProblemStatus.TODO.value,
    )  # Todo | In Progress | Solved | Reviewed
    problem_url = db.Column(db.String(500), nullable=True)
    solution_url = db.Column(db.String(500), nullable=True)
    notes = db.Column(db.Text, nullable=True)
    solved_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False,
        default=datetime.utcnow, onupdate=datetime.utcnow,
    )

    # Relationships
    user = db.relationship('User', back_populates='problems')

    @classmethod
    def from_record(cls, record: ProblemRecord, user_id: int) -> 'Problem':
        """Build an unsaved Problem owned by ``user_id`` from a ProblemRecord."""
        return cls(user_id=user_id, **record.to_dict())

    @property
    def is_solved(self) -> bool:
        return self.status == ProblemStatus.SOLVED.value

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'platform': self.platform,
            'difficulty': self.difficulty,
            'topic': self.topic,
            'status': self.status,
            'problem_url': self.problem_url,
            'solution_url': self.solution_url,
            'notes': self.notes,
            'solved_at': self.solved_at.isoformat() if self.solved_at else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f'<Problem {self.id} {self.title!r} [{self.status}]>'
