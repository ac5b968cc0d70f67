"""Owner-scoped data access for problems.

Every query issued here is filtered by the owning user, so views never
touch ``Problem.query`` directly and cannot leak another user's rows.
"""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError

from codetrack.extensions import db
from codetrack.models import Problem, ProblemRecord, ProblemStatus

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'title', 'platform', 'difficulty', 'topic', 'status',
    'problem_url', 'solution_url', 'notes',
)

_ALL = ('', 'all', None)


class ProblemStore:
    """List, insert, update and delete problems belonging to one user."""

    def __init__(self, user_id: int):
        self.user_id = user_id

    def _query(self):
        return Problem.query.filter_by(user_id=self.user_id)

    def list(self, search=None, difficulty=None, status=None, topic=None) -> list[Problem]:
        """All of the user's problems, newest first, optionally filtered."""
        query = self._query()
        if search:
            pattern = f'%{search.strip()}%'
            query = query.filter(or_(
                Problem.title.ilike(pattern),
                Problem.platform.ilike(pattern),
                Problem.topic.ilike(pattern),
            ))
        if difficulty not in _ALL:
            query = query.filter_by(difficulty=difficulty)
        if status not in _ALL:
            query = query.filter_by(status=status)
        if topic not in _ALL:
            query = query.filter_by(topic=topic)
        return query.order_by(Problem.created_at.desc(), Problem.id.desc()).all()

    def count(self) -> int:
        return self._query().count()

    def topics(self) -> list[str]:
        rows = (
            db.session.query(Problem.topic)
            .filter_by(user_id=self.user_id)
            .distinct()
            .all()
        )
        return sorted(r[0] for r in rows)

    def get(self, problem_id: int) -> Problem | None:
        return self._query().filter_by(id=problem_id).first()

    def insert(self, records: list[ProblemRecord]) -> list[Problem]:
        """Persist records for this user in one transaction."""
        problems = [Problem.from_record(r, self.user_id) for r in records]
        try:
            db.session.add_all(problems)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception(
                'Failed to insert %d problems for user %s', len(problems), self.user_id
            )
            raise
        logger.info('Inserted %d problems for user %s', len(problems), self.user_id)
        return problems

    def create(self, record: ProblemRecord, now: datetime | None = None) -> Problem:
        """Form path: solved_at is stamped when the problem starts out Solved."""
        now = now or datetime.utcnow()
        record.solved_at = now if record.status == ProblemStatus.SOLVED.value else None
        return self.insert([record])[0]

    def update(self, problem_id: int, changes: dict, now: datetime | None = None) -> Problem | None:
        """Apply field changes; solved_at follows transitions into and out of Solved."""
        problem = self.get(problem_id)
        if problem is None:
            return None

        now = now or datetime.utcnow()
        was_solved = problem.is_solved
        for name in EDITABLE_FIELDS:
            if name in changes:
                setattr(problem, name, changes[name])

        if problem.is_solved and not was_solved:
            problem.solved_at = now
        elif not problem.is_solved:
            problem.solved_at = None

        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Failed to update problem %s', problem_id)
            raise
        return problem

    def delete(self, problem_id: int) -> bool:
        problem = self.get(problem_id)
        if problem is None:
            return False
        try:
            db.session.delete(problem)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Failed to delete problem %s', problem_id)
            raise
        logger.info('Deleted problem %s for user %s', problem_id, self.user_id)
        return True
