"""Shared test fixtures for the CodeTrack test suite."""

from datetime import datetime, timedelta

import pytest

from codetrack import create_app
from codetrack.extensions import db as _db
from codetrack.models import User, Problem


@pytest.fixture()
def app():
    """Create a Flask application configured for testing."""
    application = create_app('testing')
    yield application


@pytest.fixture()
def db(app):
    """Provide a clean database for each test."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app, db):
    """Provide a Flask test client."""
    return app.test_client()


@pytest.fixture()
def auth_client(app, db, client):
    """Provide a test client that is already logged in (no problems)."""
    user = User(username='testuser', email='test@example.com')
    user.set_password('testpass123')
    db.session.add(user)
    db.session.commit()

    client.post('/auth/login', data={
        'username': 'testuser',
        'password': 'testpass123',
    })
    return client


@pytest.fixture()
def sample_data(app, db):
    """Create a user with a small problem collection.

    Returns a dict of plain IDs (not model objects) so they survive
    across Flask request context boundaries without DetachedInstanceError.
    """
    user = User(username='testowner', email='owner@test.com', display_name='Owner')
    user.set_password('password123')
    db.session.add(user)
    db.session.flush()

    now = datetime.utcnow()
    prob1 = Problem(
        user_id=user.id,
        title='Two Sum',
        platform='LeetCode',
        difficulty='Easy',
        topic='Arrays',
        status='Solved',
        problem_url='https://leetcode.com/problems/two-sum/',
        solved_at=now - timedelta(hours=1),
        created_at=now - timedelta(days=3),
    )
    prob2 = Problem(
        user_id=user.id,
        title='Merge Intervals',
        platform='LeetCode',
        difficulty='Medium',
        topic='Arrays',
        status='Solved',
        notes='sort by start, then sweep',
        solved_at=now - timedelta(days=1),
        created_at=now - timedelta(days=2),
    )
    prob3 = Problem(
        user_id=user.id,
        title='Word Ladder',
        platform='Codeforces',
        difficulty='Hard',
        topic='Graphs',
        status='Todo',
        created_at=now - timedelta(days=1),
    )
    db.session.add_all([prob1, prob2, prob3])
    db.session.commit()

    return {
        'user_id': user.id,
        'problem_ids': [prob1.id, prob2.id, prob3.id],
    }


@pytest.fixture()
def logged_in_client(app, db, client, sample_data):
    """Provide a client logged in as the sample_data user."""
    client.post('/auth/login', data={
        'username': 'testowner',
        'password': 'password123',
    })
    return client, sample_data


@pytest.fixture()
def other_user_problem(app, db):
    """A problem owned by a different user; returns its id."""
    other = User(username='stranger', email='stranger@test.com')
    other.set_password('pw')
    db.session.add(other)
    db.session.flush()
    problem = Problem(
        user_id=other.id, title='Secret', platform='AtCoder',
        difficulty='Hard', topic='Math',
    )
    db.session.add(problem)
    db.session.commit()
    return problem.id
