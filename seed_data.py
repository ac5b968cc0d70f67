"""Seed a demo account with sample problems.
Run with: python seed_data.py
"""
import os
import sys
from datetime import datetime, timedelta

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from codetrack import create_app
from codetrack.extensions import db
from codetrack.models import User, Problem

DEMO_USERNAME = 'demo'
DEMO_PASSWORD = 'demo1234'

# (title, platform, difficulty, topic, status, days since solved)
PROBLEMS = [
    ("Two Sum", "LeetCode", "Easy", "Arrays", "Solved", 0),
    ("Valid Parentheses", "LeetCode", "Easy", "Stacks", "Solved", 1),
    ("Merge Intervals", "LeetCode", "Medium", "Arrays", "Solved", 2),
    ("Number of Islands", "LeetCode", "Medium", "Graphs", "Reviewed", None),
    ("Longest Increasing Subsequence", "LeetCode", "Medium", "Dynamic Programming", "In Progress", None),
    ("Median of Two Sorted Arrays", "LeetCode", "Hard", "Binary Search", "Todo", None),
    ("Watermelon", "Codeforces", "Easy", "Math", "Solved", 5),
    ("Theatre Square", "Codeforces", "Easy", "Math", "Solved", 9),
    ("Word Ladder", "LeetCode", "Hard", "Graphs", "Todo", None),
    ("Coin Change", "LeetCode", "Medium", "Dynamic Programming", "Solved", 14),
    ("Minimum Window Substring", "LeetCode", "Hard", "Sliding Window", "Todo", None),
    ("Diagonal Difference", "HackerRank", "Easy", "Arrays", "Solved", 20),
]


def seed_demo():
    """Create the demo user and its sample problems."""
    app = create_app()
    with app.app_context():
        if User.query.filter_by(username=DEMO_USERNAME).first():
            print(f"User {DEMO_USERNAME!r} already exists. Skipping seed.")
            print("To re-seed, delete the demo user first.")
            return

        user = User(username=DEMO_USERNAME, email='demo@example.com', display_name='Demo')
        user.set_password(DEMO_PASSWORD)
        db.session.add(user)
        db.session.flush()

        now = datetime.utcnow()
        for title, platform, difficulty, topic, status, solved_days_ago in PROBLEMS:
            solved_at = now - timedelta(days=solved_days_ago) if solved_days_ago is not None else None
            db.session.add(Problem(
                user_id=user.id,
                title=title,
                platform=platform,
                difficulty=difficulty,
                topic=topic,
                status=status,
                solved_at=solved_at,
            ))

        db.session.commit()
        print(f"Seeded {len(PROBLEMS)} problems for {DEMO_USERNAME!r} (password {DEMO_PASSWORD!r}).")


if __name__ == '__main__':
    seed_demo()
