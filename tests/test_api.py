"""Tests for JSON API endpoints."""

from codetrack.models import Problem


class TestStatsAPI:
    def test_stats(self, logged_in_client):
        client, data = logged_in_client
        resp = client.get('/api/stats')
        assert resp.status_code == 200
        result = resp.get_json()
        assert result['total'] == 3
        assert result['solved'] == 2
        assert result['solve_rate'] == 67
        assert result['last_7_days'] == 2
        assert result['current_streak'] >= 1

    def test_stats_empty(self, auth_client):
        result = auth_client.get('/api/stats').get_json()
        assert result == {
            'total': 0,
            'solved': 0,
            'total_solved': 0,
            'solve_rate': 0,
            'last_7_days': 0,
            'current_streak': 0,
        }


class TestChartsAPI:
    def test_charts(self, logged_in_client):
        client, data = logged_in_client
        result = client.get('/api/charts').get_json()
        assert len(result['daily_activity']) == 30
        assert sum(d['solved'] for d in result['daily_activity']) == 2
        assert {d['name'] for d in result['difficulty_breakdown']} == {'Easy', 'Medium', 'Hard'}
        assert result['topic_breakdown'][0] == {'topic': 'Arrays', 'count': 2}

    def test_charts_ignore_other_users(self, logged_in_client, other_user_problem):
        client, data = logged_in_client
        result = client.get('/api/charts').get_json()
        assert 'Math' not in [t['topic'] for t in result['topic_breakdown']]


class TestProblemsAPI:
    def test_list(self, logged_in_client):
        client, data = logged_in_client
        result = client.get('/api/problems').get_json()
        assert result['total'] == 3
        assert [p['title'] for p in result['items']] == [
            'Word Ladder', 'Merge Intervals', 'Two Sum'
        ]

    def test_filtered(self, logged_in_client):
        client, data = logged_in_client
        result = client.get('/api/problems?status=Solved&q=two').get_json()
        assert [p['title'] for p in result['items']] == ['Two Sum']
        assert result['total'] == 3

    def test_status_with_space(self, app, db, logged_in_client):
        client, data = logged_in_client
        problem = db.session.get(Problem, data['problem_ids'][2])
        problem.status = 'In Progress'
        db.session.commit()
        result = client.get('/api/problems?status=In%20Progress').get_json()
        assert [p['title'] for p in result['items']] == ['Word Ladder']

    def test_unknown_difficulty(self, logged_in_client):
        client, data = logged_in_client
        resp = client.get('/api/problems?difficulty=Extreme')
        assert resp.status_code == 400
        assert 'error' in resp.get_json()

    def test_unknown_status(self, logged_in_client):
        client, data = logged_in_client
        resp = client.get('/api/problems?status=Done')
        assert resp.status_code == 400
