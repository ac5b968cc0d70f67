from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from codetrack.models import Difficulty, ProblemStatus
from codetrack.services.problem_store import ProblemStore
from codetrack.services.stats_service import StatsService

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.route('/stats')
@login_required
def stats():
    data = StatsService.get_analytics_data(current_user.id)
    return jsonify(data['stats'])


@api_bp.route('/charts')
@login_required
def charts():
    data = StatsService.get_analytics_data(current_user.id)
    return jsonify(data['charts'])


@api_bp.route('/problems')
@login_required
def problems():
    difficulty = request.args.get('difficulty', 'all')
    status = request.args.get('status', 'all')
    if difficulty != 'all' and difficulty not in Difficulty.values():
        return jsonify({'error': f'Unknown difficulty: {difficulty}'}), 400
    if status != 'all' and status not in ProblemStatus.values():
        return jsonify({'error': f'Unknown status: {status}'}), 400

    store = ProblemStore(current_user.id)
    items = store.list(
        search=request.args.get('q', ''),
        difficulty=difficulty,
        status=status,
        topic=request.args.get('topic', 'all'),
    )
    return jsonify({
        'items': [p.to_dict() for p in items],
        'total': store.count(),
    })
