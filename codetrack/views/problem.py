import logging

from flask import Blueprint, render_template, redirect, url_for, flash, request, abort
from flask_login import login_required, current_user
from sqlalchemy.exc import SQLAlchemyError

from codetrack.models import Difficulty, ProblemStatus, ProblemRecord
from codetrack.services.problem_store import ProblemStore

logger = logging.getLogger(__name__)

problem_bp = Blueprint('problem', __name__, url_prefix='/problems')


def parse_problem_form(form):
    """Validate submitted problem fields.

    Returns:
        ``(record, None)`` on success or ``(None, error_message)``.
    """
    values = {
        name: form.get(name, '').strip()
        for name in ('title', 'platform', 'difficulty', 'topic', 'status',
                     'problem_url', 'solution_url', 'notes')
    }
    if not all(values[name] for name in ('title', 'platform', 'difficulty', 'topic')):
        return None, 'Title, platform, difficulty and topic are required'
    if values['difficulty'] not in Difficulty.values():
        return None, 'Invalid difficulty'
    values['status'] = values['status'] or ProblemStatus.TODO.value
    if values['status'] not in ProblemStatus.values():
        return None, 'Invalid status'
    for name in ('problem_url', 'solution_url', 'notes'):
        values[name] = values[name] or None
    return ProblemRecord(**values), None


def _form_context(**extra):
    return dict(
        difficulties=Difficulty.values(),
        statuses=ProblemStatus.values(),
        **extra,
    )


@problem_bp.route('/')
@login_required
def list_problems():
    search = request.args.get('q', '')
    difficulty = request.args.get('difficulty', 'all')
    status = request.args.get('status', 'all')
    topic = request.args.get('topic', 'all')

    store = ProblemStore(current_user.id)
    problems = store.list(
        search=search, difficulty=difficulty, status=status, topic=topic,
    )
    return render_template(
        'problem/list.html',
        problems=problems,
        total_count=store.count(),
        topics=store.topics(),
        search=search,
        current_difficulty=difficulty,
        current_status=status,
        current_topic=topic,
        **_form_context(),
    )


@problem_bp.route('/new', methods=['GET', 'POST'])
@login_required
def new_problem():
    if request.method == 'POST':
        record, error = parse_problem_form(request.form)
        if error:
            flash(error, 'danger')
            return render_template(
                'problem/form.html', problem=None, form=request.form, **_form_context()
            )
        try:
            ProblemStore(current_user.id).create(record)
        except SQLAlchemyError:
            flash('Could not save the problem, please try again', 'danger')
            return render_template(
                'problem/form.html', problem=None, form=request.form, **_form_context()
            )
        flash(f'Added "{record.title}"', 'success')
        return redirect(url_for('problem.list_problems'))
    return render_template('problem/form.html', problem=None, form={}, **_form_context())


@problem_bp.route('/<int:problem_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_problem(problem_id):
    store = ProblemStore(current_user.id)
    problem = store.get(problem_id)
    if problem is None:
        abort(404)

    if request.method == 'POST':
        record, error = parse_problem_form(request.form)
        if error:
            flash(error, 'danger')
            return render_template(
                'problem/form.html', problem=problem, form=request.form, **_form_context()
            )
        changes = record.to_dict()
        changes.pop('solved_at')
        try:
            store.update(problem_id, changes)
        except SQLAlchemyError:
            flash('Could not update the problem, please try again', 'danger')
            return render_template(
                'problem/form.html', problem=problem, form=request.form, **_form_context()
            )
        flash('Problem updated', 'success')
        return redirect(url_for('problem.list_problems'))

    return render_template(
        'problem/form.html', problem=problem, form=problem.to_dict(), **_form_context()
    )


@problem_bp.route('/<int:problem_id>/delete', methods=['POST'])
@login_required
def delete_problem(problem_id):
    try:
        deleted = ProblemStore(current_user.id).delete(problem_id)
    except SQLAlchemyError:
        flash('Could not delete the problem, please try again', 'danger')
        return redirect(url_for('problem.list_problems'))
    if not deleted:
        abort(404)
    flash('Problem deleted', 'success')
    return redirect(url_for('problem.list_problems'))
