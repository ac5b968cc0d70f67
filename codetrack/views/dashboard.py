from flask import Blueprint, render_template, redirect, url_for, flash, request
from flask_login import login_required, current_user
from sqlalchemy.exc import SQLAlchemyError

from codetrack.models import Difficulty
from codetrack.services.problem_store import ProblemStore
from codetrack.services.stats_service import StatsService
from codetrack.views.problem import parse_problem_form

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/')
@login_required
def index():
    data = StatsService.get_dashboard_data(current_user.id)
    return render_template(
        'dashboard/index.html',
        data=data,
        difficulties=Difficulty.values(),
    )


@dashboard_bp.route('/quick-add', methods=['POST'])
@login_required
def quick_add():
    record, error = parse_problem_form(request.form)
    if error:
        flash(error, 'danger')
        return redirect(url_for('dashboard.index'))
    try:
        ProblemStore(current_user.id).create(record)
    except SQLAlchemyError:
        flash('Could not save the problem, please try again', 'danger')
        return redirect(url_for('dashboard.index'))
    flash(f'Added "{record.title}"', 'success')
    return redirect(url_for('dashboard.index'))
