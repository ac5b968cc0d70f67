from flask import Blueprint, render_template
from flask_login import login_required, current_user

from codetrack.services.stats_service import StatsService

analytics_bp = Blueprint('analytics', __name__, url_prefix='/analytics')


@analytics_bp.route('/')
@login_required
def index():
    data = StatsService.get_analytics_data(current_user.id)
    return render_template('analytics/index.html', data=data)
