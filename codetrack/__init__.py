import logging
import os

from datetime import datetime, timezone, timedelta
from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv
from flask import Flask, redirect, url_for

from codetrack.config import config_map
from codetrack.extensions import db, login_manager, migrate, csrf

__version__ = '0.3.0'


def create_app(config_name=None):
    """Application factory for creating the Flask app instance.

    Args:
        config_name: Configuration name ('development', 'production' or
                     'testing'). Defaults to FLASK_ENV environment variable
                     or 'development'.

    Returns:
        Configured Flask application instance.
    """
    # Load environment variables from the appropriate .env file
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env_file = os.path.join(project_root, f'.env.{env}')
    if os.path.exists(env_file):
        load_dotenv(env_file)

    # Also load a local .env if it exists (overrides the environment-specific one)
    dotenv_path = os.path.join(project_root, '.env')
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path, override=True)

    # Determine final config name after env files are loaded
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)

    config_class = config_map.get(config_name, config_map['development'])
    app.config.from_object(config_class)

    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Register user loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from codetrack.models.user import User
        return db.session.get(User, int(user_id))

    _register_blueprints(app)

    def to_display_tz(dt, _app=None):
        """Convert a naive UTC datetime to the configured display timezone."""
        target = _app or app
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(display_timezone(target))

    app.to_display_tz = to_display_tz

    @app.template_filter('datefmt')
    def datefmt_filter(dt, fmt='%Y-%m-%d %H:%M'):
        """Format a UTC datetime in display timezone."""
        if not dt:
            return '-'
        return to_display_tz(dt).strftime(fmt)

    @app.template_filter('smarttime')
    def smarttime_filter(dt):
        """Relative day label ('today', 'yesterday', '3 days ago') in display timezone."""
        if not dt:
            return '-'
        display_dt = to_display_tz(dt)
        today = to_display_tz(datetime.utcnow()).date()
        delta_days = (today - display_dt.date()).days

        if delta_days <= 0:
            return display_dt.strftime('%H:%M')
        elif delta_days == 1:
            return 'yesterday'
        elif delta_days <= 7:
            return f'{delta_days} days ago'
        elif display_dt.year == today.year:
            return display_dt.strftime('%b %d')
        else:
            return display_dt.strftime('%Y-%m-%d')

    # Inject version into all templates
    @app.context_processor
    def inject_version():
        return dict(app_version=__version__)

    # Root URL redirect to dashboard
    @app.route('/')
    def index():
        return redirect(url_for('dashboard.index'))

    # Create database tables if they don't exist
    with app.app_context():
        db.create_all()

    return app


def display_timezone(app):
    """Fixed-offset timezone configured by DISPLAY_TIMEZONE_OFFSET (hours)."""
    offset = app.config.get('DISPLAY_TIMEZONE_OFFSET', 0)
    return timezone(timedelta(hours=offset))


def _configure_logging(app):
    """Set up RotatingFileHandler on the root logger."""
    max_bytes = app.config.get('LOG_FILE_MAX_BYTES', 0)
    if not max_bytes:
        return

    log_dir = os.path.join(app.instance_path, 'logs')
    os.makedirs(log_dir, exist_ok=True)

    log_file = os.path.join(log_dir, 'app.log')
    handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=app.config.get('LOG_FILE_BACKUP_COUNT', 3),
    )
    handler.setFormatter(logging.Formatter(
        app.config.get('LOG_FORMAT', '%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    ))
    handler.setLevel(logging.DEBUG)

    root = logging.getLogger()
    root.addHandler(handler)
    if root.level == logging.WARNING:
        root.setLevel(logging.INFO)


def _register_blueprints(app):
    """Register all application blueprints."""
    from codetrack.views.auth import auth_bp
    from codetrack.views.dashboard import dashboard_bp
    from codetrack.views.problem import problem_bp
    from codetrack.views.transfer import transfer_bp
    from codetrack.views.analytics import analytics_bp
    from codetrack.views.api import api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp, url_prefix='/dashboard')
    app.register_blueprint(problem_bp)
    app.register_blueprint(transfer_bp)
    app.register_blueprint(analytics_bp)
    app.register_blueprint(api_bp)
