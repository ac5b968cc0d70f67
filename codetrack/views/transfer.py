"""Import/export blueprint: CSV backup and bulk import of problems."""
import logging
from datetime import datetime

from flask import Blueprint, Response, current_app, flash, redirect, render_template, request, url_for
from flask_login import login_required, current_user
from sqlalchemy.exc import SQLAlchemyError

from codetrack.services.csv_codec import (
    CsvImportError,
    EXPORT_HEADERS,
    REQUIRED_HEADERS,
    export_filename,
    export_to_csv,
    import_from_csv,
)
from codetrack.services.problem_store import ProblemStore

logger = logging.getLogger(__name__)

transfer_bp = Blueprint('transfer', __name__, url_prefix='/transfer')


@transfer_bp.route('/')
@login_required
def index():
    optional = [h for h in EXPORT_HEADERS if h not in REQUIRED_HEADERS and h != 'created_at']
    return render_template(
        'transfer/index.html',
        required_headers=REQUIRED_HEADERS,
        optional_headers=optional,
    )


@transfer_bp.route('/export')
@login_required
def export():
    problems = ProblemStore(current_user.id).list()
    today = current_app.to_display_tz(datetime.utcnow()).date()
    logger.info('Exporting %d problems for user %s', len(problems), current_user.id)
    return Response(
        export_to_csv(problems),
        mimetype='text/csv',
        headers={
            'Content-Disposition': f'attachment; filename={export_filename(today)}',
        },
    )


@transfer_bp.route('/import', methods=['POST'])
@login_required
def import_csv():
    upload = request.files.get('file')
    if upload is None or not upload.filename:
        flash('Please choose a CSV file', 'warning')
        return redirect(url_for('transfer.index'))

    try:
        text = upload.read().decode('utf-8-sig')
    except UnicodeDecodeError:
        flash('Import failed: file is not UTF-8 text', 'danger')
        return redirect(url_for('transfer.index'))

    try:
        result = import_from_csv(text)
    except CsvImportError as e:
        flash(f'Import failed: {e}', 'danger')
        return redirect(url_for('transfer.index'))

    try:
        ProblemStore(current_user.id).insert(result.records)
    except SQLAlchemyError:
        flash('Import failed: could not save problems', 'danger')
        return redirect(url_for('transfer.index'))

    message = f'Imported {len(result.records)} problems from CSV file.'
    if result.skipped_count:
        message += f' Skipped {result.skipped_count} invalid rows.'
    flash(message, 'success')
    return redirect(url_for('transfer.index'))
