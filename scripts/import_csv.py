"""Import problems from a CSV file into a user's collection.

Uses the same codec as the web import page: unknown difficulty/status
values are defaulted and rows missing required values are skipped.

Usage:
    python scripts/import_csv.py --username alice problems.csv
    python scripts/import_csv.py --username alice problems.csv --dry-run
"""
import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from codetrack import create_app
from codetrack.models import User
from codetrack.services.csv_codec import CsvImportError, import_from_csv
from codetrack.services.problem_store import ProblemStore

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def main(argv=None, app=None):
    parser = argparse.ArgumentParser(description='Import problems from a CSV file')
    parser.add_argument('csv_file', help='Path to the CSV file')
    parser.add_argument('--username', required=True, help='Owner of the imported problems')
    parser.add_argument('--dry-run', action='store_true', help='Parse only, do not write')
    args = parser.parse_args(argv)

    with open(args.csv_file, 'r', encoding='utf-8-sig') as f:
        text = f.read()

    app = app or create_app()
    with app.app_context():
        user = User.query.filter_by(username=args.username).first()
        if user is None:
            logger.error(f'User {args.username!r} not found.')
            return 1

        try:
            result = import_from_csv(text)
        except CsvImportError as e:
            logger.error(f'Import failed: {e}')
            return 1

        if args.dry_run:
            for record in result.records:
                logger.info(
                    f'  [DRY RUN] Would import {record.title!r} '
                    f'({record.platform}, {record.difficulty}, {record.status})'
                )
        else:
            ProblemStore(user.id).insert(result.records)

        logger.info(
            f'Imported {len(result.records)} problems, '
            f'skipped {result.skipped_count} rows.'
        )
    return 0


if __name__ == '__main__':
    sys.exit(main())
