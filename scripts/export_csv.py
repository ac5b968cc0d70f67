"""Export a user's problems to CSV.

Usage:
    python scripts/export_csv.py --username alice              # write to stdout
    python scripts/export_csv.py --username alice -o backup.csv
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from codetrack import create_app
from codetrack.models import User
from codetrack.services.csv_codec import export_to_csv
from codetrack.services.problem_store import ProblemStore


def main(argv=None, app=None):
    parser = argparse.ArgumentParser(description="Export a user's problems to CSV")
    parser.add_argument('--username', required=True)
    parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    args = parser.parse_args(argv)

    app = app or create_app()
    with app.app_context():
        user = User.query.filter_by(username=args.username).first()
        if user is None:
            print(f'User {args.username!r} not found.', file=sys.stderr)
            return 1
        problems = ProblemStore(user.id).list()
        text = export_to_csv(problems)

    if args.output:
        with open(args.output, 'w', encoding='utf-8', newline='') as f:
            f.write(text + '\n')
        print(f'Exported {len(problems)} problems to {args.output}', file=sys.stderr)
    else:
        print(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
