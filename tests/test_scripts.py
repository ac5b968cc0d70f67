"""Tests for the command-line import/export scripts."""

from codetrack.models import Problem
from scripts import export_csv, import_csv


class TestImportScript:
    def test_import(self, app, db, sample_data, tmp_path):
        csv_file = tmp_path / 'problems.csv'
        csv_file.write_text(
            'title,platform,difficulty,topic,status,solved_at\n'
            'Jump Game,LeetCode,Medium,Greedy,Solved,2026-09-30\n'
            ',LeetCode,Easy,Arrays,Todo,\n',
            encoding='utf-8',
        )
        code = import_csv.main(['--username', 'testowner', str(csv_file)], app=app)
        assert code == 0
        problem = Problem.query.filter_by(title='Jump Game').first()
        assert problem.user_id == sample_data['user_id']
        assert problem.solved_at.date().isoformat() == '2026-09-30'
        assert Problem.query.count() == 4

    def test_dry_run_writes_nothing(self, app, db, sample_data, tmp_path):
        csv_file = tmp_path / 'problems.csv'
        csv_file.write_text('title,platform,difficulty,topic\nA,B,Easy,T\n', encoding='utf-8')
        code = import_csv.main(
            ['--username', 'testowner', '--dry-run', str(csv_file)], app=app,
        )
        assert code == 0
        assert Problem.query.count() == 3

    def test_unknown_user(self, app, db, tmp_path):
        csv_file = tmp_path / 'problems.csv'
        csv_file.write_text('title,platform,difficulty,topic\nA,B,Easy,T\n', encoding='utf-8')
        assert import_csv.main(['--username', 'nobody', str(csv_file)], app=app) == 1

    def test_bad_csv(self, app, db, sample_data, tmp_path):
        csv_file = tmp_path / 'problems.csv'
        csv_file.write_text('title,platform\nA,B\n', encoding='utf-8')
        assert import_csv.main(['--username', 'testowner', str(csv_file)], app=app) == 1
        assert Problem.query.count() == 3


class TestExportScript:
    def test_export_to_file(self, app, db, sample_data, tmp_path):
        out = tmp_path / 'backup.csv'
        code = export_csv.main(['--username', 'testowner', '-o', str(out)], app=app)
        assert code == 0
        lines = out.read_text(encoding='utf-8').strip().split('\n')
        assert lines[0].startswith('title,platform,difficulty,topic')
        assert len(lines) == 4

    def test_export_to_stdout(self, app, db, sample_data, capsys):
        assert export_csv.main(['--username', 'testowner'], app=app) == 0
        assert 'Merge Intervals' in capsys.readouterr().out

    def test_unknown_user(self, app, db):
        assert export_csv.main(['--username', 'nobody'], app=app) == 1
