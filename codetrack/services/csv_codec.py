"""CSV export and import of problem records.

Export always writes the fixed column order in ``EXPORT_HEADERS``. Import
accepts any header order and any extra columns, as long as the columns in
``REQUIRED_HEADERS`` are present. Bad values are coerced to defaults and
rows missing required values are skipped and counted; only structural
problems raise.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Iterable, Mapping

from codetrack.models.record import Difficulty, ProblemStatus, ProblemRecord

logger = logging.getLogger(__name__)

EXPORT_HEADERS = (
    'title', 'platform', 'difficulty', 'topic', 'status',
    'problem_url', 'solution_url', 'notes', 'solved_at', 'created_at',
)
REQUIRED_HEADERS = ('title', 'platform', 'difficulty', 'topic')

_TEXT_FIELDS = ('title', 'platform', 'topic')
_NULLABLE_FIELDS = ('problem_url', 'solution_url', 'notes')

_DATE_FORMATS = ('%Y-%m-%d', '%Y/%m/%d', '%m/%d/%Y', '%Y-%m-%d %H:%M')


class CsvImportError(ValueError):
    """Base class for CSV import failures that abort the whole import."""


class MalformedInput(CsvImportError):
    def __init__(self, message='CSV file must have a header row and at least one data row'):
        super().__init__(message)


class MissingColumns(CsvImportError):
    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f'Missing required headers: {", ".join(self.missing)}')


class NoValidRows(CsvImportError):
    def __init__(self, message='No valid problems found in the CSV file'):
        super().__init__(message)


@dataclass
class ImportResult:
    records: list[ProblemRecord] = field(default_factory=list)
    skipped_count: int = 0


# ── Export ──

def export_to_csv(records: Iterable[Any]) -> str:
    """Serialize records to CSV text with the fixed ``EXPORT_HEADERS`` columns.

    Records may be ORM objects, ``ProblemRecord`` instances or mappings;
    missing attributes export as empty fields.
    """
    lines = [','.join(EXPORT_HEADERS)]
    for record in records:
        lines.append(','.join(
            escape_field(_format_value(_get(record, header)))
            for header in EXPORT_HEADERS
        ))
    return '\n'.join(lines)


def escape_field(value: str) -> str:
    """Quote a field only when it contains a comma, a quote or a newline."""
    if ',' in value or '"' in value or '\n' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def export_filename(today: date) -> str:
    return f'codetrack-problems-{today.isoformat()}.csv'


def _get(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _format_value(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, datetime):
        return value.replace(microsecond=0).isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (Difficulty, ProblemStatus)):
        return value.value
    return str(value)


# ── Import ──

def import_from_csv(text: str) -> ImportResult:
    """Parse CSV text into validated, unsaved ProblemRecords.

    Raises:
        MalformedInput: fewer than two non-blank lines.
        MissingColumns: a required header is absent.
        NoValidRows: every data row was skipped.
    """
    lines = [line.rstrip('\r') for line in text.split('\n')]
    lines = [line for line in lines if line.strip()]
    if len(lines) < 2:
        raise MalformedInput()

    headers = [h.strip().replace('"', '') for h in parse_csv_line(lines[0])]
    missing = [h for h in REQUIRED_HEADERS if h not in headers]
    if missing:
        raise MissingColumns(missing)

    result = ImportResult()
    for line_no, line in enumerate(lines[1:], start=2):
        values = parse_csv_line(line)
        row = {}
        for index, header in enumerate(headers):
            row[header] = values[index].strip() if index < len(values) else ''

        record = _build_record(row)
        if record is None:
            logger.warning('Skipping CSV line %d: missing required fields', line_no)
            result.skipped_count += 1
            continue
        result.records.append(record)

    if not result.records:
        raise NoValidRows()

    logger.info(
        'Parsed %d problems from CSV (%d rows skipped)',
        len(result.records), result.skipped_count,
    )
    return result


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into fields, honouring double-quoted sections.

    A doubled quote inside a quoted section is a literal quote. An
    unmatched quote leaves the splitter in quoted mode for the rest of
    the line.
    """
    fields = []
    current = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            fields.append(''.join(current))
            current = []
        else:
            current.append(char)
        i += 1
    fields.append(''.join(current))
    return fields


def _build_record(row: dict[str, str]) -> ProblemRecord | None:
    """Coerce one header->value row; None when a required value is empty."""
    values = {name: row.get(name, '') for name in _TEXT_FIELDS}

    difficulty = row.get('difficulty', '')
    values['difficulty'] = (
        difficulty if difficulty in Difficulty.values() else Difficulty.EASY.value
    )
    status = row.get('status', '')
    values['status'] = (
        status if status in ProblemStatus.values() else ProblemStatus.TODO.value
    )
    for name in _NULLABLE_FIELDS:
        values[name] = row.get(name) or None
    values['solved_at'] = parse_datetime(row.get('solved_at', ''))

    if not all(values[name] for name in REQUIRED_HEADERS):
        return None
    return ProblemRecord(**values)


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO-8601 date/datetime (or a few common date forms).

    Aware values are normalised to naive UTC to match stored timestamps.
    Returns None for empty or unparseable input.
    """
    if not value:
        return None
    value = value.strip()
    parsed = None
    try:
        parsed = datetime.fromisoformat(
            value[:-1] + '+00:00' if value.endswith(('Z', 'z')) else value
        )
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
