"""Data quality inspection for incoming rows.

Scoring silently defaults bad values to 0. This module reports which fields
were defaulted so producers can fix their exports; it never changes a score.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from .config import NUMERIC_FEATURES
from .features import ACCOUNT_FIELD, field_value, parse_number
from .models import QualityIssue, QualityReport

logger = structlog.get_logger()

_ABSENT = object()


def inspect_row(row: Mapping[str, Any] | None) -> list[QualityIssue]:
    issues: list[QualityIssue] = []
    for name in NUMERIC_FEATURES:
        value = field_value(row, name, _ABSENT)
        if value is _ABSENT or _is_blank(value):
            issues.append(QualityIssue(field=name, kind="missing"))
        elif parse_number(value) is None:
            issues.append(QualityIssue(field=name, kind="non_numeric", value=str(value)))

    if field_value(row, ACCOUNT_FIELD, _ABSENT) is _ABSENT:
        issues.append(QualityIssue(field=ACCOUNT_FIELD, kind="missing"))
    return issues


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def inspect_rows(rows: Iterable[Mapping[str, Any] | None]) -> QualityReport:
    """Aggregate per-field issue counts across a batch."""
    missing: Counter[str] = Counter()
    non_numeric: Counter[str] = Counter()
    inspected = 0
    with_issues = 0

    for row in rows:
        inspected += 1
        issues = inspect_row(row)
        if issues:
            with_issues += 1
        for issue in issues:
            if issue.kind == "missing":
                missing[issue.field] += 1
            else:
                non_numeric[issue.field] += 1

    report = QualityReport(
        rows_inspected=inspected,
        rows_with_issues=with_issues,
        missing=dict(missing),
        non_numeric=dict(non_numeric),
    )
    if with_issues:
        logger.warning(
            "row_quality_issues",
            rows_inspected=inspected,
            rows_with_issues=with_issues,
            missing_fields=len(missing),
            non_numeric_fields=len(non_numeric),
        )
    return report
