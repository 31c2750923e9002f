"""Apply a record predicate across an ordered collection of records."""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, TypeVar

from core.config import MatchingConfig
from core.structured_logging import emit_json_event
from matching.predicates import RecordPredicate

T = TypeVar("T")


def filter_records(
    records: Sequence[T],
    predicate: RecordPredicate,
    *,
    deadline_seconds: Optional[float] = None,
    run_id: Optional[str] = None,
) -> list[T]:
    """
    Return records matching ``predicate`` in input order.

    With ``deadline_seconds``, the scan stops between records once the
    deadline passes and the matches found so far are returned.
    """
    deadline = None if deadline_seconds is None else time.monotonic() + deadline_seconds
    matched: list[T] = []
    for index, record in enumerate(records):
        if deadline is not None and time.monotonic() >= deadline:
            emit_json_event(
                "match_scan_deadline_exceeded",
                run_id=run_id,
                level="warning",
                scanned=index,
                total=len(records),
                matched=len(matched),
            )
            break
        if predicate.test(record):
            matched.append(record)
    return matched


def filter_records_parallel(
    records: Sequence[T],
    predicate: RecordPredicate,
    max_workers: Optional[int] = None,
) -> list[T]:
    """
    Evaluate records concurrently and return matches in input order.

    Records are independent, so work is split per record rather than per field.
    """
    if not records:
        return []
    workers = min(max_workers or MatchingConfig.MAX_PARALLEL_WORKERS, len(records))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(predicate.test, records))
    return [record for record, is_match in zip(records, results) if is_match]
