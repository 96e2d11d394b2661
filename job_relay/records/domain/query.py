"""Store query selecting the records to reconcile for a QueryWindow."""

from datetime import datetime, time, timedelta
from typing import Any

from job_relay.config.domain.store import QueryWindow
from job_relay.records.domain.record import RecordStatus


def build_query(window: QueryWindow) -> dict[str, Any]:
    """Match records created from ``start_date`` through the day after ``end_date``.

    The upper bound is inclusive of midnight following ``end_date`` so records
    created at any time on ``end_date`` are selected.
    """
    start = datetime.combine(window.start_date, time.min)
    upper = datetime.combine(window.end_date + timedelta(days=1), time.min)
    return {
        "createdAt": {"$gte": start, "$lte": upper},
        "status": {"$in": [status.value for status in RecordStatus]},
    }
