"""Records API: generic query surface shared by both record kinds.

Resolves filters into one store query, runs it through the record repo
and, for the spatial surface, projects the same rows to GeoJSON. Store
errors propagate unchanged.
"""

from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from ..database.record_repo import count, get_all, get_by_field, get_by_id
from .filters import RecordQuery, resolve
from .geojson import project


def run_query(session: Session, query: RecordQuery) -> List[Any]:
    """Execute a resolved query: equality lookup, or every record when unfiltered."""
    if query.is_unfiltered:
        return get_all(session, query.kind)
    return get_by_field(session, query.kind, query.field, query.value)


def list_records(
    session: Session,
    kind: str,
    filters: Optional[Mapping[str, Any]] = None,
) -> List[Any]:
    """Records of a kind matching the highest-precedence present filter."""
    return run_query(session, resolve(kind, filters))


def get_record(session: Session, kind: str, record_id: str) -> Optional[Any]:
    """Single record by identity, or None when not found."""
    return get_by_id(session, kind, record_id)


def count_records(session: Session, kind: str) -> int:
    return count(session, kind)


def records_geojson(
    session: Session,
    kind: str,
    filters: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """FeatureCollection for the records selected by the spatial filter precedence."""
    records = run_query(session, resolve(kind, filters, spatial=True))
    return project(kind, records)
