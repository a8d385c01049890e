"""Read access to the pre-aggregated dashboard views.

The views are computed by the store; rows are returned exactly as stored.
"""

import re
from typing import Any, Dict, List, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.orm import Session

from ifn.utils.logging import get_logger

logger = get_logger(__name__)

DASHBOARD_VIEWS = frozenset({
    "v_kpi_global",
    "v_avancement_equipe",
    "v_avancement_strate",
    "v_accessibilite_global",
    "v_accessibilite_equipe",
    "v_visites_par_jour",
    "v_moy_jour_equipe",
    "v_productivite_equipe",
})

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")
_DIRECTIONS = ("asc", "desc")

SortKey = Tuple[str, str]


def _order_clause(order_by: Sequence[SortKey]) -> str:
    parts = []
    for column_name, direction in order_by:
        if not _IDENTIFIER.match(column_name):
            raise ValueError(f"Invalid sort column: {column_name!r}")
        direction = direction.lower()
        if direction not in _DIRECTIONS:
            raise ValueError(f"Invalid sort direction for {column_name}: {direction!r}")
        parts.append(f"{column_name} {direction.upper()}")
    return ", ".join(parts)


def query_view(
    session: Session,
    view_name: str,
    order_by: Sequence[SortKey] = (),
) -> List[Dict[str, Any]]:
    """
    Select every row of a dashboard view.

    Args:
        session: SQLAlchemy session
        view_name: One of DASHBOARD_VIEWS
        order_by: (column, "asc"|"desc") pairs applied in order

    Returns:
        Rows as plain dicts keyed by view column name

    Raises:
        ValueError: If the view or a sort key is not allowed
    """
    if view_name not in DASHBOARD_VIEWS:
        raise ValueError(f"Unknown dashboard view: {view_name!r}")

    sql = f"SELECT * FROM {view_name}"
    order_clause = _order_clause(order_by)
    if order_clause:
        sql += f" ORDER BY {order_clause}"

    logger.debug(f"Dashboard query: {sql}")
    result = session.execute(text(sql))
    return [dict(row) for row in result.mappings().all()]


def query_view_first(session: Session, view_name: str) -> Dict[str, Any]:
    """First row of a single-row view, or {} when the view is empty."""
    rows = query_view(session, view_name)
    return rows[0] if rows else {}
