"""Dashboard API: relays pre-computed aggregation views.

No aggregation happens here. Each view has a declared sort order; rows
are otherwise forwarded untouched.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from ..database.dashboard_repo import query_view, query_view_first

VIEW_SORT_KEYS: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "v_kpi_global": (),
    "v_avancement_equipe": (("pct_avancement", "desc"),),
    "v_avancement_strate": (("total_visite", "desc"), ("total_programme", "desc")),
    "v_accessibilite_global": (),
    "v_accessibilite_equipe": (("total_visite", "desc"),),
    "v_visites_par_jour": (("date_visite", "asc"),),
    "v_moy_jour_equipe": (("date_visite", "asc"), ("equipe", "asc")),
    "v_productivite_equipe": (("moy_par_jour", "desc"),),
}

DASHBOARD_SECTIONS = ("kpi", "equipes", "strates", "accessibilite", "temporel")


def relay(
    session: Session,
    view_name: str,
    order_by: Optional[Sequence[Tuple[str, str]]] = None,
) -> List[Dict[str, Any]]:
    """
    Forward the rows of one aggregation view.

    Args:
        session: SQLAlchemy session
        view_name: Dashboard view name
        order_by: Sort keys; defaults to the view's declared order

    Returns:
        Rows as dicts, sorted, values unchanged
    """
    if order_by is None:
        if view_name not in VIEW_SORT_KEYS:
            raise ValueError(f"Unknown dashboard view: {view_name!r}")
        order_by = VIEW_SORT_KEYS[view_name]
    return query_view(session, view_name, order_by)


def get_kpi(session: Session) -> Dict[str, Any]:
    """Global KPIs: programmed, visited, remaining, % progress, average per day."""
    return query_view_first(session, "v_kpi_global")


def get_equipes(session: Session) -> List[Dict[str, Any]]:
    """Progress per team, best progress first."""
    return relay(session, "v_avancement_equipe")


def get_strates(session: Session) -> List[Dict[str, Any]]:
    return relay(session, "v_avancement_strate")


def get_accessibilite(session: Session) -> Dict[str, Any]:
    """Global and per-team accessibility rates: {"global": {...}, "equipes": [...]}."""
    return {
        "global": query_view_first(session, "v_accessibilite_global"),
        "equipes": relay(session, "v_accessibilite_equipe"),
    }


def get_temporel(session: Session) -> Dict[str, Any]:
    """Daily visits, per-day-per-team averages and team productivity."""
    return {
        "visitesParJour": relay(session, "v_visites_par_jour"),
        "moyParJourEquipe": relay(session, "v_moy_jour_equipe"),
        "productivite": relay(session, "v_productivite_equipe"),
    }


def get_dashboard_section(session: Session, section: str) -> Any:
    """Dispatch one of DASHBOARD_SECTIONS to its reader."""
    readers = {
        "kpi": get_kpi,
        "equipes": get_equipes,
        "strates": get_strates,
        "accessibilite": get_accessibilite,
        "temporel": get_temporel,
    }
    if section not in readers:
        raise ValueError(f"Unknown dashboard section: {section!r}")
    return readers[section](session)
