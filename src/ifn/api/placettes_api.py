"""Placettes API: planned plots (ifn_programme).

Mirrors /api/placettes, /api/placettes/{numPlacette}, /api/placettes/count
and /api/placettes/geojson.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from ..database.record_repo import PROGRAMME
from .models import CountResult, PlacetteRecord
from .records_api import count_records, get_record, list_records, records_geojson


def list_placettes(
    session: Session,
    dpanef: Optional[str] = None,
    dranef: Optional[str] = None,
    equipe: Optional[str] = None,
    strate: Optional[str] = None,
    essence: Optional[str] = None,
) -> List[PlacetteRecord]:
    """
    List planned plots.

    Only one filter applies, chosen by precedence
    dpanef > dranef > equipe > strate > essence. No filter returns all.
    """
    rows = list_records(
        session,
        PROGRAMME,
        {"dpanef": dpanef, "dranef": dranef, "equipe": equipe, "strate": strate, "essence": essence},
    )
    return [PlacetteRecord.model_validate(row) for row in rows]


def get_placette(session: Session, num_placette: str) -> Optional[PlacetteRecord]:
    row = get_record(session, PROGRAMME, num_placette)
    if row is None:
        return None
    return PlacetteRecord.model_validate(row)


def count_placettes(session: Session) -> CountResult:
    return CountResult(count=count_records(session, PROGRAMME))


def placettes_geojson(
    session: Session,
    dpanef: Optional[str] = None,
    dranef: Optional[str] = None,
    strate: Optional[str] = None,
    essence: Optional[str] = None,
) -> Dict[str, Any]:
    """Planned plots as GeoJSON. Precedence dpanef > dranef > strate > essence (no equipe)."""
    return records_geojson(
        session,
        PROGRAMME,
        {"dpanef": dpanef, "dranef": dranef, "strate": strate, "essence": essence},
    )
