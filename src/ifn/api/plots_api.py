"""Plots API: surveyed plots (plot table).

Mirrors /api/plots, /api/plots/{plotNo}, /api/plots/count and
/api/plots/geojson. Filter precedence is dpanef > valide on every surface.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from ..database.record_repo import PLOT
from .models import CountResult, PlotRecord
from .records_api import count_records, get_record, list_records, records_geojson


def list_plots(
    session: Session,
    dpanef: Optional[str] = None,
    valide: Optional[bool] = None,
) -> List[PlotRecord]:
    rows = list_records(session, PLOT, {"dpanef": dpanef, "valide": valide})
    return [PlotRecord.model_validate(row) for row in rows]


def get_plot(session: Session, plot_no: str) -> Optional[PlotRecord]:
    row = get_record(session, PLOT, plot_no)
    if row is None:
        return None
    return PlotRecord.model_validate(row)


def count_plots(session: Session) -> CountResult:
    return CountResult(count=count_records(session, PLOT))


def plots_geojson(
    session: Session,
    dpanef: Optional[str] = None,
    valide: Optional[bool] = None,
) -> Dict[str, Any]:
    return records_geojson(session, PLOT, {"dpanef": dpanef, "valide": valide})
