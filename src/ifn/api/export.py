"""Export API: listings and GeoJSON written for external consumption."""

import csv
import json
from io import StringIO
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from ..database.record_repo import PLOT, PROGRAMME
from ..utils.time import utc_now_z
from .models import PlacetteRecord, PlotRecord, RecordModel
from .records_api import list_records, records_geojson

EXPORT_SCHEMA_VERSION = "1"
EXPORT_FORMATS = ("json", "csv", "geojson")

RECORD_DTOS: Dict[str, Type[RecordModel]] = {
    PROGRAMME: PlacetteRecord,
    PLOT: PlotRecord,
}


def dumps(data: Any, indent: Optional[int] = 2) -> str:
    """JSON text as the CLI and exports emit it (UTF-8 names kept, decimals/dates as strings)."""
    return json.dumps(data, indent=indent, ensure_ascii=False, default=str)


def _dto_for(kind: str) -> Type[RecordModel]:
    try:
        return RECORD_DTOS[kind]
    except KeyError:
        raise ValueError(f"Unknown record kind: {kind!r}") from None


def csv_columns(kind: str) -> List[str]:
    """Wire column names of a kind, in declaration order."""
    dto = _dto_for(kind)
    return [field.alias or to_camel(name) for name, field in dto.model_fields.items()]


def _write(output: str, out: Path | None) -> str:
    if out:
        out.write_text(output, encoding="utf-8", newline="")
        return f"Exported to {out}"
    return output


def export_records(
    session: Session,
    kind: str,
    filters: Optional[Mapping[str, Any]] = None,
    format: str = "json",
    out: Path | None = None,
    indent: Optional[int] = 2,
) -> str:
    """
    Export records of one kind.

    Args:
        session: SQLAlchemy session
        kind: "programme" or "plot"
        filters: Filter name -> value (listing precedence for json/csv,
            spatial precedence for geojson)
        format: "json" (export envelope), "csv" (flat, every field) or
            "geojson" (bare FeatureCollection)
        out: Output file path (if None, returns as string)
        indent: JSON indentation

    Returns:
        Exported data as string (if out is None) or a confirmation message

    Raises:
        ValueError: If the format or kind is unsupported
    """
    if format not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported format: {format}")

    if format == "geojson":
        return _write(dumps(records_geojson(session, kind, filters), indent=indent), out)

    dto = _dto_for(kind)
    records = [dto.model_validate(row).to_wire() for row in list_records(session, kind, filters)]

    if format == "json":
        export_data = {
            "export_schema_version": EXPORT_SCHEMA_VERSION,
            "exported_at_utc": utc_now_z(),
            "kind": kind,
            "count": len(records),
            "data": records,
        }
        return _write(dumps(export_data, indent=indent), out)

    columns = csv_columns(kind)
    output_buffer = StringIO()
    writer = csv.writer(output_buffer)
    writer.writerow(columns)
    for record in records:
        writer.writerow(["" if record.get(col) is None else record.get(col) for col in columns])
    return _write(output_buffer.getvalue(), out)
