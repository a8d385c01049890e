"""GeoJSON projection for planned and surveyed plots.

Each kind has a fixed, ordered exposure table of (property key, record
attribute) pairs. The table is narrower than the full record: attributes
outside it never reach GeoJSON properties, and attributes inside it are
always emitted, as null when unset.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from ..database.record_repo import PLOT, PROGRAMME
from ..utils.logging import get_logger

logger = get_logger(__name__)

ExposureTable = Tuple[Tuple[str, str], ...]

PROGRAMME_PROPERTIES: ExposureTable = (
    ("numPlacette", "num_placette"),
    ("altitude", "altitude"),
    ("pente", "pente"),
    ("exposition", "exposition"),
    ("strateCartographique", "strate_cartographique"),
    ("essenceGroup", "essence_group"),
    ("dranef", "dranef"),
    ("dpanef", "dpanef"),
    ("equipe", "equipe"),
    ("xRepere", "x_repere"),
    ("yRepere", "y_repere"),
    ("distanceRepere", "distance_repere"),
    ("azimutRepere", "azimut_repere"),
    ("descriptionRepere", "description_repere"),
    ("observations", "observations"),
)

PLOT_PROPERTIES: ExposureTable = (
    ("plotNo", "plot_no"),
    ("plotElevation", "plot_elevation"),
    ("plotPente", "plot_pente"),
    ("plotExposition", "plot_exposition"),
    ("plotStratum", "plot_stratum"),
    ("strateTerrainEssence", "strate_terrain_essence"),
    ("plotStratumInterpretation", "plot_stratum_interpretation"),
    ("plotDranef", "plot_dranef"),
    ("plotDpanef", "plot_dpanef"),
    ("plotValide", "plot_valide"),
    ("plotRepereCoordX", "plot_repere_coord_x"),
    ("plotRepereCoordY", "plot_repere_coord_y"),
    ("plotDistanceCentre", "plot_distance_centre"),
    ("plotAzimutCentre", "plot_azimut_centre"),
    ("plotAccessibilite", "plot_accessibilite"),
    ("observationsIdentif", "observations_identif"),
)


@dataclass(frozen=True)
class ProjectionSpec:
    """Where a kind keeps its center coordinates and which properties it exposes."""
    x_attr: str
    y_attr: str
    properties: ExposureTable


PROJECTIONS: Dict[str, ProjectionSpec] = {
    PROGRAMME: ProjectionSpec("x_centre", "y_centre", PROGRAMME_PROPERTIES),
    PLOT: ProjectionSpec("plot_coordinate_center_x", "plot_coordinate_center_y", PLOT_PROPERTIES),
}


def projection_for(kind: str) -> ProjectionSpec:
    try:
        return PROJECTIONS[kind]
    except KeyError:
        raise ValueError(f"Unknown record kind: {kind!r}") from None


def property_keys(kind: str) -> Tuple[str, ...]:
    """Ordered GeoJSON property keys emitted for a kind."""
    return tuple(key for key, _ in projection_for(kind).properties)


def has_center(record: Any, spec: ProjectionSpec) -> bool:
    return getattr(record, spec.x_attr, None) is not None and getattr(record, spec.y_attr, None) is not None


def to_feature(record: Any, spec: ProjectionSpec) -> Dict[str, Any]:
    """Build one Point feature. Coordinates are [x, y] exactly as stored."""
    properties = {key: getattr(record, attr, None) for key, attr in spec.properties}
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [getattr(record, spec.x_attr), getattr(record, spec.y_attr)],
        },
        "properties": properties,
    }


def project(kind: str, records: Iterable[Any]) -> Dict[str, Any]:
    """
    Convert records of one kind into a GeoJSON FeatureCollection.

    Records missing either center coordinate are skipped; input order is
    preserved. totalFeatures counts emitted features, not input records.

    Args:
        kind: "programme" or "plot"
        records: Records exposing the kind's attributes (ORM rows or any
            attribute-bearing object)

    Returns:
        {"type": "FeatureCollection", "totalFeatures": n, "features": [...]}
    """
    spec = projection_for(kind)
    features: List[Dict[str, Any]] = []
    skipped = 0
    for record in records:
        if not has_center(record, spec):
            skipped += 1
            continue
        features.append(to_feature(record, spec))

    if skipped:
        logger.debug(f"{skipped} {kind} record(s) without center coordinates left out of GeoJSON")

    return {
        "type": "FeatureCollection",
        "totalFeatures": len(features),
        "features": features,
    }
