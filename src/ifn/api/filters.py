"""Filter resolution: pick one store query from a set of optional filters.

Filters are not combined. Each surface declares an ordered tuple of
candidates; the first candidate whose value is present (not None) becomes
the single equality query and every other filter is ignored. When nothing
is present the query selects every record of the kind.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..database.record_repo import PLOT, PROGRAMME
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FilterCandidate:
    """A recognized filter: accepted parameter names and the store field it matches."""
    names: Tuple[str, ...]
    field: str

    @property
    def name(self) -> str:
        return self.names[0]


@dataclass(frozen=True)
class RecordQuery:
    """One store query: equality on a field, or every record when field is None."""
    kind: str
    field: Optional[str] = None
    value: Any = None
    filter_name: Optional[str] = None

    @property
    def is_unfiltered(self) -> bool:
        return self.field is None


PROGRAMME_FILTERS: Tuple[FilterCandidate, ...] = (
    FilterCandidate(("dpanef",), "dpanef"),
    FilterCandidate(("dranef",), "dranef"),
    FilterCandidate(("equipe",), "equipe"),
    FilterCandidate(("strate", "strateCartographique"), "strate_cartographique"),
    FilterCandidate(("essence", "essenceGroup"), "essence_group"),
)

# equipe is not offered as a spatial filter
PROGRAMME_SPATIAL_FILTERS: Tuple[FilterCandidate, ...] = tuple(
    c for c in PROGRAMME_FILTERS if c.name != "equipe"
)

PLOT_FILTERS: Tuple[FilterCandidate, ...] = (
    FilterCandidate(("dpanef",), "plot_dpanef"),
    FilterCandidate(("valide",), "plot_valide"),
)

PRECEDENCE: Dict[Tuple[str, bool], Tuple[FilterCandidate, ...]] = {
    (PROGRAMME, False): PROGRAMME_FILTERS,
    (PROGRAMME, True): PROGRAMME_SPATIAL_FILTERS,
    (PLOT, False): PLOT_FILTERS,
    (PLOT, True): PLOT_FILTERS,
}


def precedence_for(kind: str, spatial: bool = False) -> Tuple[FilterCandidate, ...]:
    """Ordered filter candidates for a kind and surface (listing or GeoJSON)."""
    try:
        return PRECEDENCE[(kind, spatial)]
    except KeyError:
        raise ValueError(f"Unknown record kind: {kind!r}") from None


def recognized_filter_names(kind: str, spatial: bool = False) -> Tuple[str, ...]:
    return tuple(name for c in precedence_for(kind, spatial) for name in c.names)


def _candidate_value(candidate: FilterCandidate, filters: Mapping[str, Any]) -> Any:
    for name in candidate.names:
        value = filters.get(name)
        if value is not None:
            return value
    return None


def resolve(
    kind: str,
    filters: Optional[Mapping[str, Any]] = None,
    spatial: bool = False,
) -> RecordQuery:
    """
    Resolve optional filters into a single RecordQuery.

    Args:
        kind: "programme" or "plot"
        filters: Filter name -> value. None values are absent. False and ""
            are present values.
        spatial: True for the GeoJSON surface (programme drops equipe)

    Returns:
        RecordQuery for the highest-precedence present filter, or an
        unfiltered query when none is present. Unrecognized names are ignored.
    """
    candidates = precedence_for(kind, spatial)
    filters = filters or {}

    ignored = set(filters) - set(recognized_filter_names(kind, spatial))
    if ignored:
        logger.debug(f"Ignoring unrecognized {kind} filters: {sorted(ignored)}")

    for candidate in candidates:
        value = _candidate_value(candidate, filters)
        if value is not None:
            logger.debug(f"Resolved {kind} filter {candidate.name}={value!r}")
            return RecordQuery(kind=kind, field=candidate.field, value=value, filter_name=candidate.name)

    return RecordQuery(kind=kind)
