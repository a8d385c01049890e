"""Repository functions for the two record kinds (planned and surveyed plots).

Read-only. Every call issues exactly one query and returns rows in
store-native order.
"""

from typing import Any, Dict, List, Optional, Type

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ifn.database.schema import Base, IfnProgramme, Plot
from ifn.utils.logging import get_logger

logger = get_logger(__name__)

PROGRAMME = "programme"
PLOT = "plot"

RECORD_MODELS: Dict[str, Type[Base]] = {
    PROGRAMME: IfnProgramme,
    PLOT: Plot,
}


class UnknownRecordKind(ValueError):
    """Raised when a kind other than 'programme' or 'plot' is requested."""


def _model_for(kind: str) -> Type[Base]:
    try:
        return RECORD_MODELS[kind]
    except KeyError:
        raise UnknownRecordKind(
            f"Unknown record kind: {kind!r} (expected one of {sorted(RECORD_MODELS)})"
        ) from None


def _column_for(model: Type[Base], field_name: str):
    if field_name not in model.__mapper__.column_attrs:
        raise ValueError(f"{model.__name__} has no field {field_name!r}")
    return getattr(model, field_name)


def get_by_id(session: Session, kind: str, record_id: str) -> Optional[Any]:
    """
    Get a single record by primary key.

    Returns:
        The record, or None if no record has that identity
    """
    model = _model_for(kind)
    return session.get(model, record_id)


def get_all(session: Session, kind: str) -> List[Any]:
    """Get every record of a kind."""
    model = _model_for(kind)
    return list(session.scalars(select(model)).all())


def get_by_field(session: Session, kind: str, field_name: str, value: Any) -> List[Any]:
    """
    Get records whose field equals value exactly.

    Args:
        session: SQLAlchemy session
        kind: Record kind ("programme" or "plot")
        field_name: Mapped attribute name (e.g. "dpanef", "plot_valide")
        value: Value to match; None matches nothing (use get_all for "no filter")

    Returns:
        Matching records in store-native order

    Raises:
        UnknownRecordKind: If kind is not known
        ValueError: If field_name is not a mapped column of the kind
    """
    model = _model_for(kind)
    column = _column_for(model, field_name)
    logger.debug(f"Querying {kind} where {field_name} == {value!r}")
    return list(session.scalars(select(model).where(column == value)).all())


def count(session: Session, kind: str) -> int:
    """Total number of records of a kind."""
    model = _model_for(kind)
    return session.scalar(select(func.count()).select_from(model)) or 0
