"""Record DTOs for the listing surface.

These carry every stored attribute (the full record), unlike the GeoJSON
properties. Serialize with model_dump(by_alias=True) to get the camelCase
wire keys (numPlacette, xCentre, plotCoordinateCenterX, ...).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Camel-cased dict with every field, unset ones as None."""
        return self.model_dump(by_alias=True)


class PlacetteRecord(RecordModel):
    """Planned plot (ifn_programme row)."""
    num_placette: str
    id: Optional[str] = None
    x_centre: Optional[float] = None
    y_centre: Optional[float] = None
    srs_id: Optional[str] = None
    round_d: Optional[int] = None
    x_repere: Optional[float] = None
    y_repere: Optional[float] = None
    distance_repere: Optional[float] = None
    azimut_repere: Optional[float] = None
    description_repere: Optional[str] = None
    dranef: Optional[str] = None
    dpanef: Optional[str] = None
    equipe: Optional[str] = None
    altitude: Optional[int] = None
    exposition: Optional[int] = None
    pente: Optional[int] = None
    strate_cartographique: Optional[str] = None
    essence_group: Optional[str] = None
    xutm84: Optional[int] = None
    yutm84: Optional[int] = None
    observations: Optional[str] = None


class PlotRecord(RecordModel):
    """Surveyed plot (plot row)."""
    plot_no: str

    plot_coordinate_center_x: Optional[float] = None
    plot_coordinate_center_y: Optional[float] = None
    plot_coordinate_center_srs: Optional[str] = None
    plot_coordinate_acces_x: Optional[float] = None
    plot_coordinate_acces_y: Optional[float] = None
    plot_repere_coord_x: Optional[float] = None
    plot_repere_coord_y: Optional[float] = None
    plot_distance_centre: Optional[float] = None
    plot_azimut_centre: Optional[int] = None

    plot_elevation: Optional[int] = None
    plot_pente: Optional[float] = None
    plot_exposition: Optional[int] = None
    plot_topo_position: Optional[int] = None

    plot_stratum: Optional[str] = None
    strate_terrain_essence: Optional[str] = None
    strate_terrain_hauteur: Optional[str] = None
    strate_terrain_densite: Optional[int] = None
    strate_terrain_regime: Optional[str] = None
    plot_stratum_interpretation: Optional[str] = None
    plot_stratum_d: Optional[str] = None

    plot_accessibilite: Optional[int] = None
    plot_accessibility_a_pied: Optional[int] = None
    plot_center: Optional[bool] = None
    plot_repere_accessibilite: Optional[bool] = None

    plot_dranef: Optional[str] = None
    plot_dpanef: Optional[str] = None

    plot_date_start_year: Optional[int] = None
    plot_date_start_month: Optional[int] = None
    plot_date_start_day: Optional[int] = None
    plot_date_end_year: Optional[int] = None
    plot_date_end_month: Optional[int] = None
    plot_date_end_day: Optional[int] = None

    couverture_vegetale_du_sol: Optional[int] = None
    hauteur_moyenne_dominante: Optional[float] = None

    pedologique_substrat: Optional[int] = None
    pedologique_profondeur: Optional[int] = None

    plot_valide: Optional[bool] = None
    msg_valide: Optional[str] = None
    observations_identif: Optional[str] = None

    country_code: Optional[int] = None


class CountResult(BaseModel):
    """Count response: {"count": n}."""
    count: int
