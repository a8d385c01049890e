from sqlalchemy import (
    Boolean,
    Column,
    Float,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class IfnProgramme(Base):
    """Planned plot (placette) scheduled for a field visit."""

    __tablename__ = "ifn_programme"

    num_placette = Column(String(50), primary_key=True)
    id = Column(String(50))
    # Required by the store, mapped nullable so incomplete rows still list
    x_centre = Column(Float)
    y_centre = Column(Float)
    srs_id = Column(String(20))
    round_d = Column(Integer)

    x_repere = Column(Float)
    y_repere = Column(Float)
    distance_repere = Column(Float)
    azimut_repere = Column(Float)
    description_repere = Column(Text)

    dranef = Column(String(100), index=True)
    dpanef = Column(String(100), index=True)
    equipe = Column(String(150), index=True)

    altitude = Column(Integer)
    exposition = Column(Integer)
    pente = Column(Integer)

    strate_cartographique = Column(String(20))
    essence_group = Column(String(100))

    xutm84 = Column(Integer)
    yutm84 = Column(Integer)

    observations = Column(Text)


class Plot(Base):
    """Surveyed plot as collected in the field."""

    __tablename__ = "plot"

    plot_no = Column(String(50), primary_key=True)

    # Location
    plot_coordinate_center_x = Column(Float)
    plot_coordinate_center_y = Column(Float)
    plot_coordinate_center_srs = Column(String(20))
    plot_coordinate_acces_x = Column(Float)
    plot_coordinate_acces_y = Column(Float)
    plot_repere_coord_x = Column(Float)
    plot_repere_coord_y = Column(Float)
    plot_distance_centre = Column(Float)
    plot_azimut_centre = Column(Integer)

    # Topography
    plot_elevation = Column("donnees_topographiques_plot_elevation", Integer)
    plot_pente = Column("donnees_topographiques_plot_pente", Float)
    plot_exposition = Column("donnees_topographiques_plot_topo_exposition", Integer)
    plot_topo_position = Column("donnees_topographiques_plot_topo_position", Integer)

    # Stratum
    plot_stratum = Column(String(30))
    strate_terrain_essence = Column(String(10))
    strate_terrain_hauteur = Column(String(10))
    strate_terrain_densite = Column(Integer)
    strate_terrain_regime = Column(String(10))
    plot_stratum_interpretation = Column(String(20))
    plot_stratum_d = Column(String(100))

    # Accessibility
    plot_accessibilite = Column(Integer)
    plot_accessibility_a_pied = Column(Integer)
    plot_center = Column(Boolean)
    plot_repere_accessibilite = Column(Boolean)

    # Regional info
    plot_dranef = Column(String(100), index=True)
    plot_dpanef = Column(String(100), index=True)

    # Survey dates
    plot_date_start_year = Column(Integer)
    plot_date_start_month = Column(Integer)
    plot_date_start_day = Column(Integer)
    plot_date_end_year = Column(Integer)
    plot_date_end_month = Column(Integer)
    plot_date_end_day = Column(Integer)

    # Vegetation cover
    couverture_vegetale_du_sol = Column("couverture_vegetale_couverture_du_sol", Integer)
    hauteur_moyenne_dominante = Column("couverture_vegetale_hauteur_moyenne_dominante", Float)

    # Pedology
    pedologique_substrat = Column("description_pedologique_substrat", Integer)
    pedologique_profondeur = Column("description_pedologique_profondeur_du_sol", Integer)

    # Validation
    plot_valide = Column(Boolean, index=True)
    msg_valide = Column(Text)
    observations_identif = Column(Text)

    country_code = Column(Integer)
