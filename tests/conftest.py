"""Pytest configuration and fixtures."""

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from ifn.database.schema import Base, IfnProgramme, Plot


@pytest.fixture
def engine():
    """In-memory SQLite store with both record tables."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine):
    """Create a temporary in-memory database session for testing."""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_placette(num_placette, **fields):
    defaults = {"x_centre": -6.5, "y_centre": 34.2}
    defaults.update(fields)
    return IfnProgramme(num_placette=num_placette, **defaults)


def make_plot(plot_no, **fields):
    defaults = {"plot_coordinate_center_x": -5.9, "plot_coordinate_center_y": 33.8}
    defaults.update(fields)
    return Plot(plot_no=plot_no, **defaults)


@pytest.fixture
def placettes(session):
    """Planned plots covering every filter field; P4 has no x_centre."""
    rows = [
        make_placette(
            "P1",
            altitude=800,
            dpanef="Kénitra",
            dranef="Rabat-Salé-Kénitra",
            equipe="Equipe Kénitra (N°01/26)",
            strate_cartographique="QsH",
            essence_group="Quercus suber",
        ),
        make_placette(
            "P2",
            dpanef="Khémisset",
            dranef="Rabat-Salé-Kénitra",
            equipe="Equipe Khémisset (N°02/26)",
            strate_cartographique="QsH",
            essence_group="Quercus suber",
        ),
        make_placette(
            "P3",
            dpanef="Ifrane",
            dranef="Fès-Meknès",
            equipe="Equipe Ifrane (N°03/26)",
            strate_cartographique="Cd",
            essence_group="Cedrus atlantica",
        ),
        make_placette(
            "P4",
            x_centre=None,
            dpanef="Kénitra",
            dranef="Rabat-Salé-Kénitra",
            equipe="Equipe Kénitra (N°01/26)",
            strate_cartographique="Eu",
            essence_group="Eucalyptus",
        ),
    ]
    session.add_all(rows)
    session.commit()
    return rows


@pytest.fixture
def plots(session):
    """Surveyed plots; S3 has no center y, S4 has unknown validation status."""
    rows = [
        make_plot("S1", plot_dpanef="Kénitra", plot_dranef="Rabat-Salé-Kénitra", plot_valide=True, plot_elevation=120),
        make_plot("S2", plot_dpanef="Kénitra", plot_valide=False, msg_valide="Azimut manquant"),
        make_plot("S3", plot_dpanef="Ifrane", plot_valide=True, plot_coordinate_center_y=None),
        make_plot("S4", plot_dpanef="Ifrane", plot_valide=None, plot_stratum_interpretation="Cd"),
    ]
    session.add_all(rows)
    session.commit()
    return rows


DASHBOARD_TABLES = {
    "v_kpi_global": (
        "total_programme INTEGER, total_visitees INTEGER, restantes INTEGER, "
        "pct_avancement REAL, nb_jours_terrain INTEGER, moy_par_jour REAL"
    ),
    "v_avancement_equipe": (
        "equipe TEXT, total_affecte INTEGER, total_visite INTEGER, restantes INTEGER, "
        "pct_avancement REAL, moy_par_jour REAL"
    ),
    "v_avancement_strate": "strate TEXT, total_programme INTEGER, total_visite INTEGER, pct_avancement REAL",
    "v_accessibilite_global": (
        "total_visitees INTEGER, nb_accessible INTEGER, nb_a_pied INTEGER, "
        "pct_accessible REAL, pct_a_pied REAL"
    ),
    "v_accessibilite_equipe": (
        "equipe TEXT, total_visite INTEGER, nb_accessible INTEGER, nb_a_pied INTEGER, "
        "pct_accessible REAL, pct_a_pied REAL"
    ),
    "v_visites_par_jour": "date_visite TEXT, nb_placettes INTEGER, nb_accessibles INTEGER, cumul_placettes INTEGER",
    "v_moy_jour_equipe": "equipe TEXT, date_visite TEXT, nb_visite INTEGER, moy_par_jour REAL",
    "v_productivite_equipe": (
        "equipe TEXT, total_affecte INTEGER, visited INTEGER, nb_jours INTEGER, "
        "moy_par_jour REAL, jours_restants_estimes REAL"
    ),
}


@pytest.fixture
def dashboard_views(session):
    """Stand-ins for the store's aggregation views, created as plain tables."""
    for name, columns in DASHBOARD_TABLES.items():
        session.execute(text(f"CREATE TABLE {name} ({columns})"))
    session.commit()

    def insert(view_name, *rows):
        for row in rows:
            cols = ", ".join(row)
            params = ", ".join(f":{c}" for c in row)
            session.execute(text(f"INSERT INTO {view_name} ({cols}) VALUES ({params})"), row)
        session.commit()

    return insert
