"""Tests for the surveyed plots API surface."""

from ifn.api.plots_api import count_plots, get_plot, list_plots, plots_geojson


def _ids(records):
    return [r.plot_no for r in records]


def test_list_valide_true_returns_validated_subset(plots, session):
    assert _ids(list_plots(session, valide=True)) == ["S1", "S3"]


def test_list_valide_false(plots, session):
    assert _ids(list_plots(session, valide=False)) == ["S2"]


def test_list_dpanef_wins_over_valide(plots, session):
    assert _ids(list_plots(session, dpanef="Ifrane", valide=False)) == ["S3", "S4"]


def test_list_all(plots, session):
    assert _ids(list_plots(session)) == ["S1", "S2", "S3", "S4"]


def test_list_exposes_full_record(plots, session):
    wire = list_plots(session, valide=False)[0].to_wire()
    assert wire["plotNo"] == "S2"
    assert wire["msgValide"] == "Azimut manquant"
    assert wire["plotValide"] is False
    assert wire["plotCoordinateCenterX"] == -5.9
    assert "plotDateStartYear" in wire
    assert "couvertureVegetaleDuSol" in wire


def test_get_plot(plots, session):
    assert get_plot(session, "S1").plot_elevation == 120
    assert get_plot(session, "S404") is None


def test_count_plots(plots, session):
    assert count_plots(session).count == 4


def test_geojson_valide_filter(plots, session):
    collection = plots_geojson(session, valide=True)
    # S3 has no center y
    assert [f["properties"]["plotNo"] for f in collection["features"]] == ["S1"]
    assert collection["totalFeatures"] == 1


def test_geojson_dpanef_filter(plots, session):
    collection = plots_geojson(session, dpanef="Ifrane", valide=True)
    assert [f["properties"]["plotNo"] for f in collection["features"]] == ["S4"]
    assert collection["features"][0]["properties"]["plotValide"] is None


def test_listing_and_geojson_differ_only_by_coordinate_rule(plots, session):
    listed = _ids(list_plots(session))
    projected = [f["properties"]["plotNo"] for f in plots_geojson(session)["features"]]
    assert projected == [plot_no for plot_no in listed if plot_no != "S3"]
