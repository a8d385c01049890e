"""Tests for the planned plots (placettes) API surface."""

from ifn.api.placettes_api import (
    count_placettes,
    get_placette,
    list_placettes,
    placettes_geojson,
)


def _ids(records):
    return [r.num_placette for r in records]


def test_list_without_filters_returns_everything(placettes, session):
    assert _ids(list_placettes(session)) == ["P1", "P2", "P3", "P4"]


def test_list_dpanef_and_strate_returns_dpanef_result(placettes, session):
    both = list_placettes(session, dpanef="Kénitra", strate="QsH")
    alone = list_placettes(session, dpanef="Kénitra")
    assert _ids(both) == _ids(alone) == ["P1", "P4"]


def test_list_each_filter(placettes, session):
    assert _ids(list_placettes(session, dranef="Fès-Meknès")) == ["P3"]
    assert _ids(list_placettes(session, equipe="Equipe Khémisset (N°02/26)")) == ["P2"]
    assert _ids(list_placettes(session, strate="QsH")) == ["P1", "P2"]
    assert _ids(list_placettes(session, essence="Eucalyptus")) == ["P4"]


def test_list_keeps_records_without_coordinates(placettes, session):
    records = list_placettes(session, dpanef="Kénitra")
    p4 = [r for r in records if r.num_placette == "P4"][0]
    assert p4.x_centre is None


def test_list_returns_full_record_in_camel_case(placettes, session):
    wire = list_placettes(session, dpanef="Ifrane")[0].to_wire()
    assert wire["numPlacette"] == "P3"
    assert wire["xCentre"] == -6.5
    assert wire["strateCartographique"] == "Cd"
    # Attributes outside the GeoJSON table still appear in listings
    assert "xutm84" in wire
    assert "srsId" in wire
    assert wire["observations"] is None


def test_get_placette(placettes, session):
    record = get_placette(session, "P2")
    assert record.dpanef == "Khémisset"


def test_get_placette_not_found(placettes, session):
    assert get_placette(session, "P404") is None


def test_count_placettes(placettes, session):
    assert count_placettes(session).model_dump() == {"count": 4}


def test_geojson_excludes_missing_coordinates(placettes, session):
    collection = placettes_geojson(session, dpanef="Kénitra")
    assert [f["properties"]["numPlacette"] for f in collection["features"]] == ["P1"]
    assert collection["totalFeatures"] == 1


def test_geojson_without_filters(placettes, session):
    collection = placettes_geojson(session)
    assert collection["totalFeatures"] == 3


def test_geojson_precedence(placettes, session):
    collection = placettes_geojson(session, dranef="Fès-Meknès", strate="QsH")
    assert [f["properties"]["numPlacette"] for f in collection["features"]] == ["P3"]
