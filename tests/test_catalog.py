import pytest

from catalog import Catalog, CatalogError, load_catalog
from positions import Position


def test_load_catalog_reads_records_in_order(write_catalog, make_record):
    path = write_catalog([
        make_record("Joe Smith", ["PG"], team="LAL"),
        make_record("Anna Cole", ["PF", "C"]),
    ])

    catalog = load_catalog(path)

    assert len(catalog) == 2
    assert catalog.names() == ["Joe Smith", "Anna Cole"]
    joe = catalog.get("Joe Smith")
    assert joe.team == "LAL"
    assert joe.positions == (Position.PG,)
    assert joe.pick_avg == 12.5
    assert joe.round_avg == 2.1
    assert joe.draft_percent == "99.0%"
    assert catalog.get("Anna Cole").positions_label == "PF/C"


def test_lookup_helpers(catalog):
    assert "Joe Smith" in catalog
    assert "Nobody" not in catalog
    assert catalog.get("Nobody") is None
    assert [p.name for p in catalog][0] == "Joe Smith"


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "nope.json")


def test_broken_json_is_fatal(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_missing_field_is_fatal(write_catalog, make_record):
    record = make_record("Joe Smith", ["PG"])
    del record["pick_avg"]
    with pytest.raises(CatalogError):
        load_catalog(write_catalog([record]))


def test_unknown_position_code_is_fatal(write_catalog, make_record):
    with pytest.raises(CatalogError):
        load_catalog(write_catalog([make_record("Joe Smith", ["QB"])]))


def test_query_group_is_not_a_player_position(write_catalog, make_record):
    with pytest.raises(CatalogError):
        load_catalog(write_catalog([make_record("Joe Smith", ["G"])]))


def test_duplicate_names_are_fatal(write_catalog, make_record):
    path = write_catalog([make_record("Joe Smith", ["PG"]), make_record("Joe Smith", ["SG"])])
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_from_records_validates():
    with pytest.raises(CatalogError):
        Catalog.from_records([{"name": "Joe Smith"}])
