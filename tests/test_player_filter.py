from player_filter import filter_players
from positions import Position


def test_empty_query_any_group_lists_everyone(catalog):
    assert filter_players(catalog, "", Position.ANY) == catalog.names()


def test_query_is_case_insensitive_substring(catalog):
    assert filter_players(catalog, "SMITH", Position.ANY) == ["Joe Smith", "Carl Smith"]
    assert filter_players(catalog, "n j", Position.ANY) == ["Dan Jones"]


def test_group_filter(catalog):
    assert filter_players(catalog, "", Position.G) == ["Joe Smith", "Carl Smith"]
    assert filter_players(catalog, "", Position.TALL) == [
        "Anna Cole", "Bob Jones", "Carl Smith", "Dan Jones",
    ]
    assert filter_players(catalog, "", Position.C) == ["Anna Cole", "Dan Jones"]
    assert filter_players(catalog, "smith", Position.F) == ["Carl Smith"]


def test_drafted_players_never_show(catalog):
    mine = ["Joe Smith"]
    others = ["Dan Jones"]
    for group in Position:
        for query in ("", "smith", "jones", "o"):
            result = filter_players(catalog, query, group, mine, others)
            assert "Joe Smith" not in result
            assert "Dan Jones" not in result


def test_result_capped_at_eight_in_catalog_order(make_catalog):
    catalog = make_catalog(*[(f"Player {i:02d}", ["SF"]) for i in range(12)])

    result = filter_players(catalog, "player", Position.ANY)

    assert result == [f"Player {i:02d}" for i in range(8)]


def test_custom_limit(catalog):
    assert filter_players(catalog, "", Position.ANY, limit=2) == ["Joe Smith", "Anna Cole"]


def test_same_inputs_same_output(catalog):
    first = filter_players(catalog, "o", Position.TALL, ["Bob Jones"])
    second = filter_players(catalog, "o", Position.TALL, ["Bob Jones"])
    assert first == second == ["Anna Cole", "Dan Jones"]


def test_no_match(catalog):
    assert filter_players(catalog, "zzz", Position.ANY) == []
