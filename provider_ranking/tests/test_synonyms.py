import pytest

from provider_ranking.ranking.synonyms import (
    CUISINE,
    HEALTH_WELLNESS,
    HOME_SERVICES,
    SynonymTable,
    get_table,
    registered_tables,
)


def test_aliases_share_synonyms():
    assert HEALTH_WELLNESS.expand("dental") == HEALTH_WELLNESS.expand("dentist")
    assert HOME_SERVICES.expand("hvac") == HOME_SERVICES.expand("cooling")


def test_expand_is_case_insensitive():
    assert CUISINE.expand("Mexican") == CUISINE.expand("mexican")
    assert "taco" in CUISINE.expand("MEXICAN")


def test_unknown_value_expands_to_itself():
    assert CUISINE.expand("Ethiopian") == ("ethiopian",)


def test_synonyms_keep_declared_order():
    synonyms = CUISINE.expand("mexican")
    assert synonyms[0] == "mexican"
    assert synonyms[-1] == "texmex"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CUISINE.entries["thai"] = ("thai",)  # type: ignore[index]


def test_from_groups_dedupes_and_lowercases():
    table = SynonymTable.from_groups("t", [(("A", "b"), ["X", "x", "y"])])
    assert table.expand("a") == ("x", "y")
    assert table.expand("B") == ("x", "y")
    assert "A" in table
    assert len(table) == 2
    assert table.canonical_values() == ["a", "b"]


def test_get_table_by_category_and_field():
    assert get_table("restaurants-cafes", "cuisine") is CUISINE
    assert get_table("health-wellness", "goal") is HEALTH_WELLNESS
    assert get_table("real-estate", "need").expand("buy") == ("buy",)


def test_registry_covers_synonym_categories():
    categories = {category for category, _ in registered_tables()}
    assert categories == {"health-wellness", "home-services", "restaurants-cafes"}
