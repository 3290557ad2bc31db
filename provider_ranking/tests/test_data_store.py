from __future__ import annotations

import pytest

from provider_ranking.ranking import data_store

SNAPSHOT = """id,name,category_key,tags,rating,featured
1,Alpha,generic,"a,b",4.0,False
2,Beta,generic,,,True
3,Gamma,other,c,3.5,false
"""


@pytest.fixture(autouse=True)
def restore_default_snapshot():
    yield
    data_store.reload()


def test_reload_groups_candidates_by_category(tmp_path):
    path = tmp_path / "snapshot.csv"
    path.write_text(SNAPSHOT)
    version = data_store.reload(path)

    assert version == data_store.get_snapshot_version()
    assert data_store.get_categories() == ["generic", "other"]

    alpha, beta = data_store.get_candidates("generic")
    assert alpha.tags == ("a", "b")
    assert alpha.rating == 4.0
    assert not alpha.featured
    assert beta.tags == ()
    assert beta.rating is None
    assert beta.featured


def test_version_changes_with_file_contents(tmp_path):
    path = tmp_path / "snapshot.csv"
    path.write_text(SNAPSHOT)
    first = data_store.reload(path)
    path.write_text(SNAPSHOT + "4,Delta,other,,,false\n")
    second = data_store.reload(path)
    assert first != second
    assert len(data_store.get_candidates("other")) == 2


def test_missing_file_serves_empty_snapshot(tmp_path):
    assert data_store.reload(tmp_path / "missing.csv") == "empty"
    assert data_store.get_categories() == []
    assert data_store.get_candidates("generic") == ()


def test_default_snapshot_ships_sample_categories():
    data_store.reload()
    assert "real-estate" in data_store.get_categories()
    assert len(data_store.get_candidates("restaurants-cafes")) == 5


def test_featured_flag_uses_ingestion_truthiness(tmp_path):
    path = tmp_path / "snapshot.csv"
    path.write_text(
        "id,name,category_key,tags,rating,featured\n"
        "1,A,generic,,,yes\n"
        "2,B,generic,,,1\n"
        "3,C,generic,,,t\n"
        "4,D,generic,,,TRUE\n"
    )
    data_store.reload(path)
    flags = {c.name: c.featured for c in data_store.get_candidates("generic")}
    assert flags == {"A": False, "B": False, "C": True, "D": True}
