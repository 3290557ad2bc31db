from provider_ranking.ranking.matching import (
    contains_keyword,
    count_tags_in,
    has_tag,
    matches,
    matches_any,
)


class TestMatches:
    def test_tag_contains_synonym(self):
        assert matches("Mexican Restaurant", ["mexican"])

    def test_synonym_contains_tag(self):
        assert matches("mex", ["tex-mex"])

    def test_case_insensitive(self):
        assert matches("DENTIST", ["Dentist"])

    def test_no_overlap(self):
        assert not matches("italian", ["mexican", "taco"])

    def test_empty_tag_never_matches(self):
        assert not matches("", ["mexican"])
        assert not matches("   ", ["mexican"])

    def test_short_token_false_positive_is_kept(self):
        # "ant" is a pest-control synonym and sits inside "restaurant"
        assert matches("restaurant", ["ant"])


def test_matches_any():
    assert matches_any(["family", "taco"], ("mexican", "taco"))
    assert not matches_any(["family"], ("mexican", "taco"))
    assert not matches_any([], ("mexican",))


def test_matches_any_accepts_generator():
    synonyms = (s for s in ["pizza", "pasta"])
    assert matches_any(["wood-fired", "pasta bar"], synonyms)


def test_contains_keyword_is_one_directional():
    assert contains_keyword(["open weekends"], "weekend")
    assert not contains_keyword(["weekend"], "open weekends")
    assert not contains_keyword(["anything"], "")


def test_has_tag_exact_case_insensitive():
    assert has_tag(["Buy", "condo"], "buy")
    assert not has_tag(["buyer"], "buy")


def test_count_tags_in():
    assert count_tags_in(["Bar", "pub", "BAR grill"], {"bar", "pub"}) == 2
    assert count_tags_in([], {"bar"}) == 0
