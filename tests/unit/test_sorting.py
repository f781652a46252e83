"""
Unit tests for sorting institution sequences.
"""

from collections import Counter

import pytest

from institution_lab.domain.exceptions import InvalidInput
from institution_lab.domain.models.entities import EducationalInstitution
from institution_lab.domain.services.ordering import ENROLLMENT_ASC_RATING_DESC
from institution_lab.domain.services.sorting import sort_institutions, sort_institutions_in_place

EXPECTED_NAMES = [
    "Metro Vocational School",
    "Oldtown Academy",
    "Tech Valley Institute",
    "Riverside College",
    "Northbridge University",
    "Greenfield University",
]


class TestSortInstitutions:
    """Test the fresh-list discipline."""

    def test_lab_dataset_order(self, institutions):
        ordered = sort_institutions(institutions)
        assert [i.name for i in ordered] == EXPECTED_NAMES

    def test_adjacent_pairs_follow_ordering(self, institutions):
        ordered = sort_institutions(institutions)
        for a, b in zip(ordered, ordered[1:]):
            assert a.enrollment_count < b.enrollment_count or (
                a.enrollment_count == b.enrollment_count and a.rating >= b.rating
            )

    def test_input_untouched(self, institutions):
        snapshot = list(institutions)
        ordered = sort_institutions(institutions)

        assert institutions == snapshot
        assert ordered is not institutions

    def test_preserves_multiset(self, institutions):
        ordered = sort_institutions(institutions)
        assert Counter(ordered) == Counter(institutions)
        assert len(ordered) == len(institutions)

    def test_idempotent(self, institutions):
        once = sort_institutions(institutions)
        assert sort_institutions(once) == once

    def test_stable_for_full_ties(self):
        first = EducationalInstitution("First", "College", 1950, 500, 7.0)
        second = EducationalInstitution("Second", "Academy", 1960, 500, 7.0)
        third = EducationalInstitution("Third", "Institute", 1970, 500, 7.0)

        assert sort_institutions([second, first, third]) == [second, first, third]
        assert sort_institutions([third, second, first]) == [third, second, first]

    def test_signed_zero_ratings_not_treated_as_tie(self):
        positive = EducationalInstitution("Zero", "College", 2000, 100, 0.0)
        negative = EducationalInstitution("Zero", "College", 2000, 100, -0.0)

        assert sort_institutions([negative, positive]) == [positive, negative]
        assert sort_institutions([positive, negative]) == [positive, negative]

    def test_duplicates_kept(self, tech_valley):
        ordered = sort_institutions([tech_valley, tech_valley])
        assert len(ordered) == 2

    def test_empty(self):
        assert sort_institutions([]) == []

    def test_accepts_any_iterable(self, institutions):
        assert sort_institutions(tuple(institutions)) == sort_institutions(institutions)

    def test_none_rejected(self):
        with pytest.raises(InvalidInput):
            sort_institutions(None)


class TestSortInstitutionsInPlace:
    """Test the in-place discipline."""

    def test_reorders_callers_list(self, institutions):
        target = institutions
        result = sort_institutions_in_place(institutions)

        assert result is None
        assert institutions is target
        assert [i.name for i in institutions] == EXPECTED_NAMES

    def test_matches_fresh_list(self, institutions):
        fresh = sort_institutions(institutions)
        sort_institutions_in_place(institutions)
        assert institutions == fresh
        assert ENROLLMENT_ASC_RATING_DESC.is_sorted(institutions)

    def test_empty(self):
        items = []
        sort_institutions_in_place(items)
        assert items == []

    def test_rejects_non_list(self, institutions):
        with pytest.raises(InvalidInput, match="needs a list"):
            sort_institutions_in_place(tuple(institutions))

    def test_none_rejected(self):
        with pytest.raises(InvalidInput):
            sort_institutions_in_place(None)
