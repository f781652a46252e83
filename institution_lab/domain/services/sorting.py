"""
Stable sorting of institution sequences.

Two disciplines are offered. ``sort_institutions`` never touches its input and
returns a fresh list; ``sort_institutions_in_place`` reorders a list the caller
owns and returns nothing. Both rely on Python's stable Timsort, so institutions
that compare equal keep their input order, and neither adds nor drops elements.
"""

from typing import Iterable, List, Optional

from institution_lab.domain.exceptions import InvalidInput
from institution_lab.domain.models.entities import EducationalInstitution
from institution_lab.domain.services.ordering import Ordering, ENROLLMENT_ASC_RATING_DESC


def sort_institutions(
    institutions: Optional[Iterable[EducationalInstitution]],
    ordering: Ordering = ENROLLMENT_ASC_RATING_DESC,
) -> List[EducationalInstitution]:
    """Return a new list holding ``institutions`` in ``ordering`` order."""
    if institutions is None:
        raise InvalidInput("Institutions to sort must not be None")
    return sorted(institutions, key=ordering.as_key())


def sort_institutions_in_place(
    institutions: List[EducationalInstitution],
    ordering: Ordering = ENROLLMENT_ASC_RATING_DESC,
) -> None:
    """Reorder ``institutions`` in place."""
    if institutions is None:
        raise InvalidInput("Institutions to sort must not be None")
    if not isinstance(institutions, list):
        raise InvalidInput(
            "In-place sorting needs a list",
            context={'type': type(institutions).__name__},
        )
    institutions.sort(key=ordering.as_key())
