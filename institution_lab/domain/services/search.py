"""
Linear search by structural equality.
"""

from typing import Optional, Sequence

from institution_lab.domain.exceptions import InvalidInput
from institution_lab.domain.models.entities import (
    EducationalInstitution, SearchResult, NOT_FOUND, institutions_equal
)


def find_institution_index(
    institutions: Optional[Sequence[EducationalInstitution]],
    target: Optional[EducationalInstitution],
) -> int:
    """Return the index of the first institution equal to ``target``, or ``NOT_FOUND``.

    The sequence may be in any order. An empty sequence is valid and yields
    ``NOT_FOUND``; a missing one raises ``InvalidInput``.
    """
    if institutions is None:
        raise InvalidInput("Institutions to search must not be None")

    for index, institution in enumerate(institutions):
        if institutions_equal(institution, target):
            return index
    return NOT_FOUND


def search_institution(
    institutions: Optional[Sequence[EducationalInstitution]],
    target: Optional[EducationalInstitution],
) -> SearchResult:
    """Search and wrap the outcome together with the matched element."""
    index = find_institution_index(institutions, target)
    if index == NOT_FOUND:
        return SearchResult()
    return SearchResult(index=index, institution=institutions[index])
