"""
Literal institution dataset used by the lab run.
"""

from typing import List

from institution_lab.domain.models.entities import EducationalInstitution


def build_institutions() -> List[EducationalInstitution]:
    """Build the fixed collection, in its original order."""
    return [
        EducationalInstitution("Greenfield University", "University", 1965, 12000, 8.7),
        EducationalInstitution("Riverside College", "College", 1978, 8500, 7.9),
        EducationalInstitution("Tech Valley Institute", "Institute", 1992, 8500, 9.1),
        EducationalInstitution("Metro Vocational School", "Vocational", 2005, 1500, 6.8),
        EducationalInstitution("Oldtown Academy", "Academy", 1890, 2300, 8.0),
        EducationalInstitution("Northbridge University", "University", 1988, 12000, 8.9),
    ]


def build_search_target() -> EducationalInstitution:
    """A fresh instance identical to one already in the collection."""
    return EducationalInstitution("Tech Valley Institute", "Institute", 1992, 8500, 9.1)


def build_absent_institution() -> EducationalInstitution:
    """An institution that never appears in the collection."""
    return EducationalInstitution("Non Existent College", "College", 2020, 500, 5.5)
