"""
Lab pipeline - coordinates printing, sorting and searching of an institution collection.
"""

from dataclasses import dataclass
from typing import List, Optional

from institution_lab.domain.exceptions import InvalidInput
from institution_lab.domain.interfaces.base import ILogger, IReporter
from institution_lab.domain.models.entities import EducationalInstitution, SearchResult
from institution_lab.domain.services.ordering import Ordering, ENROLLMENT_ASC_RATING_DESC
from institution_lab.domain.services.search import search_institution, find_institution_index
from institution_lab.domain.services.sorting import sort_institutions, sort_institutions_in_place

ORIGINAL_HEADING = "Original array"
SORTED_HEADING = "Sorted array (studentCount ASC, rating DESC)"
SEARCH_HEADING = "Search result"


@dataclass(frozen=True)
class PipelineOutcome:
    """What a pipeline run produced."""

    sorted_institutions: List[EducationalInstitution]
    target_result: SearchResult
    absent_index: int


class LabPipeline:
    """Runs build -> print -> sort -> print -> search -> report over a collection.

    The collection is passed in explicitly so alternative datasets can be run
    through the same steps.
    """

    def __init__(
        self,
        reporter: IReporter,
        logger: ILogger,
        ordering: Ordering = ENROLLMENT_ASC_RATING_DESC,
        sort_in_place: bool = False,
    ):
        self.reporter = reporter
        self.logger = logger
        self.ordering = ordering
        self.sort_in_place = sort_in_place

    def run(
        self,
        institutions: Optional[List[EducationalInstitution]],
        target: EducationalInstitution,
        absent: EducationalInstitution,
    ) -> PipelineOutcome:
        """Run every stage once, in order."""
        if institutions is None:
            raise InvalidInput("Pipeline needs an institution collection")

        self.logger.info("Pipeline started", component='pipeline', size=len(institutions))

        self.reporter.print_heading(ORIGINAL_HEADING)
        self.reporter.print_institutions(institutions)

        ordered = self._sort(institutions)

        self.reporter.print_heading(SORTED_HEADING)
        self.reporter.print_institutions(ordered)

        target_result = search_institution(ordered, target)
        self.logger.info("Target searched", component='search',
                         target=target, result=target_result)

        self.reporter.print_heading(SEARCH_HEADING)
        self.reporter.print_search_result(target_result)

        absent_index = find_institution_index(ordered, absent)
        self.logger.info("Absent institution searched", component='search',
                         target=absent, index=absent_index)
        self.reporter.print_absent_index(absent_index)

        self.logger.info("Pipeline finished", component='pipeline')
        return PipelineOutcome(
            sorted_institutions=ordered,
            target_result=target_result,
            absent_index=absent_index,
        )

    def _sort(self, institutions: List[EducationalInstitution]) -> List[EducationalInstitution]:
        if self.sort_in_place:
            sort_institutions_in_place(institutions, self.ordering)
            ordered = institutions
        else:
            ordered = sort_institutions(institutions, self.ordering)

        self.logger.info("Institutions sorted", component='sorter',
                         ordering=self.ordering.describe(), in_place=self.sort_in_place)
        self.logger.debug("Sorted order", component='sorter', institutions=ordered)
        return ordered
