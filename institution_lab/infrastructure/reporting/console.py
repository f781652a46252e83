"""
Console reporter for institution listings and search outcomes.
"""

import sys
from typing import Optional, Sequence, TextIO

from institution_lab.domain.models.entities import EducationalInstitution, SearchResult


class ConsoleReporter:
    """Writes reports to a text stream. Never modifies what it prints."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self._blocks_written = 0

    def print_heading(self, title: str) -> None:
        # Blank line between blocks, none before the first one
        if self._blocks_written:
            self._write("")
        self._write(f"=== {title} ===")
        self._blocks_written += 1

    def print_institutions(self, institutions: Optional[Sequence[EducationalInstitution]]) -> None:
        if institutions is None:
            self._write("[null array]")
            return
        for index, institution in enumerate(institutions):
            self._write(f"[{index}] {institution}")

    def print_search_result(self, result: SearchResult) -> None:
        if result.found:
            self._write(f"Found identical institution at index {result.index}: {result.institution}")
        else:
            self._write("No identical institution found in the array.")

    def print_absent_index(self, index: int) -> None:
        self._write("")
        self._write(f"Searching for a non-existing institution returns index: {index}")
        self._blocks_written += 1

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
