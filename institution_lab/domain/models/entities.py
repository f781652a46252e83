"""
Domain entities for the institution lab.
"""

import math
import struct
from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple

from institution_lab.domain.exceptions import InvalidEntity
from institution_lab.domain.interfaces.base import ValueObject

NOT_FOUND = -1


def _rating_bits(rating: float) -> int:
    """Return the IEEE 754 bit pattern of a rating."""
    return struct.unpack('>q', struct.pack('>d', rating))[0]


@dataclass(frozen=True, eq=False)
class EducationalInstitution(ValueObject):
    """An educational institution, validated on construction and immutable afterwards."""

    name: str
    category: str
    founding_year: int
    enrollment_count: int
    rating: float

    def __post_init__(self):
        """Validate institution after initialization."""
        self._validate_text('name', self.name)
        self._validate_text('category', self.category)
        self._validate_founding_year()
        self._validate_enrollment_count()
        self._validate_rating()

    @staticmethod
    def _validate_text(field_name: str, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidEntity(f"{field_name} must be a string", field=field_name, value=value)

        if not value.strip():
            raise InvalidEntity(f"{field_name} must be non-empty", field=field_name, value=value)

    def _validate_founding_year(self) -> None:
        """Validate founding year."""
        if not isinstance(self.founding_year, int) or isinstance(self.founding_year, bool):
            raise InvalidEntity("founding_year must be an integer",
                                field='founding_year', value=self.founding_year)

        if self.founding_year <= 0:
            raise InvalidEntity("founding_year must be positive",
                                field='founding_year', value=self.founding_year)

    def _validate_enrollment_count(self) -> None:
        """Validate enrollment count."""
        if not isinstance(self.enrollment_count, int) or isinstance(self.enrollment_count, bool):
            raise InvalidEntity("enrollment_count must be an integer",
                                field='enrollment_count', value=self.enrollment_count)

        if self.enrollment_count < 0:
            raise InvalidEntity("enrollment_count must be non-negative",
                                field='enrollment_count', value=self.enrollment_count)

    def _validate_rating(self) -> None:
        """Validate rating. Only finiteness is enforced, not the 0-100 convention."""
        if not isinstance(self.rating, (int, float)) or isinstance(self.rating, bool):
            raise InvalidEntity("rating must be a real number", field='rating', value=self.rating)

        try:
            value = float(self.rating)
        except OverflowError:
            raise InvalidEntity("rating must be a finite number", field='rating', value=self.rating)

        if math.isnan(value) or math.isinf(value):
            raise InvalidEntity("rating must be a finite number", field='rating', value=self.rating)

        # Ratings given as ints are kept as floats
        object.__setattr__(self, 'rating', value)

    def identity_key(self) -> Tuple[str, str, int, int, int]:
        """Fields that define structural equality, with the rating compared bitwise."""
        return (
            self.name,
            self.category,
            self.founding_year,
            self.enrollment_count,
            _rating_bits(self.rating),
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, EducationalInstitution):
            return NotImplemented
        return self.identity_key() == other.identity_key()

    def __hash__(self) -> int:
        return hash(self.identity_key())

    def __str__(self) -> str:
        return (f"{self.name} ({self.category}) - founded: {self.founding_year}, "
                f"students: {self.enrollment_count}, rating: {self.rating:.2f}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert institution to dictionary for structured logging."""
        return {
            'name': self.name,
            'category': self.category,
            'founding_year': self.founding_year,
            'enrollment_count': self.enrollment_count,
            'rating': self.rating,
        }


def institutions_equal(left: Optional[EducationalInstitution],
                       right: Optional[EducationalInstitution]) -> bool:
    """Null-safe structural equality between two institutions."""
    if left is None or right is None:
        return left is right
    return left == right


@dataclass(frozen=True)
class SearchResult(ValueObject):
    """Outcome of a linear search over a sequence of institutions."""

    index: int = NOT_FOUND
    institution: Optional[EducationalInstitution] = None

    def __post_init__(self):
        """Validate search result."""
        if self.index < NOT_FOUND:
            raise ValueError(f"index must be {NOT_FOUND} or a valid position, got {self.index}")

        if (self.index == NOT_FOUND) != (self.institution is None):
            raise ValueError("A found result needs an institution and a missing one must not have one")

    @property
    def found(self) -> bool:
        return self.index != NOT_FOUND
