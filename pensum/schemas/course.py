"""
Curriculum schemas for Pensum.

Defines Pydantic models for the static curriculum catalog:
- Course definitions (id, name, level, credits, syllabus link)
- Catalog with ordered courses and level lookups
"""

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator
from typing import Optional


DEFAULT_TOTAL_CAREER_CREDITS = 150


class Course(BaseModel):
    """A single course in the curriculum. Immutable once loaded."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    level: int = Field(..., ge=1)
    credits: int = Field(..., gt=0)
    reference_document: Optional[str] = None  # syllabus URI or relative path

    @field_validator('reference_document')
    @classmethod
    def blank_reference_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @property
    def has_reference(self) -> bool:
        return self.reference_document is not None

    @property
    def reference_url(self) -> Optional[str]:
        """reference_document when it is an absolute http(s) URL, else None."""
        if self.reference_document is None:
            return None
        scheme, _, rest = self.reference_document.partition("://")
        if scheme.lower() in ("http", "https") and rest:
            return self.reference_document
        return None


class Catalog(BaseModel):
    """
    Ordered list of courses for a curriculum.

    Course order is the order of the source file; level lookups keep it.
    """
    model_config = ConfigDict(frozen=True)

    name: str = "Pensum"
    total_career_credits: int = Field(default=DEFAULT_TOTAL_CAREER_CREDITS, gt=0)
    courses: list[Course] = []

    _index: dict[str, Course] = PrivateAttr(default_factory=dict)

    @model_validator(mode='after')
    def unique_ids(self):
        seen = set()
        for course in self.courses:
            if course.id in seen:
                raise ValueError(f"Duplicate course id: {course.id}")
            seen.add(course.id)
        return self

    def model_post_init(self, __context):
        self._index = {c.id: c for c in self.courses}

    def get(self, course_id: str) -> Optional[Course]:
        return self._index.get(course_id)

    def __contains__(self, course_id: object) -> bool:
        return course_id in self._index

    def __len__(self) -> int:
        return len(self.courses)

    @property
    def ids(self) -> list[str]:
        return [c.id for c in self.courses]

    @property
    def catalog_credits(self) -> int:
        """Sum of credits of every course listed (may differ from the career total)."""
        return sum(c.credits for c in self.courses)

    def levels(self) -> list[int]:
        """Distinct levels, ascending."""
        return sorted({c.level for c in self.courses})

    def courses_for_level(self, level: int) -> list[Course]:
        return [c for c in self.courses if c.level == level]
