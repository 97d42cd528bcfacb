from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Course:
    name: str
    duration: int
    url: str


@dataclass(frozen=True)
class CrawlResult:
    courses: Tuple[Course, ...]

    @property
    def total_minutes(self) -> int:
        return sum(course.duration for course in self.courses)

    @property
    def hours_minutes(self) -> Tuple[int, int]:
        return divmod(self.total_minutes, 60)
