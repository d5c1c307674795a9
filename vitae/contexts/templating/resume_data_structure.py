"""
Resume Record Data Structures

Defines the resume record consumed by the projector: personal details, contact
info, skills with optional proficiency, education history and work history.
All records are frozen dataclasses; sequences are stored as tuples.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, Optional, Tuple

from vitae.contexts.templating.exceptions import InvalidResumeError


class Proficiency(IntEnum):
    """Ordinal skill level, NONE < BARELY < SOME < STRONG < EXPERT."""

    NONE = 0
    BARELY = 1
    SOME = 2
    STRONG = 3
    EXPERT = 4

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def max_level(cls) -> "Proficiency":
        return max(cls)

    @classmethod
    def parse(cls, value) -> "Proficiency":
        """Accept a Proficiency, its name in any case, or its ordinal."""
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, int) and not isinstance(value, bool):
                return cls(value)
            return cls[str(value).strip().upper()]
        except (KeyError, ValueError):
            valid = [level.name.lower() for level in cls]
            raise InvalidResumeError(f"Unknown proficiency '{value}'. Valid levels: {valid}") from None


class DegreeKind(str, Enum):
    ASSOCIATE = "associate"
    BACHELOR = "bachelor"
    MASTER = "master"
    DOCTORATE = "doctorate"
    HIGH_SCHOOL = "high_school"
    OTHER = "other"
    NONE = "none"


# Kinds that read "<prefix> <subject>"
_DEGREE_PREFIXES = {
    DegreeKind.ASSOCIATE: "Associates degree of",
    DegreeKind.BACHELOR: "Bachelors degree of",
    DegreeKind.MASTER: "Masters degree of",
    DegreeKind.DOCTORATE: "PhD of",
}


@dataclass(frozen=True)
class Degree:
    """
    A degree earned at a school.

    Attributes:
        kind: Which degree this is
        subject: Qualifying subject for associate..doctorate, free text for OTHER
    """

    kind: DegreeKind
    subject: Optional[str] = None

    def __post_init__(self):
        if self.kind in _DEGREE_PREFIXES or self.kind == DegreeKind.OTHER:
            if not self.subject:
                raise InvalidResumeError(f"Degree kind '{self.kind.value}' requires a subject")

    @classmethod
    def associate(cls, subject: str) -> "Degree":
        return cls(DegreeKind.ASSOCIATE, subject)

    @classmethod
    def bachelor(cls, subject: str) -> "Degree":
        return cls(DegreeKind.BACHELOR, subject)

    @classmethod
    def master(cls, subject: str) -> "Degree":
        return cls(DegreeKind.MASTER, subject)

    @classmethod
    def doctorate(cls, subject: str) -> "Degree":
        return cls(DegreeKind.DOCTORATE, subject)

    @classmethod
    def high_school(cls) -> "Degree":
        return cls(DegreeKind.HIGH_SCHOOL)

    @classmethod
    def other(cls, description: str) -> "Degree":
        return cls(DegreeKind.OTHER, description)

    @classmethod
    def none(cls) -> "Degree":
        return cls(DegreeKind.NONE)

    @property
    def is_present(self) -> bool:
        return self.kind != DegreeKind.NONE

    def describe(self) -> str:
        """Human-readable phrase used in the education sentence."""
        if self.kind in _DEGREE_PREFIXES:
            return f"{_DEGREE_PREFIXES[self.kind]} {self.subject}"
        if self.kind == DegreeKind.HIGH_SCHOOL:
            return "high school diploma"
        if self.kind == DegreeKind.OTHER:
            return self.subject
        return ""


def _check_years(start_year: int, end_year: int, entry: str) -> None:
    for year in (start_year, end_year):
        if isinstance(year, bool) or not isinstance(year, int) or year < 0:
            raise InvalidResumeError(f"Years must be non-negative integers, got {year!r}", entry)
    if end_year < start_year:
        raise InvalidResumeError(f"End year {end_year} is before start year {start_year}", entry)


@dataclass(frozen=True)
class Education:
    """
    Single education history entry.

    Raises:
        InvalidResumeError: If end_year precedes start_year
    """

    start_year: int
    end_year: int
    school: str
    field_of_study: Optional[str] = None
    degree: Degree = field(default_factory=Degree.none)

    def __post_init__(self):
        _check_years(self.start_year, self.end_year, self.school)


@dataclass(frozen=True)
class Work:
    """
    Single work history entry.

    Raises:
        InvalidResumeError: If end_year precedes start_year
    """

    start_year: int
    end_year: int
    position: str
    company: str
    description: str = ""

    def __post_init__(self):
        _check_years(self.start_year, self.end_year, f"{self.position} at {self.company}")


@dataclass(frozen=True)
class SkillEntry:
    label: str
    proficiency: Optional[Proficiency] = None


def prepend_without_overlap(prefix: str, value: str) -> str:
    """
    Prepend prefix to value unless value already starts with it.

    Examples:
        >>> prepend_without_overlap("https://github.com/", "octocat")
        'https://github.com/octocat'
        >>> prepend_without_overlap("https://github.com/", "https://github.com/octocat")
        'https://github.com/octocat'
    """
    if value.startswith(prefix):
        return value
    return prefix + value


@dataclass(frozen=True)
class ContactInfo:
    """Contact details. Each field is independently present or absent."""

    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None

    def links(self) -> Iterator[Tuple[str, str]]:
        """
        Yield (label, url) for each present field, in declaration order.

        Handles are turned into full URLs; values that already carry a scheme
        are passed through.
        """
        if self.email:
            yield self.email, prepend_without_overlap("mailto:", self.email)
        if self.phone:
            yield self.phone, prepend_without_overlap("tel:", self.phone.replace(" ", ""))
        if self.website:
            yield self.website, _with_scheme(self.website, "https://")
        if self.github:
            yield self.github, _with_scheme(self.github, "https://github.com/")
        if self.linkedin:
            yield self.linkedin, _with_scheme(self.linkedin, "https://www.linkedin.com/in/")

    @property
    def is_empty(self) -> bool:
        return next(self.links(), None) is None


def _with_scheme(value: str, prefix: str) -> str:
    if "://" in value:
        return value
    return prepend_without_overlap(prefix, value)


@dataclass(frozen=True)
class ResumeRecord:
    """
    Complete resume record.

    Attributes:
        first_name: Given name
        last_name: Family name
        profession: Free-text professional title
        description: Free-text summary paragraph
        contact_info: Optional contact fields
        skills: Ordered skill entries
        education: Ordered education history
        work_experience: Ordered work history
    """

    first_name: str
    last_name: str
    profession: str = ""
    description: str = ""
    contact_info: ContactInfo = field(default_factory=ContactInfo)
    skills: Tuple[SkillEntry, ...] = ()
    education: Tuple[Education, ...] = ()
    work_experience: Tuple[Work, ...] = ()

    def __post_init__(self):
        for name in ("skills", "education", "work_experience"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
