"""
Resume Loader

Reads a resume record from YAML. Expected shape:

    first_name: Ada
    last_name: Lovelace
    profession: Mathematician
    description: ...
    contact_info:            # optional, every key optional
      email: ada@example.com
      github: ada
    skills:
      - Knitting                          # no proficiency
      - {label: Analysis, proficiency: strong}
    education:
      - school: Royal Institution
        start_year: 1840
        end_year: 1843
        field_of_study: Mathematics       # optional
        degree: {kind: bachelor, subject: Mathematics}   # optional
    work_experience:
      - {position: Analyst, company: ..., start_year: 1842, end_year: 1843, description: ...}
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping

from omegaconf import OmegaConf

from vitae.contexts.templating.exceptions import InvalidResumeStructureError
from vitae.contexts.templating.logger import log_resume_loaded
from vitae.contexts.templating.resume_data_structure import (
    ContactInfo,
    Degree,
    DegreeKind,
    Education,
    Proficiency,
    ResumeRecord,
    SkillEntry,
    Work,
)

REQUIRED_FIELDS = ["first_name", "last_name"]
CONTACT_FIELDS = ["email", "phone", "website", "github", "linkedin"]


def _require(data: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in data or data[key] is None:
        raise InvalidResumeStructureError(f"Missing required field '{key}' in {where}")
    return data[key]


def _as_list(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidResumeStructureError(f"Field '{key}' must be a list, got {type(value).__name__}")
    return value


def _as_year(value: Any, key: str, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidResumeStructureError(f"Field '{key}' in {where} must be an integer year, got {value!r}")
    return value


def parse_degree(value: Any) -> Degree:
    """
    Parse a degree from YAML.

    Accepts None (no degree), a bare kind string ("high_school", "none") or a
    mapping {kind, subject}.
    """
    if value is None:
        return Degree.none()

    if isinstance(value, str):
        kind, subject = value, None
    elif isinstance(value, dict):
        kind, subject = _require(value, "kind", "degree"), value.get("subject")
    else:
        raise InvalidResumeStructureError(f"Degree must be a string or mapping, got {value!r}")

    try:
        kind = DegreeKind(str(kind).strip().lower())
    except ValueError:
        valid = [k.value for k in DegreeKind]
        raise InvalidResumeStructureError(f"Unknown degree kind '{kind}'. Valid kinds: {valid}") from None

    return Degree(kind, subject)


def parse_skill(value: Any) -> SkillEntry:
    if isinstance(value, str):
        return SkillEntry(value)
    if isinstance(value, dict):
        label = _require(value, "label", "skill")
        proficiency = value.get("proficiency")
        return SkillEntry(str(label), None if proficiency is None else Proficiency.parse(proficiency))
    raise InvalidResumeStructureError(f"Skill must be a string or mapping, got {value!r}")


def parse_education(value: Dict[str, Any]) -> Education:
    if not isinstance(value, dict):
        raise InvalidResumeStructureError(f"Education entry must be a mapping, got {value!r}")
    where = "education entry"
    return Education(
        start_year=_as_year(_require(value, "start_year", where), "start_year", where),
        end_year=_as_year(_require(value, "end_year", where), "end_year", where),
        school=str(_require(value, "school", where)),
        field_of_study=value.get("field_of_study"),
        degree=parse_degree(value.get("degree")),
    )


def parse_work(value: Dict[str, Any]) -> Work:
    if not isinstance(value, dict):
        raise InvalidResumeStructureError(f"Work entry must be a mapping, got {value!r}")
    where = "work entry"
    return Work(
        start_year=_as_year(_require(value, "start_year", where), "start_year", where),
        end_year=_as_year(_require(value, "end_year", where), "end_year", where),
        position=str(_require(value, "position", where)),
        company=str(_require(value, "company", where)),
        description=str(value.get("description") or ""),
    )


def parse_contact_info(value: Any) -> ContactInfo:
    if value is None:
        return ContactInfo()
    if not isinstance(value, dict):
        raise InvalidResumeStructureError(f"contact_info must be a mapping, got {value!r}")

    unknown = sorted(set(value) - set(CONTACT_FIELDS))
    if unknown:
        raise InvalidResumeStructureError(
            f"Unknown contact fields {unknown}. Valid fields: {CONTACT_FIELDS}"
        )
    # YAML reads bare phone numbers as ints
    return ContactInfo(
        **{key: None if value.get(key) is None else str(value[key]) for key in CONTACT_FIELDS}
    )


def parse_resume_dict(data: Mapping[str, Any]) -> ResumeRecord:
    """
    Build a ResumeRecord from a plain dict.

    Args:
        data: Dict with the structure described in this module's docstring

    Returns:
        ResumeRecord

    Raises:
        InvalidResumeStructureError: If required fields are missing or malformed
        InvalidResumeError: If an entry violates a record invariant
    """
    if not isinstance(data, Mapping):
        raise InvalidResumeStructureError("Resume YAML must be a mapping at root level")

    for key in REQUIRED_FIELDS:
        _require(data, key, "resume")

    return ResumeRecord(
        first_name=str(data["first_name"]),
        last_name=str(data["last_name"]),
        profession=str(data.get("profession") or ""),
        description=str(data.get("description") or ""),
        contact_info=parse_contact_info(data.get("contact_info")),
        skills=[parse_skill(item) for item in _as_list(data, "skills")],
        education=[parse_education(item) for item in _as_list(data, "education")],
        work_experience=[parse_work(item) for item in _as_list(data, "work_experience")],
    )


def load_resume(resume_path: Path) -> ResumeRecord:
    """
    Load a resume record from a YAML file.

    Args:
        resume_path: Path to resume YAML

    Returns:
        ResumeRecord

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidResumeStructureError: If the YAML does not describe a resume
    """
    resume_path = Path(resume_path)
    if not resume_path.exists():
        raise FileNotFoundError(f"Resume file not found: {resume_path}")

    # Resume text is literal, "${...}" is not an interpolation here
    data = OmegaConf.to_container(OmegaConf.load(resume_path), resolve=False)
    resume = parse_resume_dict(data)

    log_resume_loaded(resume.full_name, resume_path)
    return resume
