"""
Templating Context

Responsibilities:
- Manages the resume record representation and loads it from YAML
- Defines the document tree (the intermediate representation rendered to HTML)
- Projects a resume record onto the canonical document layout

Owns: Resume record, document tree, layout policy
Never: Chooses colors or produces markup
"""

from vitae.contexts.templating.exceptions import (
    InvalidNodeError,
    InvalidResumeError,
    InvalidResumeStructureError,
)
from vitae.contexts.templating.projector import ResumeProjector, project, skill_percent
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
from vitae.contexts.templating.resume_loader import load_resume, parse_resume_dict

__all__ = [
    # Resume record
    "ResumeRecord",
    "ContactInfo",
    "SkillEntry",
    "Proficiency",
    "Education",
    "Degree",
    "DegreeKind",
    "Work",
    # Loading
    "load_resume",
    "parse_resume_dict",
    # Projection
    "ResumeProjector",
    "project",
    "skill_percent",
    # Errors
    "InvalidNodeError",
    "InvalidResumeError",
    "InvalidResumeStructureError",
]
