"""
Resume Projector

Maps a ResumeRecord onto the canonical document tree:

    Document
    └── Container
        └── Column
            ├── Row
            │   ├── Section(header: name, profession, description, contact links)
            │   └── Section(skills)
            └── Section(education + professional experience)

The layout is fixed; only the content varies with the record. Projection is
pure: projecting the same record twice yields equal trees.
"""

from typing import List

from vitae.contexts.templating.document_nodes import (
    DocumentNode,
    HorizontalAlignment,
    PercentBar,
    VerticalAlignment,
    aligned,
    col,
    container,
    fg,
    html,
    italics,
    link,
    ol,
    row,
    section,
    section_title,
    text,
    title,
    ul,
)
from vitae.contexts.templating.logger import log_projection
from vitae.contexts.templating.resume_data_structure import (
    ContactInfo,
    Education,
    Proficiency,
    ResumeRecord,
    SkillEntry,
    Work,
)
from vitae.contexts.theming.colors import ColorToken
from vitae.utils.escaping import EscapePolicy, format_markup

SKILLS_HEADING = "Skills"
EDUCATION_HEADING = "Education"
WORK_HEADING = "Professional Experience"

EDUCATION_TEMPLATE = "Attended <b>{}</b> from <i>{}</i> to <i>{}</i>"
FIELD_SUFFIX = " studying {}"
DEGREE_SUFFIX = " and achieved {}"
WORK_TEMPLATE = "<b>{}</b> at {} from <i>{}</i> to <i>{}</i>"


def skill_percent(level: Proficiency) -> int:
    """
    Percentage a proficiency fills on a skill bar.

    Examples:
        >>> [skill_percent(level) for level in Proficiency]
        [0, 25, 50, 75, 100]
    """
    return int(level) * 100 // int(Proficiency.max_level())


def _centered(node: DocumentNode) -> DocumentNode:
    return aligned(node, HorizontalAlignment.CENTER, VerticalAlignment.INHERIT)


class ResumeProjector:
    """
    Builds the document tree for a resume.

    Attributes:
        escape_policy: Whether free text from the record is embedded verbatim or
                       escaped. Must match the policy the tree is rendered with.
    """

    def __init__(self, escape_policy: EscapePolicy = EscapePolicy.VERBATIM):
        self.escape_policy = escape_policy

    def project(self, resume: ResumeRecord) -> DocumentNode:
        """
        Project a resume record into a document tree.

        Args:
            resume: Fully populated resume record

        Returns:
            Root Document node
        """
        log_projection(
            resume.full_name,
            len(resume.skills),
            len(resume.education),
            len(resume.work_experience),
        )

        return html([
            container([
                col([
                    row([
                        section(self.header(resume)),
                        section(self.skills(resume.skills)),
                    ]),
                    section(self.history(resume.education, resume.work_experience)),
                ])
            ])
        ])

    def header(self, resume: ResumeRecord) -> DocumentNode:
        items = [
            _centered(fg(title(resume.full_name), ColorToken.DEFAULT_TITLE)),
            _centered(fg(italics(section_title(resume.profession)), ColorToken.DEFAULT_SUBTITLE)),
            text(resume.description),
        ]
        if not resume.contact_info.is_empty:
            items.append(self.contact_links(resume.contact_info))
        return col(items)

    def contact_links(self, contact_info: ContactInfo) -> DocumentNode:
        return row([link(text(label), url) for label, url in contact_info.links()])

    def skills(self, skills) -> DocumentNode:
        return col([
            _centered(fg(italics(section_title(SKILLS_HEADING)), ColorToken.DEFAULT_SUBTITLE)),
            _centered(ul([self.skill_item(skill) for skill in skills])),
        ])

    def skill_item(self, skill: SkillEntry) -> DocumentNode:
        if skill.proficiency is None:
            return text(skill.label)
        level = skill.proficiency
        return row([text(skill.label), PercentBar(skill_percent(level), level.display_name)])

    def history(self, education, work_experience) -> DocumentNode:
        return col([
            _centered(fg(section_title(EDUCATION_HEADING), ColorToken.DEFAULT_SECTION_TITLE)),
            ol([self.education_item(entry) for entry in education]),
            _centered(fg(section_title(WORK_HEADING), ColorToken.DEFAULT_SECTION_TITLE)),
            ul([self.work_item(entry) for entry in work_experience]),
        ])

    def education_item(self, entry: Education) -> DocumentNode:
        """
        One sentence per entry, picked by which of field of study / degree are present.
        """
        template = EDUCATION_TEMPLATE
        args: List = [entry.school, entry.start_year, entry.end_year]

        if entry.field_of_study:
            template += FIELD_SUFFIX
            args.append(entry.field_of_study)
        if entry.degree.is_present:
            template += DEGREE_SUFFIX
            args.append(entry.degree.describe())

        return text(format_markup(template, *args, policy=self.escape_policy))

    def work_item(self, entry: Work) -> DocumentNode:
        return text(
            format_markup(
                WORK_TEMPLATE,
                entry.position,
                entry.company,
                entry.start_year,
                entry.end_year,
                policy=self.escape_policy,
            )
        )


def project(resume: ResumeRecord, escape_policy: EscapePolicy = EscapePolicy.VERBATIM) -> DocumentNode:
    """Project a resume record with a one-off ResumeProjector."""
    return ResumeProjector(escape_policy).project(resume)
