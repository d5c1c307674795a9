"""Shared fixtures: a plain black-on-white theme and the Ada Lovelace resume."""

import pytest

from vitae.contexts.templating.resume_data_structure import (
    Education,
    Proficiency,
    ResumeRecord,
    SkillEntry,
    Work,
)
from vitae.contexts.theming.colors import ColorToken
from vitae.contexts.theming.palette_theme import PaletteTheme

MONO_PALETTE = {
    **{token: (128, 128, 128) for token in ColorToken},
    ColorToken.DEFAULT_FOREGROUND: (0, 0, 0),
    ColorToken.DEFAULT_BACKGROUND: (255, 255, 255),
    ColorToken.RED: (255, 0, 0),
    ColorToken.DEFAULT_TITLE: (127, 0, 255),
}


@pytest.fixture
def mono_theme():
    return PaletteTheme("mono", MONO_PALETTE, document_css="/* mono */")


@pytest.fixture
def ada_resume():
    return ResumeRecord(
        first_name="Ada",
        last_name="Lovelace",
        profession="Mathematician",
        description="",
        skills=[SkillEntry("Analysis", Proficiency.STRONG)],
        education=[Education(start_year=1840, end_year=1843, school="Royal Institution")],
        work_experience=[
            Work(
                start_year=1842,
                end_year=1843,
                position="Analyst",
                company="Computing Engine Co",
                description="Wrote the first algorithm.",
            )
        ],
    )
