"""
Integration tests for publishing resume YAML files to HTML.
"""

import sys

import pytest
from loguru import logger

from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.contexts.rendering.publisher import publish_resume
from vitae.utils.escaping import EscapePolicy

RESUME_YAML = """\
first_name: Ada
last_name: Lovelace
profession: Mathematician
description: "Notes on the <em>Analytical Engine</em>"
skills:
  - label: Analysis
    proficiency: strong
education:
  - school: Royal Institution
    start_year: 1840
    end_year: 1843
work_experience:
  - position: Analyst
    company: Computing Engine Co
    start_year: 1842
    end_year: 1843
"""


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / "ada.yaml"
    path.write_text(RESUME_YAML)
    return path


@pytest.mark.integration
def test_publish_default_output_path(resume_file):
    """Test that output defaults to the resume path with an .html suffix."""
    result = publish_resume(resume_file, theme_name="forest")

    assert result.success, result.error
    assert result.output_path == resume_file.with_suffix(".html")
    assert result.theme_name == "forest"

    html = result.output_path.read_text(encoding="utf-8")
    assert "background-color: #05386b;" in html
    assert "<p>Notes on the <em>Analytical Engine</em></p>" in html


@pytest.mark.integration
def test_publish_with_escaping(resume_file, tmp_path):
    """Test that the escape policy reaches the written page."""
    output = tmp_path / "out" / "ada.html"
    result = publish_resume(resume_file, output_path=output, escape_policy=EscapePolicy.ESCAPE)

    assert result.success, result.error
    html = output.read_text(encoding="utf-8")
    assert "&lt;em&gt;Analytical Engine&lt;/em&gt;" in html
    assert "Attended <b>Royal Institution</b> from <i>1840</i> to <i>1843</i>" in html


@pytest.mark.integration
def test_publish_unknown_theme(resume_file):
    """Test that an unknown theme is reported rather than raised."""
    result = publish_resume(resume_file, theme_name="solarized")

    assert result.success is False
    assert result.output_path is None
    assert "solarized" in result.error
    assert "forest" in result.error
    assert not resume_file.with_suffix(".html").exists()


@pytest.mark.integration
def test_publish_missing_resume(tmp_path):
    """Test that a missing resume file is reported rather than raised."""
    result = publish_resume(tmp_path / "nobody.yaml")

    assert result.success is False
    assert "not found" in result.error


@pytest.mark.integration
def test_publish_invalid_years(tmp_path):
    """Test that record invariant violations are reported."""
    path = tmp_path / "bad.yaml"
    path.write_text(
        "first_name: A\nlast_name: B\n"
        "education:\n  - {school: MIT, start_year: 2005, end_year: 2001}\n"
    )

    result = publish_resume(path)

    assert result.success is False
    assert "before start year" in result.error


@pytest.mark.integration
def test_rendering_logger_writes_provenance(resume_file, tmp_path):
    """Test that a rendering session log records provenance and the result."""
    log_dir = tmp_path / "logs"
    log_file = setup_rendering_logger(log_dir, theme_name="dracula")
    try:
        publish_resume(resume_file, theme_name="dracula")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    content = log_file.read_text()
    assert log_file == log_dir / "render.log"
    assert "Theme: dracula" in content
    assert "[render] Rendered with theme 'dracula'" in content


@pytest.mark.integration
def test_publish_numeric_phone_and_literal_braces(tmp_path):
    """Test that a numeric phone and ${...} text render instead of crashing."""
    path = tmp_path / "costs.yaml"
    path.write_text(
        "first_name: Ada\n"
        "last_name: Lovelace\n"
        "description: 'Cut costs by ${budget}'\n"
        "contact_info:\n"
        "  phone: 5551234567\n"
    )

    result = publish_resume(path)

    assert result.success, result.error
    html = result.output_path.read_text(encoding="utf-8")
    assert "<p>Cut costs by ${budget}</p>" in html
    assert '<a href="tel:5551234567"><p>5551234567</p></a>' in html


@pytest.mark.integration
def test_publish_reports_unknown_proficiency(tmp_path):
    """Test that an out-of-range proficiency becomes a failed PublishResult."""
    path = tmp_path / "bad_skill.yaml"
    path.write_text(
        "first_name: Ada\n"
        "last_name: Lovelace\n"
        "skills:\n"
        "  - label: Analysis\n"
        "    proficiency: 9\n"
    )

    result = publish_resume(path)

    assert result.success is False
    assert "Unknown proficiency" in result.error
