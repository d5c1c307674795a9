"""
Escape Policy for user-supplied text.

Free text from a resume (names, descriptions, school and company names, URLs)
is embedded into HTML. By default it is embedded verbatim, which keeps output
identical to earlier releases but lets markup in the input become markup in the
page. ESCAPE runs user text through markupsafe instead; strings that are
already Markup (trusted fragments built by the projector) pass through as-is.
"""

from enum import Enum

from markupsafe import Markup, escape


class EscapePolicy(str, Enum):
    VERBATIM = "verbatim"
    ESCAPE = "escape"


def escape_text(value: str, policy: EscapePolicy) -> str:
    """
    Apply the escape policy to a text payload.

    Args:
        value: Text to embed in markup
        policy: VERBATIM returns value unchanged, ESCAPE HTML-escapes it

    Returns:
        Text safe to embed under the given policy
    """
    if policy == EscapePolicy.ESCAPE:
        return escape(value)
    return value


def format_markup(template: str, *args, policy: EscapePolicy) -> str:
    """
    Fill a trusted markup template with user values.

    Under ESCAPE the template's own tags are kept and only the arguments are
    escaped, and the result is Markup so the compiler will not escape it again.

    Examples:
        >>> format_markup("<b>{}</b>", "A&B", policy=EscapePolicy.ESCAPE)
        Markup('<b>A&amp;B</b>')
        >>> format_markup("<b>{}</b>", "A&B", policy=EscapePolicy.VERBATIM)
        '<b>A&B</b>'
    """
    if policy == EscapePolicy.ESCAPE:
        return Markup(template).format(*args)
    return template.format(*args)
