"""
Rendering Context

Responsibilities:
- Compiles a document tree to a complete HTML page against a theme
- Applies the escape policy to user text at render time
- Writes rendered resumes to disk and reports the outcome

Owns: HTML generation, document boilerplate, output files
Never: Decides layout or colors
"""

from vitae.contexts.rendering.compiler import render
from vitae.contexts.rendering.exceptions import RenderError, UnsupportedNodeError
from vitae.contexts.rendering.publisher import PublishResult, publish_resume

__all__ = [
    "render",
    "publish_resume",
    "PublishResult",
    "RenderError",
    "UnsupportedNodeError",
]
