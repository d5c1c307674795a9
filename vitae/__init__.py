"""
VITAE - Versatile Intermediate Tree for Appearance-independent rEsumes

A resume rendering system that turns a structured resume record into a single
static HTML page, with all presentation supplied by a pluggable theme.

Architecture:
- Templating Context: Resume record model and projection into the document tree
- Theming Context: Abstract colors and the theme capability interface
- Rendering Context: Theme-directed compilation of the document tree to HTML
"""

__version__ = "0.1.0"
