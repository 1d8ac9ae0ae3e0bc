"""mdsite - Markdown directory to static HTML site generator.

Renders every markdown file of a directory through a Jinja2 template and can
serve the generated pages over HTTP.
"""

import logging

__version__ = "0.1.0"

# Silent unless the application configures logging (the CLI does).
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .cli import main

__all__ = ["main", "__version__"]
