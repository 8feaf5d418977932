"""Output renderers for command results.

The module exports the OutputWriter base class for new output formats and
a factory returning the writer used by the CLI.
"""

from __future__ import annotations

from AuthorSearch.renderers.base import OutputWriter
from AuthorSearch.renderers.json import JsonOutputWriter, render_json


def create_output_writer(*, pretty: bool = False) -> OutputWriter:
    """Create the JSON output writer.

    Args:
        pretty: Indent the JSON output.

    Returns:
        OutputWriter instance printing to stdout.
    """
    return JsonOutputWriter(indent=2 if pretty else None)


__all__ = [
    "OutputWriter",
    "JsonOutputWriter",
    "render_json",
    "create_output_writer",
]
