"""JSON output renderer.

Renders a ``SearchEnvelope`` into its JSON wire format.
"""

from __future__ import annotations

import json
from typing import Callable

import click

from AuthorSearch.core.models import SearchEnvelope
from AuthorSearch.renderers.base import OutputWriter


def render_json(envelope: SearchEnvelope, *, indent: int | None = None) -> str:
    """Serialize an envelope to JSON text.

    Document values JSON cannot encode natively (datetimes, driver object
    ids) are rendered with ``str``.

    Args:
        envelope: Search response.
        indent: Indentation for pretty output; compact when None.

    Returns:
        JSON text with keys ``totalCount``, ``count``, ``lastItemIndex`` and
        ``results``.
    """
    return json.dumps(envelope.to_dict(), ensure_ascii=False, indent=indent, default=str)


class JsonOutputWriter(OutputWriter):
    """Echo each envelope as JSON, one document per search."""

    def __init__(self, *, indent: int | None = None, echo: Callable[[str], None] = click.echo) -> None:
        self.indent = indent
        self._echo = echo

    def write_result(self, envelope: SearchEnvelope) -> None:
        self._echo(render_json(envelope, indent=self.indent))
