"""Pure help rendering — registry entries in, formatted text out.

Layout per flag::

     --validationport:       [--validationmode http-01 --validation
                             selfhosting] Port to use for listening to
                             http-01 validation requests.

The flag name starts the entry; its description is word-wrapped so
that no line exceeds *width* columns, and continuation lines are
aligned under the *indent* column.  Entries are separated by a blank
line.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable

from wacs_options.core.registry import FlagSpec

HELP_WIDTH: int = 80
HELP_INDENT: int = 26


def _render_entry(spec: FlagSpec, width: int, indent: int) -> list[str]:
    label = f" --{spec.long_name}:"
    pad = " " * indent
    wrapped = textwrap.wrap(
        spec.help_text,
        width=max(width - indent, 20),
        break_on_hyphens=False,
    ) or [""]

    if len(label) >= indent:
        # Name too long for the label column: description starts below.
        return [label, *(pad + line for line in wrapped)]

    first, *rest = wrapped
    return [label.ljust(indent) + first, *(pad + line for line in rest)]


def render_help(
    entries: Iterable[FlagSpec],
    *,
    header: str | None = None,
    width: int = HELP_WIDTH,
    indent: int = HELP_INDENT,
) -> str:
    """Render *entries* (in the given order) as help text."""
    lines: list[str] = []
    if header:
        lines.extend([header, ""])
    for spec in entries:
        lines.extend(_render_entry(spec, width, indent))
        lines.append("")
    return "\n".join(line.rstrip() for line in lines)
