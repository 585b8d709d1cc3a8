"""Entry template parsing.

A template is plain text with ``{NAME}`` placeholders, e.g.
``"{DATETIME}\\t{PRIORITY}\\t{CATEGORY}\\t{MESSAGE}"``. Placeholder names are
matched case-insensitively and normalised to upper case.
"""

import re

PLACEHOLDER_PATTERN = re.compile(r"\{(.*?)\}", re.IGNORECASE)

DEFAULT_ENTRY_FORMAT = "{DATETIME}\t{PRIORITY}\t{CATEGORY}\t{MESSAGE}"


def parse_fields(template: str) -> tuple[str, ...]:
    """Return the upper-cased field names in *template*, first occurrence first."""
    fields = []
    for match in PLACEHOLDER_PATTERN.finditer(template):
        name = match.group(1).upper()
        if name not in fields:
            fields.append(name)
    return tuple(fields)


def compile_template(template: str) -> list[tuple[str, str | None]]:
    """Split *template* into ``(literal, field)`` segments.

    The final segment carries the trailing literal and a ``None`` field.
    """
    segments = []
    pos = 0
    for match in PLACEHOLDER_PATTERN.finditer(template):
        segments.append((template[pos:match.start()], match.group(1).upper()))
        pos = match.end()
    segments.append((template[pos:], None))
    return segments


def render(segments: list[tuple[str, str | None]], values: dict[str, str],
           missing: str = "-") -> str:
    """Fill compiled *segments* from *values*; absent fields become *missing*."""
    parts = []
    for literal, name in segments:
        parts.append(literal)
        if name is not None:
            parts.append(values.get(name, missing))
    return "".join(parts)


def fields_line(template: str) -> str:
    """The template with braces stripped and lower-cased, for the file header."""
    return template.replace("{", "").replace("}", "").lower()
