"""Simple template engine — reads a file, replaces {{name}} placeholders.

A marker is ``{{name}}`` where ``name`` is an identifier
(``[A-Za-z_][A-Za-z0-9_]*``) with no surrounding whitespace. Everything else,
including single braces such as ``{a|b}`` and ``{{ name }}``, is copied
verbatim, so ordinary CLI usage strings never need escaping.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping

from helptxt.errors import ReadError, UnknownPlaceholder

PLACEHOLDER_RE = re.compile(r"\{\{([A-Za-z_][A-Za-z0-9_]*)\}\}")


def find_placeholders(template: str) -> list[str]:
    """Return marker names in order of first appearance, without duplicates."""
    seen: dict[str, None] = {}
    for m in PLACEHOLDER_RE.finditer(template):
        seen.setdefault(m.group(1), None)
    return list(seen)


def render(template: str, mapping: Mapping[str, str], strict: bool = False) -> str:
    """Replace {{name}} markers in a single pass.

    Replacement values are inserted as-is and never rescanned. A marker whose
    name is not in ``mapping`` raises ``UnknownPlaceholder`` when ``strict``
    is set, otherwise it is left in the output unchanged.
    """
    if strict:
        missing = [name for name in find_placeholders(template) if name not in mapping]
        if missing:
            raise UnknownPlaceholder(missing[0], missing)

    def _replacer(m: re.Match) -> str:
        key = m.group(1)
        return str(mapping[key]) if key in mapping else m.group(0)

    return PLACEHOLDER_RE.sub(_replacer, template)


def read_template(template_path: str | Path) -> str:
    """Read a template file as UTF-8 text, keeping its line endings as-is."""
    path = Path(template_path)
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReadError(path, "not valid UTF-8 text") from exc
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc


def render_template(
    template_path: str | Path,
    mapping: Mapping[str, str],
    strict: bool = False,
) -> str:
    """Read template file, replace {{name}} placeholders, return rendered string."""
    content = read_template(template_path)
    try:
        return render(content, mapping, strict=strict)
    except UnknownPlaceholder as exc:
        exc.template_path = Path(template_path)
        raise
