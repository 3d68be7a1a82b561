"""Placeholder mappings and YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from helptxt.errors import ReadError
from helptxt.template_engine import PLACEHOLDER_RE

_SCALAR_TYPES = (str, int, float, bool)


def load_placeholders(path: str | Path) -> dict[str, str]:
    """Load a placeholder mapping from a YAML file.

    The top level must be a mapping of placeholder names to scalar values.
    Scalars are converted with ``str()``; nested values, nulls and names that
    could never match a ``{{name}}`` marker cause a ``ValueError`` so typos
    are caught early.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(path, str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {str(path)!r}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"Placeholder YAML must be a mapping, got {type(raw).__name__}"
        )

    bad_names = sorted(
        str(k) for k in raw if not isinstance(k, str) or not _is_placeholder_name(k)
    )
    if bad_names:
        raise ValueError(f"Invalid placeholder names in {str(path)!r}: {bad_names}")

    placeholders: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(value, _SCALAR_TYPES):
            raise ValueError(
                f"Placeholder {key!r} must be a scalar, got {type(value).__name__}"
            )
        placeholders[key] = str(value)
    return placeholders


def merge_placeholders(*mappings: Mapping[str, str]) -> dict[str, str]:
    """Merge mappings left to right; later values win."""
    merged: dict[str, str] = {}
    for mapping in mappings:
        merged.update(mapping)
    return merged


def _is_placeholder_name(name: str) -> bool:
    return PLACEHOLDER_RE.fullmatch("{{" + name + "}}") is not None
