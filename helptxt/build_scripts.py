"""Build-script helpers: render help-text templates into the build output dir."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from helptxt.errors import MissingOutputDirectory, ReadError, WriteError
from helptxt.template_engine import render_template

logger = logging.getLogger(__name__)

OUT_DIR_ENV = "OUT_DIR"


def output_dir() -> Path:
    """Return the build output directory from the OUT_DIR env var."""
    env = os.environ.get(OUT_DIR_ENV)
    if not env:
        raise MissingOutputDirectory(OUT_DIR_ENV)
    return Path(env)


def output_name(binary_name: str, entry_name: str) -> str:
    """Name of the rendered file for one entry of a template directory."""
    return f"{binary_name}-{entry_name}"


def _render_to_out_dir(
    template_path: Path,
    dest_name: str,
    mapping: Mapping[str, str],
) -> Path:
    """Read, render (strict), resolve OUT_DIR and overwrite ``OUT_DIR/dest_name``."""
    content = render_template(template_path, mapping, strict=True)
    out_dir = output_dir()
    dest_path = out_dir / dest_name
    data = content.encode("utf-8")
    logger.debug("Rendering %s -> %s", template_path, dest_path)
    try:
        with open(dest_path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise WriteError(dest_path, exc.strerror or str(exc)) from exc
    logger.info("Wrote help text %s (%d bytes)", dest_path, len(data))
    return dest_path


def format_help_txt(
    binary_name: str,
    help_text_path: str | Path,
    mapping: Mapping[str, str],
) -> None:
    """Render one help-text template to ``$OUT_DIR/<binary_name>``."""
    _render_to_out_dir(Path(help_text_path), binary_name, mapping)


def format_all_help_txt(
    binary_name: str,
    directory: str | Path,
    mapping: Mapping[str, str],
) -> None:
    """Render every entry of ``directory`` to ``$OUT_DIR/<binary_name>-<entry>``.

    Entries are processed in sorted order and the first failure aborts the
    batch; files already written stay in place. Subdirectories are not
    skipped, so they fail with ``ReadError`` like any unreadable template.
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise ReadError(directory, exc.strerror or str(exc)) from exc

    written = [
        _render_to_out_dir(entry, output_name(binary_name, entry.name), mapping)
        for entry in entries
    ]
    logger.debug("Rendered %d help text(s) from %s: %s", len(written), directory, written)
