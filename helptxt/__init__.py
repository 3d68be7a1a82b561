"""Build-time help-text templating."""

from helptxt.build_scripts import format_all_help_txt, format_help_txt
from helptxt.errors import (
    HelpTextError,
    MissingOutputDirectory,
    ReadError,
    UnknownPlaceholder,
    WriteError,
)
from helptxt.placeholders import load_placeholders, merge_placeholders
from helptxt.template_engine import render, render_template

__all__ = [
    "HelpTextError",
    "MissingOutputDirectory",
    "ReadError",
    "UnknownPlaceholder",
    "WriteError",
    "format_all_help_txt",
    "format_help_txt",
    "load_placeholders",
    "merge_placeholders",
    "render",
    "render_template",
]
