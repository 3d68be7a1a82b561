"""Exceptions raised while rendering help-text templates."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class HelpTextError(Exception):
    """Base class for every helptxt failure."""


class ReadError(HelpTextError):
    """A template (or template directory) could not be read as text."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.path = Path(path)
        msg = f"Could not read template {str(self.path)!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnknownPlaceholder(HelpTextError, KeyError):
    """A ``{{name}}`` marker has no value and strict mode is on."""

    def __init__(
        self,
        name: str,
        missing: Optional[list[str]] = None,
        template_path: str | Path | None = None,
    ):
        self.name = name
        self.missing = list(missing) if missing else [name]
        self.template_path = Path(template_path) if template_path else None
        super().__init__(name)

    def __str__(self) -> str:
        msg = f"No value for placeholder {self.name!r}"
        if len(self.missing) > 1:
            msg += f" (missing: {', '.join(self.missing)})"
        if self.template_path is not None:
            msg += f" in {str(self.template_path)!r}"
        return msg


class MissingOutputDirectory(HelpTextError):
    """The build output directory environment variable is not set."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(
            f"Environment variable {env_var} is not set; "
            "cannot determine the build output directory"
        )


class WriteError(HelpTextError):
    """A rendered file could not be created or written."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.path = Path(path)
        msg = f"Could not write {str(self.path)!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
