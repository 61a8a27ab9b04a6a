"""Workspace — explicit working directory and environment for operations.

Operations never call ``os.chdir`` or touch ``os.environ`` directly; they
read and mutate a :class:`Workspace`.  The CLI builds one from the running
process, so changes still apply in-process, while tests can pass a plain
dict and a temporary directory.
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Workspace:
    """Mutable cwd + environment context threaded through services."""

    cwd: Path
    env: MutableMapping[str, str]

    @classmethod
    def from_process(cls) -> Workspace:
        """Workspace bound to the current process cwd and ``os.environ``."""
        return cls(cwd=Path.cwd(), env=os.environ)

    def chdir(self, path: Path | str) -> Path:
        """Move the workspace cwd. Relative paths resolve against the current cwd."""
        target = Path(path)
        if not target.is_absolute():
            target = self.cwd / target
        self.cwd = target
        return target

    @property
    def home(self) -> Path:
        """The ``HOME`` directory as seen by this workspace."""
        home = self.env.get("HOME")
        return Path(home) if home else Path.home()
