"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gov.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- gov.toml sections ---


class ToolchainConfig(BaseModel):
    """[toolchain] section."""

    model_config = {"frozen": True}

    go: str = "go"
    git: str = "git"
    cp: str = "cp"
    module_name: str = "project"
    source_binary: str = "/usr/local/go/bin/go"


class EnvConfig(BaseModel):
    """[env] section — the home-relative configuration directory."""

    model_config = {"frozen": True}

    dir_name: str = ".gov"
