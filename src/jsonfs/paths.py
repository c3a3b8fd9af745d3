"""Resolution of per-application data directories.

Platform and environment are captured once in a :class:`PlatformInfo` and
passed to store handles explicitly, so nothing here reads global state at
call time except :meth:`PlatformInfo.from_environment`.

Directory layout
----------------

``win32``
    ``%APPDATA%/<name>``
``darwin``
    ``$HOME/Library/Application Support/<name>``
anything else
    ``$HOME/<name>``

Outside production ``<name>`` is the app name followed by
``" (development)"`` so development runs never touch production state.
Production is selected by setting ``JSONFS_ENV=production``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

ENV_VAR = "JSONFS_ENV"
PRODUCTION = "production"
DEVELOPMENT_SUFFIX = " (development)"


@dataclass(frozen=True)
class PlatformInfo:
    """Platform identifier, environment variables and production flag."""

    system: str
    environ: Mapping[str, str] = field(default_factory=dict)
    production: bool = False

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> "PlatformInfo":
        """Capture the running interpreter's platform and environment."""

        env = dict(os.environ if environ is None else environ)
        return cls(
            system=sys.platform,
            environ=env,
            production=env.get(ENV_VAR, "").strip().lower() == PRODUCTION,
        )

    def home(self) -> Path:
        home = self.environ.get("HOME") or self.environ.get("USERPROFILE")
        return Path(home) if home else Path.home()


def app_dir_name(app_name: str, production: bool) -> str:
    """Return the directory name used for ``app_name``."""

    return app_name if production else f"{app_name}{DEVELOPMENT_SUFFIX}"


def resolve_app_data_dir(app_name: str, platform: PlatformInfo) -> Path:
    """Return the data directory for ``app_name`` on ``platform``."""

    if not app_name or not app_name.strip():
        raise ValueError("app_name must be a non-empty string")
    name = app_dir_name(app_name, platform.production)

    if platform.system == "win32":
        appdata = platform.environ.get("APPDATA")
        root = Path(appdata) if appdata else platform.home() / "AppData" / "Roaming"
        return root / name

    if platform.system == "darwin":
        return platform.home() / "Library" / "Application Support" / name

    return platform.home() / name


def resolve_file_path(app_name: str, file_name: str, platform: PlatformInfo) -> Path:
    """Return the full path of ``file_name`` inside the app data directory."""

    relative = Path(file_name)
    if not file_name or relative.is_absolute():
        raise ValueError(f"file_name must be a relative path, got {file_name!r}")
    return resolve_app_data_dir(app_name, platform) / relative
