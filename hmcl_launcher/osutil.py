"""Operating-system helpers: architecture, paths, file versions and processes."""

from __future__ import annotations

import enum
import os
import platform
import shlex
import struct
import subprocess
import tempfile
import uuid
from collections.abc import Mapping
from pathlib import Path

from hmcl_launcher.version import Version

_FIXED_FILE_INFO_SIGNATURE = struct.pack("<I", 0xFEEF04BD)

_FOLDER_VARIABLES = {
    "program_files": "ProgramFiles",
    "program_files_x86": "ProgramFiles(x86)",
    "appdata": "APPDATA",
    "profile": "USERPROFILE",
}


class Architecture(enum.Enum):
    """Native processor architecture of the machine."""

    X86 = "x86"
    X86_64 = "x86_64"
    ARM64 = "arm64"


def get_architecture(environ: Mapping[str, str] | None = None) -> Architecture:
    """Return the native architecture, preferring the WOW64 host value when present."""
    env = os.environ if environ is None else environ
    name = env.get("PROCESSOR_ARCHITEW6432") or env.get("PROCESSOR_ARCHITECTURE")
    if not name and environ is None:
        name = platform.machine()
    name = (name or "").upper()
    if name in ("ARM64", "AARCH64"):
        return Architecture.ARM64
    if name in ("AMD64", "X86_64", "X64"):
        return Architecture.X86_64
    return Architecture.X86


def path_add_backslash(path: str) -> str:
    """Return ``path`` ending with exactly one trailing backslash added if missing."""
    return path if path.endswith("\\") else path + "\\"


def path_append(path: str, more: str) -> str:
    """Join ``more`` onto ``path`` with a backslash separator."""
    return path_add_backslash(path) + more


def quote_path_for_command_line(path: str) -> str:
    """Quote ``path`` as a single command-line argument.

    Double quotes are escaped, and a backslash directly before a quote or at
    the end of the path is doubled so it does not escape the closing quote.
    """
    pieces = ['"']
    for position, char in enumerate(path):
        following = path[position + 1 : position + 2]
        if char == "\\" and following in ("", '"'):
            pieces.append("\\\\")
        elif char == '"':
            pieces.append('\\"')
        else:
            pieces.append(char)
    pieces.append('"')
    return "".join(pieces)


def parse_file_version(data: bytes) -> Version | None:
    """Extract the file version from a fixed file-info block inside ``data``."""
    offset = data.find(_FIXED_FILE_INFO_SIGNATURE)
    while offset != -1:
        if offset % 4 == 0 and offset + 16 <= len(data):
            _, _, version_ms, version_ls = struct.unpack_from("<4I", data, offset)
            return Version.of(
                (version_ms >> 16) & 0xFFFF,
                version_ms & 0xFFFF,
                (version_ls >> 16) & 0xFFFF,
                version_ls & 0xFFFF,
            )
        offset = data.find(_FIXED_FILE_INFO_SIGNATURE, offset + 1)
    return None


def read_file_version(path: str | os.PathLike[str]) -> Version | None:
    """Read the embedded file version of an executable, or ``None`` if it has none."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return None
    return parse_file_version(data)


def temp_file_path(prefix: str, ext: str) -> str:
    """Return a fresh path in the temporary directory named ``<prefix>{GUID}.<ext>``."""
    guid = "{" + str(uuid.uuid4()).upper() + "}"
    return os.path.join(tempfile.gettempdir(), f"{prefix}{guid}.{ext}")


def create_process(command: str, workdir: str | None = None) -> bool:
    """Start ``command`` without waiting for it; return whether it started."""
    args: str | list[str] = command if os.name == "nt" else shlex.split(command)
    try:
        subprocess.Popen(args, cwd=workdir or None)
    except (OSError, ValueError):
        return False
    return True


def get_folder_path(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return a well-known folder (``program_files``, ``program_files_x86``,
    ``appdata`` or ``profile``), or ``None`` if it is not known here."""
    try:
        variable = _FOLDER_VARIABLES[name]
    except KeyError:
        raise ValueError(f"unknown folder: {name!r}") from None
    env = os.environ if environ is None else environ
    return env.get(variable) or None