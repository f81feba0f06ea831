"""Building and running the platform's native directory copy command."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import PurePath, PureWindowsPath

_UNIX_FLAGS = (
    "-h",  # human-readable output
    "-r",  # recursive copying
    "-l",  # preserve links
    "-v",  # verbose (summary)
    "-P",  # progress report
    "-W",  # copy entire file (faster)
)

_ROBOCOPY_FLAGS = (
    "/E",  # recursive, including empty directories
    "/ETA",  # progress report
    "/MT:2",  # multi-threading
    "/R:0",  # no retry upon failure
    "/V",  # verbose (show skipped)
)

_WINDOWS = "windows"
_LINUX = "linux"
_UNIX = "unix"

_COPY_TOOLS = {
    _WINDOWS: "ROBOCOPY",
    _LINUX: "rsync",
    _UNIX: "rsync",
}


def _platform_family(platform: str | None) -> str:
    name = (platform or sys.platform).lower()
    if name.startswith("win"):
        return _WINDOWS
    if name.startswith("linux"):
        return _LINUX
    return _UNIX


def native_copy_command(platform: str | None = None) -> str:
    """Return the name of the copy tool used on ``platform`` (default: this one)."""
    family = _platform_family(platform)
    return _COPY_TOOLS[family]


def native_copy_args(
    archive_copy: bool,
    delete_copy: bool,
    validate_copy: bool,
    source: str,
    target: str,
    platform: str | None = None,
) -> list[str]:
    """Return the arguments for the native copy tool on ``platform``."""
    family = _platform_family(platform)
    if family == _WINDOWS:
        return _robocopy_args(archive_copy, delete_copy, source, target)
    return _rsync_args(
        archive_copy, delete_copy, validate_copy, source, target, family == _LINUX
    )


def _rsync_args(
    archive_copy: bool,
    delete_copy: bool,
    validate_copy: bool,
    source: str,
    target: str,
    linux: bool,
) -> list[str]:
    args = list(_UNIX_FLAGS)
    if linux:
        args.append("--info=progress2")  # show time remaining
    if archive_copy:
        args[0] += "a"  # preserve metadata
    if delete_copy:
        args.append("--delete-during")  # receiver deletes during the transfer
    if validate_copy:
        args.append("--checksum")  # skip based on checksum, not mod-time & size
    args.extend((source, target))
    return args


def _robocopy_args(archive_copy: bool, delete_copy: bool, source: str, target: str) -> list[str]:
    # ROBOCOPY copies the *content* of the source into the target, so the
    # source directory's name is appended to keep /PURGE from wiping the target.
    name = PureWindowsPath(source).name
    if name in ("", ".."):
        name = "copy"
    args = [source, str(PureWindowsPath(target) / name), *_ROBOCOPY_FLAGS]
    if archive_copy:
        args.append("/COPYALL")  # copy all file information
    if delete_copy:
        args.append("/PURGE")  # delete target items missing in source
    return args


def is_existing_directory(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` names an existing directory."""
    return bool(str(path)) and os.path.isdir(path)


def path_to_string(path: str | PurePath | None) -> str:
    """Return ``path`` as text, or an empty string when there is none."""
    return "" if path is None else str(path)


def run_copy(command: str, args: list[str]) -> int | None:
    """Print and run the copy command, waiting for it to finish.

    Returns the command's exit status, or None when the executable is not found.
    """
    print(f"\r\n{command} {' '.join(args)}")
    if shutil.which(command) is None:
        print(f"Executable not found: {command}", file=sys.stderr)
        return None
    return subprocess.run([command, *args], check=False).returncode