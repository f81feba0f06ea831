# blaupause

A small desktop copy assistant. Pick a source directory and a target
directory, choose a few options, and blaupause copies the source into the
target using the operating system's own copy tool: `ROBOCOPY` on Windows and
`rsync` everywhere else (Linux, macOS and other Unix-like systems).

## Installation

```
pip install .
```

The window is built with Tkinter, which ships with most Python
installations. `rsync` (Linux, macOS) or `ROBOCOPY` (Windows) must be on
your `PATH`.

## Usage

Start the application:

```
blaupause
```

1. Click **Browse source...** and choose the directory to copy.
2. Click **Browse target...** and choose where the copy should go.
3. Set any of the options you need:
   - **Archive**: keep the original metadata (`rsync -ha`, `ROBOCOPY /COPYALL`).
   - **Delete**: remove files in the target that are no longer in the source
     (`rsync --delete-during`, `ROBOCOPY /PURGE`).
   - **Validate**: compare files by checksum rather than by modification time
     and size (`rsync --checksum`). This option is disabled on Windows.
4. Click **Copy source to target!**. The button is enabled only while both
   chosen directories exist; this is re-checked twice a second.

The full command is printed to the terminal before it runs, and the copy
tool reports its progress there as well. The window waits until the copy
has finished. If the copy tool cannot be found on the `PATH`, an error
message is printed to standard error and nothing is copied.

`rsync` is always run with `-h -r -l -v -P -W`; on Linux
`--info=progress2` is added to show the time remaining. `ROBOCOPY` is always
run with `/E /ETA /MT:2 /R:0 /V`.

On Windows, the source directory is copied into a subdirectory of the target
that has the same name as the source (or `copy` when the source has no
usable name). This keeps the **Delete** option from removing unrelated files
that are already in the target.

## Using it from Python

The command building is available without the window, in
`blaupause.command`:

```python
from blaupause.command import native_copy_command, native_copy_args, run_copy

command = native_copy_command()
args = native_copy_args(True, False, False, "/data/photos", "/backup")
status = run_copy(command, args)
```

- `native_copy_command(platform=None)` returns `"rsync"` or `"ROBOCOPY"`.
- `native_copy_args(archive_copy, delete_copy, validate_copy, source, target, platform=None)`
  returns the argument list for that tool.
- Both take an optional platform name in the form of `sys.platform`
  (`"linux"`, `"darwin"`, `"win32"`, ...); by default the running one is used.
- `run_copy(command, args)` prints the command line, runs it and returns its
  exit status, or `None` when the executable is not found.
- `is_existing_directory(path)` and `path_to_string(path)` are small helpers
  used by the window.

`blaupause.app.CopyState` holds the selected directories, the options and the
platform. `can_copy()` tells whether both directories exist,
`command_line()` shows the command that `execute()` would run, and
`execute()` runs it, raising `ValueError` when either directory does not
exist.

## What it does not do

blaupause has no command-line copy mode: the `blaupause` command only opens
the window. It does not copy files itself, keep a history of copies or save
the chosen directories and options between runs.