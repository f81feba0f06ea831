"""The copy assistant window and the state behind it."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

from blaupause.command import (
    is_existing_directory,
    native_copy_args,
    native_copy_command,
    run_copy,
)

SOURCE_PLACEHOLDER = "[Source directory]"
TARGET_PLACEHOLDER = "[Target directory]"
WINDOW_SIZE = (566, 350)
_REFRESH_MS = 500


@dataclass
class CopyState:
    """The chosen directories and copy options."""

    source: str = ""
    target: str = ""
    archive_copy: bool = False
    delete_copy: bool = False
    validate_copy: bool = False
    platform: str = field(default_factory=lambda: sys.platform)

    @property
    def validate_available(self) -> bool:
        """Validation is only offered where the copy tool supports it."""
        return not self.platform.startswith("win")

    def can_copy(self) -> bool:
        """Return True when both source and target are existing directories."""
        return is_existing_directory(self.source) and is_existing_directory(self.target)

    def command(self) -> str:
        return native_copy_command(self.platform)

    def arguments(self) -> list[str]:
        return native_copy_args(
            self.archive_copy,
            self.delete_copy,
            self.validate_copy,
            self.source,
            self.target,
            self.platform,
        )

    def command_line(self) -> str:
        return f"{self.command()} {' '.join(self.arguments())}"

    def execute(self) -> int | None:
        """Run the copy and return its exit status (None if the tool is missing)."""
        if not self.can_copy():
            raise ValueError("source and target must be existing directories")
        return run_copy(self.command(), self.arguments())


class BlaupauseApp:
    """The main window: pick two directories, set options, copy."""

    def __init__(self, root) -> None:
        import tkinter as tk

        self.root = root
        self.state = CopyState()
        root.title("blaupause")
        width, height = WINDOW_SIZE
        root.geometry(f"{width}x{height}")
        root.minsize(width, height)
        root.maxsize(root.winfo_screenwidth(), height)

        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Quit", command=root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)
        root.config(menu=menubar)

        frame = tk.Frame(root, padx=8, pady=8)
        frame.pack(fill=tk.BOTH, expand=True)

        self._source_text = self._path_display(frame, SOURCE_PLACEHOLDER)
        tk.Button(frame, text=" Browse source... ", command=self.browse_source).pack()
        self._separator(frame)

        self._target_text = self._path_display(frame, TARGET_PLACEHOLDER)
        tk.Button(frame, text=" Browse target... ", command=self.browse_target).pack()
        self._separator(frame)

        self._archive = tk.BooleanVar(value=False)
        self._delete = tk.BooleanVar(value=False)
        self._validate = tk.BooleanVar(value=False)
        tk.Checkbutton(
            frame, text="Archive: Keep original metadata.", variable=self._archive
        ).pack(anchor=tk.W)
        tk.Checkbutton(
            frame, text="Delete: Remove surplus target files.", variable=self._delete
        ).pack(anchor=tk.W)
        tk.Checkbutton(
            frame,
            text="Validate: Check target files during copy.",
            variable=self._validate,
            state=tk.NORMAL if self.state.validate_available else tk.DISABLED,
        ).pack(anchor=tk.W)
        self._separator(frame)

        self._copy_button = tk.Button(
            frame, text="Copy source\nto target!", command=self.copy, state=tk.DISABLED
        )
        self._copy_button.pack()
        self._separator(frame)

        tk.Label(frame, text="Version 0.1").pack(anchor=tk.E)
        self._refresh()

    @staticmethod
    def _path_display(parent, text: str):
        import tkinter as tk

        widget = tk.Text(parent, height=3, wrap=tk.CHAR)
        widget.pack(fill=tk.X)
        BlaupauseApp._set_text(widget, text)
        return widget

    @staticmethod
    def _set_text(widget, text: str) -> None:
        import tkinter as tk

        widget.config(state=tk.NORMAL)
        widget.delete("1.0", tk.END)
        widget.insert("1.0", text)
        widget.config(state=tk.DISABLED)

    @staticmethod
    def _separator(parent) -> None:
        import tkinter as tk

        tk.Frame(parent, height=1, bg="grey").pack(fill=tk.X, pady=4)

    @staticmethod
    def _ask_folder(title: str) -> str:
        from tkinter import filedialog

        chosen = filedialog.askdirectory(title=title, mustexist=True)
        return chosen if isinstance(chosen, str) else ""

    def _refresh(self) -> None:
        # Directories may appear or vanish at any time, so the copy button is re-checked.
        import tkinter as tk

        self._copy_button.config(state=tk.NORMAL if self.state.can_copy() else tk.DISABLED)
        self.root.after(_REFRESH_MS, self._refresh)

    def browse_source(self) -> None:
        self.state.source = self._ask_folder("Select source directory!")
        self._set_text(self._source_text, self.state.source)

    def browse_target(self) -> None:
        self.state.target = self._ask_folder("Select target directory!")
        self._set_text(self._target_text, self.state.target)

    def copy(self) -> int | None:
        self.state.archive_copy = self._archive.get()
        self.state.delete_copy = self._delete.get()
        self.state.validate_copy = self._validate.get()
        if not self.state.can_copy():
            return None
        return self.state.execute()


def main(argv: list[str] | None = None) -> int:
    """Open the copy assistant window."""
    parser = argparse.ArgumentParser(prog="blaupause", description="The copy assistant.")
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    BlaupauseApp(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())