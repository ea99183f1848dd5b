from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

"""Interactive prompts used to collect run options before the pipeline runs.

All prompts take an ``input_func`` (default: builtin ``input``) so they can
be driven from tests. EOF / Ctrl-C during a prompt raises PromptCancelled.
"""

__all__ = [
    "PromptCancelled",
    "BrowserEntry",
    "EXCEL_SUFFIXES",
    "YES_ANSWERS",
    "is_excel_file",
    "list_browser_entries",
    "pick_excel_file",
    "ask",
    "ask_yes_no",
]

InputFunc = Callable[[str], str]

EXCEL_SUFFIXES = (".xlsx", ".xlsm")
YES_ANSWERS = frozenset({"S", "SI", "SÍ", "Y", "YES"})


class PromptCancelled(Exception):
    """The operator cancelled a prompt."""


@dataclass(frozen=True)
class BrowserEntry:
    kind: str  # "up" | "dir" | "file"
    name: str
    label: str


def is_excel_file(name: str) -> bool:
    lower = name.lower()
    return lower.endswith(EXCEL_SUFFIXES) and not lower.startswith("~$")


def _size_label(path: Path) -> str:
    try:
        st = path.stat()
    except OSError:
        return ""
    kb = max(1, round(st.st_size / 1024))
    return f"  ({kb} KB)"


def list_browser_entries(
    current_dir: Path, root_dir: Path, excluded: Iterable[str]
) -> list[BrowserEntry]:
    """Entries shown for ``current_dir``: up link, sub-directories, Excel files.

    Excluded directory names and Office lock files (``~$...``) are skipped;
    unreadable directories simply list nothing.
    """
    excluded_set = set(excluded)
    try:
        children = list(current_dir.iterdir())
    except OSError:
        children = []

    dirs = sorted(p.name for p in children if p.is_dir() and p.name not in excluded_set)
    files = sorted(p.name for p in children if p.is_file() and is_excel_file(p.name))

    entries: list[BrowserEntry] = []
    if current_dir.resolve() != root_dir.resolve():
        entries.append(BrowserEntry("up", "..", "[..] up one level"))
    entries.extend(BrowserEntry("dir", d, f"{d}/") for d in dirs)
    entries.extend(
        BrowserEntry("file", f, f"{f}{_size_label(current_dir / f)}") for f in files
    )
    return entries


def ask(question: str, input_func: InputFunc = input) -> str:
    try:
        return input_func(question)
    except (EOFError, KeyboardInterrupt) as e:
        raise PromptCancelled("prompt cancelled") from e


def ask_yes_no(question: str, input_func: InputFunc = input) -> bool:
    return ask(question, input_func).strip().upper() in YES_ANSWERS


def pick_excel_file(
    root_dir: Path,
    excluded: Iterable[str],
    input_func: InputFunc = input,
    output: Callable[[str], None] = print,
) -> Path:
    """Numbered-menu browser starting at ``root_dir``; returns the chosen file."""
    excluded = tuple(excluded)
    current = root_dir
    while True:
        entries = list_browser_entries(current, root_dir, excluded)
        rel = current.relative_to(root_dir) if current != root_dir else Path(".")
        output(f"Folder: {rel}")
        if not any(e.kind == "file" for e in entries):
            output("  (no Excel files here; open another folder)")
        for i, e in enumerate(entries, start=1):
            output(f"  {i:>2}. {e.label}")
        if not entries:
            raise PromptCancelled(f"nothing to choose in {current}")

        answer = ask("Select a number (q = quit): ", input_func).strip()
        if answer.lower() in {"q", "quit"}:
            raise PromptCancelled("file selection cancelled")
        if not answer.isdigit() or not 1 <= int(answer) <= len(entries):
            output(f"invalid choice: {answer!r}")
            continue

        entry = entries[int(answer) - 1]
        if entry.kind == "up":
            current = current.parent
        elif entry.kind == "dir":
            current = current / entry.name
        else:
            return current / entry.name
