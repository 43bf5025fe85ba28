"""Git subprocess wrapper — generates unified diffs with ``git diff --no-index``."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from diffpane.config.schema import DiffOptions

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: List[str], cwd: Optional[Path] = None, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    logger.debug("Running git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        # --no-index exits 1 when the inputs differ
        if not stderr or ("fatal" not in stderr.lower() and "error" not in stderr.lower()):
            return result.stdout
        raise GitError(f"git error: {stderr}")
    return result.stdout


def _diff_args(options: DiffOptions) -> List[str]:
    return [
        "diff",
        "--no-index",
        "--no-color",
        "--no-ext-diff",
        f"--diff-algorithm={options.algorithm}",
        f"--unified={options.context_lines}",
    ]


def diff_files(old: Path, new: Path, options: Optional[DiffOptions] = None) -> str:
    """Return the unified diff between two files on disk."""
    options = options or DiffOptions()
    for path in (old, new):
        if not path.is_file():
            raise GitError(f"Not a file: {path}")
    return _run_git([*_diff_args(options), "--", str(old), str(new)])


def diff_texts(
    old_text: str,
    new_text: str,
    options: Optional[DiffOptions] = None,
    name: str = "file",
) -> str:
    """Return the unified diff between two in-memory texts.

    Both sides are written under a temporary directory as ``a/<name>`` and
    ``b/<name>`` so headers read like a normal git patch.
    """
    options = options or DiffOptions()
    basename = Path(name).name or "file"
    with tempfile.TemporaryDirectory(prefix="diffpane-") as tmp:
        root = Path(tmp)
        (root / "a").mkdir()
        (root / "b").mkdir()
        (root / "a" / basename).write_text(old_text, encoding="utf-8")
        (root / "b" / basename).write_text(new_text, encoding="utf-8")
        return _run_git(
            [*_diff_args(options), "--", f"a/{basename}", f"b/{basename}"],
            cwd=root,
        )
