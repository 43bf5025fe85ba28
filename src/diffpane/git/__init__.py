"""Git interface layer — unified diff generation."""

from diffpane.git.adapter import GitError, diff_files, diff_texts

__all__ = ["GitError", "diff_files", "diff_texts"]
