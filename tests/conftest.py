"""Shared test fixtures — sample diffs, surfaces, schedulers."""

from __future__ import annotations

import textwrap

import pytest

from diffpane.host.memory import ManualScheduler, MemorySurface


@pytest.fixture
def surface() -> MemorySurface:
    return MemorySurface()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def sample_diff() -> str:
    """A full git patch with one hunk and a trailing no-newline marker."""
    return textwrap.dedent("""\
        diff --git a/a b/a
        index 000..111 100644
        --- a/a
        +++ b/a
        @@ -1,1 +1,2 @@
        -old
        +new
        +new2
         context
        \\ No newline at end of file
    """)


@pytest.fixture
def sample_diff_two_hunks() -> str:
    """Two hunks in one file."""
    return textwrap.dedent("""\
        diff --git a/app.py b/app.py
        index 1234567..abcdef0 100644
        --- a/app.py
        +++ b/app.py
        @@ -1,3 +1,3 @@ def main():
         import os
        -import sys
        +import json
         
        @@ -20,2 +20,3 @@ class App:
             def run(self):
        +        self.setup()
                 return 0
    """)


@pytest.fixture
def sample_diff_markers_in_middle() -> str:
    """Both sides lack a trailing newline; markers sit mid-hunk."""
    return textwrap.dedent("""\
        @@ -1 +1 @@
        -old last line
        \\ No newline at end of file
        +new last line
        \\ No newline at end of file
    """)


def make_added_diff(count: int, header: bool = True) -> str:
    """A diff of *count* added lines, optionally under one hunk header."""
    lines = [f"@@ -0,0 +1,{count} @@"] if header else []
    lines.extend(f"+line{i}" for i in range(1, count + 1))
    return "\n".join(lines)
