"""
Pytest configuration for gomamayo tests.

Hypothesis profiles:
- default : print_blob for reproducible failures, database kept
- ci      : more examples, same reproduction output
Select with HYPOTHESIS_PROFILE=ci.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest
from hypothesis import settings

settings.register_profile("default", print_blob=True, derandomize=False)
settings.register_profile("ci", print_blob=True, derandomize=False, max_examples=1000)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def repo_root() -> Path:
    return REPO_ROOT


@pytest.fixture
def run_cli():
    """Run the CLI as a subprocess from the repo root; returns CompletedProcess."""

    def _run(*args, input_text=None, env=None):
        full_env = dict(os.environ)
        full_env.update(env or {})
        full_env.setdefault("PYTHONIOENCODING", "utf-8")
        return subprocess.run(
            [sys.executable, "-m", "gomamayo.cli.gomamayo_cli", *args],
            cwd=str(REPO_ROOT),
            input=input_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=full_env,
        )

    return _run
