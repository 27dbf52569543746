"""Read-only git lookups used by the documentation checks."""

import logging
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 10.0


def file_exists_at_ref(repo_path: Path, ref: str, file_path: str) -> bool:
    """Check whether a file exists at a git reference.

    Any failure (git missing, not a repository, unknown ref, timeout) is
    reported as absence.
    """
    try:
        process = subprocess.run(
            ["git", "cat-file", "-e", f"{ref}:{file_path}"],
            cwd=repo_path,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=GIT_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        log.info("git lookup of %s:%s failed: %s", ref, file_path, e)
        return False
    return process.returncode == 0
