"""Git-related utilities for the needless scanner."""

import logging
import subprocess

logger = logging.getLogger(__name__)


def is_git_repo() -> bool:
    """Check if current directory is a git repository."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--git-dir"],
            capture_output=True,
            text=True,
        )
    except OSError:
        logger.debug("git executable not available")
        return False
    return result.returncode == 0


def get_staged_diff() -> str:
    """Get the staged diff, or an empty string outside a usable repository."""
    if not is_git_repo():
        logger.warning("Not a git repository, nothing staged to check")
        return ""

    try:
        result = subprocess.run(
            ["git", "diff", "--cached", "--no-color"],
            capture_output=True, text=True, timeout=30
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Failed to get staged diff: %s", e)
        return ""
    if result.returncode != 0:
        logger.warning("git diff --cached failed: %s", result.stderr.strip())
        return ""
    return result.stdout
