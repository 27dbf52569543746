"""Errors that abort a run before or during the environment check."""

from pathlib import Path


class FatalSetupError(Exception):
    """Raised when the run cannot proceed; the process exits with status 1."""


class UsageError(FatalSetupError):
    """Raised for unrecognized or malformed command-line arguments."""


class ProfileError(FatalSetupError):
    """Raised when a profile file is missing, malformed or invalid."""


class SuiteNotFoundError(FatalSetupError):
    """Raised when a suite key has no registered implementation."""


class RootMissingError(FatalSetupError):
    """Raised when the project root does not exist."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Project root not found: {root}")
        self.root = root


class ArtifactMissingError(FatalSetupError):
    """Raised when the artifact under review does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path.name} not found")
        self.path = path
