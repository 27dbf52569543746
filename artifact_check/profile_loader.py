"""Load rule profiles from YAML files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from artifact_check.errors import ProfileError
from artifact_check.models.profile import Profile

log = logging.getLogger(__name__)

PROFILE_FILENAME = ".artifact-check.yaml"


def load_profile(path: Path) -> Profile:
    """Load and validate a profile file.

    Args:
        path: Location of the YAML profile

    Returns:
        The validated profile

    Raises:
        ProfileError: If the file is missing, empty, not YAML, or fails
            schema validation

    """
    if not path.is_file():
        raise ProfileError(f"Profile file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ProfileError(f"Empty profile file: {path}")

    if not isinstance(data, dict):
        raise ProfileError(f"Invalid profile schema in {path}: expected a mapping")

    try:
        profile = Profile.model_validate(data)
    except ValidationError as e:
        raise ProfileError(f"Invalid profile schema in {path}: {e}") from e

    log.info("Loaded profile from %s", path)
    return profile


def resolve_profile(root: Path, explicit: Path | None = None) -> Profile:
    """Return the profile for a run.

    An explicit path must exist. Otherwise the project's own profile file is
    used when present, falling back to the built-in defaults.
    """
    if explicit is not None:
        return load_profile(explicit)

    candidate = root / PROFILE_FILENAME
    if candidate.is_file():
        return load_profile(candidate)

    log.info("No profile found under %s, using defaults", root)
    return Profile()
