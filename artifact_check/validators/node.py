"""Syntax validation through the host's Node.js binary."""

import logging
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path

from artifact_check.validators.base import SyntaxValidator, SyntaxVerdict

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class NodeSyntaxValidator(SyntaxValidator):
    """Runs ``node --check`` on a temporary copy of the source."""

    executable: str = "node"
    timeout: float = 30.0

    def validate_syntax(self, source: str, *, module: bool = False) -> SyntaxVerdict:
        """Validate source with Node.js, skipping when it cannot run."""
        binary = shutil.which(self.executable)
        if binary is None:
            log.info("%s not found on PATH, skipping syntax check", self.executable)
            return SyntaxVerdict.unavailable("Node.js not available")

        with tempfile.TemporaryDirectory(prefix="artifact_check_") as tmp:
            script = Path(tmp) / ("inline.mjs" if module else "inline.js")
            script.write_text(source, encoding="utf-8")
            log.info("Using Node.js for syntax validation: %s", binary)
            try:
                process = subprocess.run(
                    [binary, "--check", str(script)],
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    check=False,
                )
            except subprocess.TimeoutExpired:
                log.warning("Node.js syntax check timed out after %ss", self.timeout)
                return SyntaxVerdict.unavailable(
                    f"Node.js did not finish within {self.timeout} seconds"
                )
            except OSError as e:
                log.warning("Failed to run Node.js: %s", e)
                return SyntaxVerdict.unavailable(f"Node.js could not be started: {e}")

        if process.returncode == 0:
            return SyntaxVerdict(ok=True)

        output = (process.stderr or process.stdout).strip()
        return SyntaxVerdict(ok=False, output=output or None)
