"""JavaScript syntax validators."""

from artifact_check.validators.base import SyntaxValidator, SyntaxVerdict
from artifact_check.validators.node import NodeSyntaxValidator

__all__ = ["NodeSyntaxValidator", "SyntaxValidator", "SyntaxVerdict"]
