# contract_artifacts/errors.py
"""
Errors raised while resolving artifacts.

Every failure to turn a logical artifact name into a handle is a
ResolutionFailure. Loaders may raise the more specific subclasses.
"""

from typing import Optional


class ResolutionFailure(Exception):
    """A logical artifact name could not be resolved."""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        self.reason = reason
        message = f"Cannot resolve artifact {name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ArtifactNotFound(ResolutionFailure):
    """The loader has no artifact under the requested name."""


class ArtifactLoadError(ResolutionFailure):
    """The artifact exists but could not be read or parsed."""
