# contract_artifacts - Registry of compiled contract artifacts
#
# Resolves a fixed set of logical artifact names (exchange implementation
# contracts and test tokens) through a loader, once, and exposes the
# results as named fields for test and deployment code.
#
# Core concepts:
# - ArtifactRegistry: Frozen record of resolved handles, one field per name
# - Loader: Anything with resolve(name) -> handle
# - ResolutionFailure: Raised when a name cannot be resolved

from .errors import ResolutionFailure, ArtifactNotFound, ArtifactLoadError
from .loader import ArtifactLoader, BuildDirLoader, MappingLoader, ContractArtifact
from .registry import ArtifactRegistry, ARTIFACT_PATHS
from .config import ArtifactsConfig

__all__ = [
    "ArtifactRegistry",
    "ARTIFACT_PATHS",
    "ArtifactLoader",
    "BuildDirLoader",
    "MappingLoader",
    "ContractArtifact",
    "ArtifactsConfig",
    "ResolutionFailure",
    "ArtifactNotFound",
    "ArtifactLoadError",
]

__version__ = "0.1.0"
