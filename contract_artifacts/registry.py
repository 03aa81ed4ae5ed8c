# contract_artifacts/registry.py
"""
Registry of the compiled contract artifacts used by tests and deployment.

The set of artifacts is fixed. Each one is declared below as a field
carrying its logical path; constructing the registry asks the loader for
every path exactly once, in declaration order, and freezes the results.

Example:
    registry = ArtifactRegistry(BuildDirLoader("build/contracts"))
    exchange = registry.Exchange
"""

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Tuple

from .errors import ResolutionFailure


def _artifact(path: str) -> Any:
    return field(metadata={"path": path})


@dataclass(frozen=True, init=False, eq=False)
class ArtifactRegistry:
    """
    Resolved artifact handles, one field per logical name.

    Handles are whatever the loader returns; they are stored unmodified.
    No reference to the loader is kept after construction. Instances
    compare and hash by identity since handles need not be hashable.
    """
    Exchange: Any = _artifact("impl/Exchange")
    ExchangeHelper: Any = _artifact("impl/ExchangeHelper")
    TokenRegistry: Any = _artifact("impl/TokenRegistry")
    OperatorRegistry: Any = _artifact("impl/OperatorRegistry")
    BlockVerifier: Any = _artifact("impl/BlockVerifier")
    DummyToken: Any = _artifact("test/DummyToken")
    LRCToken: Any = _artifact("test/tokens/LRC")
    GTOToken: Any = _artifact("test/tokens/GTO")
    RDNToken: Any = _artifact("test/tokens/RDN")
    REPToken: Any = _artifact("test/tokens/REP")
    WETHToken: Any = _artifact("test/tokens/WETH")
    INDAToken: Any = _artifact("test/tokens/INDA")
    INDBToken: Any = _artifact("test/tokens/INDB")
    TESTToken: Any = _artifact("test/tokens/TEST")

    def __init__(self, loader: Any):
        """
        Resolve every declared artifact through the loader.

        Args:
            loader: Object with a resolve(name) method

        Raises:
            TypeError: If loader has no callable resolve
            ResolutionFailure: If any name fails to resolve. Construction
                stops at the first failure.
        """
        resolve = getattr(loader, "resolve", None)
        if not callable(resolve):
            raise TypeError(f"loader must provide resolve(name), got {type(loader).__name__}")

        for f in fields(self):
            object.__setattr__(self, f.name, _resolve(resolve, f.metadata["path"]))

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        """Field names in resolution order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def path_for(cls, name: str) -> str:
        """Logical path resolved for a field."""
        return ARTIFACT_PATHS[name]

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _resolve(resolve: Callable[[str], Any], path: str) -> Any:
    try:
        return resolve(path)
    except ResolutionFailure:
        raise
    except Exception as e:
        raise ResolutionFailure(path, str(e)) from e


# Field name -> logical path, in resolution order
ARTIFACT_PATHS: Dict[str, str] = {
    f.name: f.metadata["path"] for f in fields(ArtifactRegistry)
}
