# contract_artifacts/loader.py
"""
Artifact loaders.

A loader turns a logical artifact name such as "impl/Exchange" into a
handle. The registry only needs resolve(name); BuildDirLoader reads the
JSON files a Truffle build writes, MappingLoader serves handles already
held in memory.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .errors import ArtifactLoadError, ArtifactNotFound

logger = logging.getLogger(__name__)


@dataclass
class ContractArtifact:
    """
    A compiled contract as written by the build.

    Attributes:
        contract_name: Name of the contract
        abi: Contract ABI entries
        bytecode: Creation bytecode (hex string)
        deployed_bytecode: Runtime bytecode (hex string)
        source_path: Solidity source the contract was compiled from
        networks: Deployment records keyed by network id
        path: Artifact file this was read from
    """
    contract_name: str
    abi: List[Dict[str, Any]] = field(default_factory=list)
    bytecode: str = ""
    deployed_bytecode: str = ""
    source_path: Optional[str] = None
    networks: Dict[str, Any] = field(default_factory=dict)
    path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "contractName": self.contract_name,
            "abi": self.abi,
            "bytecode": self.bytecode,
            "deployedBytecode": self.deployed_bytecode,
            "networks": self.networks,
        }
        if self.source_path:
            data["sourcePath"] = self.source_path
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Optional[Path] = None) -> "ContractArtifact":
        return cls(
            contract_name=data["contractName"],
            abi=data["abi"],
            bytecode=data.get("bytecode") or "",
            deployed_bytecode=data.get("deployedBytecode") or "",
            source_path=data.get("sourcePath"),
            networks=data.get("networks") or {},
            path=path,
        )


class ArtifactLoader(ABC):
    """Base class for loaders."""

    @abstractmethod
    def resolve(self, name: str) -> Any:
        """
        Resolve a logical artifact name to a handle.

        Raises:
            ResolutionFailure: If the name cannot be resolved
        """
        pass


def contract_name(name: str) -> str:
    """
    Contract name for a logical artifact path.

    "test/tokens/LRC" -> "LRC", "impl/Exchange.sol" -> "Exchange"
    """
    base = name.rstrip("/").rsplit("/", 1)[-1]
    if base.endswith(".sol"):
        base = base[:-len(".sol")]
    return base


class BuildDirLoader(ArtifactLoader):
    """
    Loads ContractArtifacts from a build directory.

    Structure:
        build_dir/
            Exchange.json
            LRC.json
            ...

    Files are read on every call.
    """

    def __init__(self, build_dir: Path | str):
        self.build_dir = Path(build_dir)

    def artifact_path(self, name: str) -> Path:
        return self.build_dir / f"{contract_name(name)}.json"

    def resolve(self, name: str) -> ContractArtifact:
        path = self.artifact_path(name)
        if not path.is_file():
            logger.warning(f"Artifact not found: {name} ({path})")
            raise ArtifactNotFound(name, f"no such file {path}")

        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read artifact {name}: {e}")
            raise ArtifactLoadError(name, str(e)) from e

        if not isinstance(data, dict) or "contractName" not in data or "abi" not in data:
            logger.warning(f"Malformed artifact {name}: missing contractName or abi")
            raise ArtifactLoadError(name, f"{path} is not a contract artifact")

        if not isinstance(data["abi"], list):
            logger.warning(f"Malformed artifact {name}: abi is not a list")
            raise ArtifactLoadError(name, f"{path} has a non-list abi")

        logger.debug(f"Resolved {name} -> {path}")
        return ContractArtifact.from_dict(data, path=path)

    def available(self) -> List[str]:
        """Contract names present in the build directory."""
        if not self.build_dir.is_dir():
            return []
        return sorted(p.stem for p in self.build_dir.glob("*.json"))


class MappingLoader(ArtifactLoader):
    """Resolves names from an in-memory mapping."""

    def __init__(self, handles: Mapping[str, Any]):
        self.handles = dict(handles)

    def resolve(self, name: str) -> Any:
        if name not in self.handles:
            raise ArtifactNotFound(name)
        return self.handles[name]
