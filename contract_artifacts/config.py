# contract_artifacts/config.py
"""
Loader configuration.

Example config file:

    build_dir: build/contracts

A relative build_dir is taken relative to the config file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .loader import BuildDirLoader

logger = logging.getLogger(__name__)

DEFAULT_BUILD_DIR = Path("build/contracts")


@dataclass
class ArtifactsConfig:
    """Where to find compiled artifacts."""
    build_dir: Path = DEFAULT_BUILD_DIR

    @classmethod
    def from_yaml(cls, yaml_content: str, base_dir: Optional[Path] = None) -> "ArtifactsConfig":
        """Parse config from YAML string."""
        data = yaml.safe_load(yaml_content)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

        value = data.get("build_dir")
        if value is None:
            build_dir = DEFAULT_BUILD_DIR
        elif isinstance(value, str):
            build_dir = Path(value)
        else:
            raise ValueError(f"build_dir must be a path, got {type(value).__name__}")

        if base_dir is not None and not build_dir.is_absolute():
            build_dir = base_dir / build_dir

        return cls(build_dir=build_dir)

    @classmethod
    def from_file(cls, path: Path | str) -> "ArtifactsConfig":
        """Load config from YAML file."""
        path = Path(path)
        logger.debug(f"Loading config from {path}")
        with open(path, "r") as f:
            return cls.from_yaml(f.read(), base_dir=path.parent)

    def make_loader(self) -> BuildDirLoader:
        return BuildDirLoader(self.build_dir)
