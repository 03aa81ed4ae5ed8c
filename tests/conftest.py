# tests/conftest.py
"""Shared fixtures for artifact tests."""

import json
import tempfile
from pathlib import Path

import pytest

from contract_artifacts.loader import contract_name
from contract_artifacts.registry import ARTIFACT_PATHS


def write_artifact(build_dir: Path, name: str, abi_entries: int = 1, bytecode: str = "0x6080"):
    """Write a minimal Truffle-style artifact for a contract name."""
    data = {
        "contractName": name,
        "abi": [{"type": "function", "name": f"f{i}"} for i in range(abi_entries)],
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
        "sourcePath": f"contracts/{name}.sol",
        "networks": {},
    }
    path = build_dir / f"{name}.json"
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def make_artifact():
    """Artifact writer for tests that build their own directory."""
    return write_artifact


@pytest.fixture
def build_dir():
    """Create temporary build directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def full_build_dir(build_dir):
    """Build directory holding an artifact for every registry entry."""
    for path in ARTIFACT_PATHS.values():
        write_artifact(build_dir, contract_name(path))
    return build_dir
