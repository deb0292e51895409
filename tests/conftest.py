"""
Shared fixtures: a temporary ignition directory and a manifest writer.
"""

import json
from pathlib import Path

import pytest


COUNTER_ADDRESS = "0x1111111111111111111111111111111111111111"


@pytest.fixture
def ignition_dir(tmp_path) -> Path:
    """Empty ignition root (no deployments/ yet)."""
    root = tmp_path / "ignition"
    root.mkdir()
    return root


@pytest.fixture
def write_manifest(ignition_dir):
    """Write a manifest (dict or raw text) at the conventional location."""

    def _write(module_name, data, network_name="hardhat") -> Path:
        path = ignition_dir / "deployments" / network_name / f"{module_name}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def counter_manifest():
    return {
        "id": "CounterModule",
        "contracts": {
            "Counter": {
                "address": COUNTER_ADDRESS,
                "contractName": "Counter",
            }
        }
    }
