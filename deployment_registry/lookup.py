# deployment_registry/lookup.py
"""
Tagged lookup results.

Every stage of resolution (manifest, contract, address) reports a
LookupStatus instead of a bare None, so callers that care can tell a missing
manifest from a malformed one. The public resolve functions collapse all
non-FOUND statuses to "absent".
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .models import DeploymentManifest


class LookupStatus(Enum):
    """Outcome of a single lookup stage."""

    FOUND = "found"

    # Manifest stage
    MANIFEST_NOT_FOUND = "manifest_not_found"
    MANIFEST_MALFORMED = "manifest_malformed"  # parse/validation/I/O failure

    # Contract stage
    CONTRACT_NOT_FOUND = "contract_not_found"
    ADDRESS_EMPTY = "address_empty"


@dataclass(frozen=True)
class ManifestLookup:
    """Result of reading one manifest file."""

    status: LookupStatus
    path: Path
    manifest: Optional[DeploymentManifest] = None
    error: str = ""

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND and self.manifest is not None

    @classmethod
    def hit(cls, path: Path, manifest: DeploymentManifest) -> "ManifestLookup":
        return cls(LookupStatus.FOUND, path, manifest)

    @classmethod
    def missing(cls, path: Path) -> "ManifestLookup":
        return cls(LookupStatus.MANIFEST_NOT_FOUND, path)

    @classmethod
    def malformed(cls, path: Path, error: str) -> "ManifestLookup":
        return cls(LookupStatus.MANIFEST_MALFORMED, path, error=error)


@dataclass(frozen=True)
class AddressLookup:
    """Result of resolving one contract address."""

    status: LookupStatus
    module_name: str
    contract_name: str
    network_name: str
    path: Path
    address: Optional[str] = None
    error: str = ""

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND and bool(self.address)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "status": self.status.value,
            "module": self.module_name,
            "contract": self.contract_name,
            "network": self.network_name,
            "path": str(self.path),
            "address": self.address,
            "error": self.error,
        }
