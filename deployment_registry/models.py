# deployment_registry/models.py
"""
Deployment manifest data model.

Provides:
- ContractRecord: One deployed contract instance (address + metadata)
- DeploymentManifest: One deployment run (id + contracts by name)
- NetworkScope: (network, module) lookup key for a manifest file

Manifests are written by the deployment tool, not by us, so both records are
open: unknown fields are kept in ``model_extra`` and survive ``to_dict()``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_NETWORK = "hardhat"
MANIFEST_DIR = "deployments"
MANIFEST_SUFFIX = ".json"

# Known contract fields; a non-string value reads as unset
_TYPED_KEYS = ("address", "contractName")


class ContractRecord(BaseModel):
    """A deployed contract instance as recorded in the manifest."""

    model_config = ConfigDict(extra="allow", frozen=True)

    address: Optional[str] = None
    contract_name: Optional[str] = Field(default=None, alias="contractName")

    @classmethod
    def from_entry(cls, entry: Any) -> Optional["ContractRecord"]:
        """
        Null-safe view of one raw contract entry.

        Non-object entries have no record. Known fields of the wrong type
        read as unset, so the entry counts as having no address.
        """
        if not isinstance(entry, dict):
            return None
        return cls.model_validate({
            key: value for key, value in entry.items()
            if key not in _TYPED_KEYS or value is None or isinstance(value, str)
        })

    @property
    def has_address(self) -> bool:
        """True when the record carries a usable (non-empty) address."""
        return bool(self.address)

    @property
    def extra(self) -> Dict[str, Any]:
        """Fields written by the deployment tool that we don't model."""
        return dict(self.model_extra or {})

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the manifest's JSON shape."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class DeploymentManifest(BaseModel):
    """
    A deployment run: identifier plus contracts keyed by name.

    Entries under ``contracts`` stay raw and are checked one at a time on
    lookup, so a broken entry never hides its siblings.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    contracts: Dict[str, Any]

    @property
    def extra(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

    def get_contract(self, contract_name: str) -> Optional[ContractRecord]:
        """Exact, case-sensitive lookup by contract name."""
        return ContractRecord.from_entry(self.contracts.get(contract_name))

    def records(self) -> Dict[str, ContractRecord]:
        """Every contract entry that is an object, as a ContractRecord."""
        records = {}
        for name, entry in self.contracts.items():
            record = ContractRecord.from_entry(entry)
            if record is not None:
                records[name] = record
        return records

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


@dataclass(frozen=True)
class NetworkScope:
    """Identifies which manifest file to load. Never persisted."""

    network_name: str
    module_name: str

    def manifest_path(self, ignition_dir: Path) -> Path:
        """{ignition_dir}/deployments/{network}/{module}.json"""
        return (
            Path(ignition_dir)
            / MANIFEST_DIR
            / self.network_name
            / f"{self.module_name}{MANIFEST_SUFFIX}"
        )
