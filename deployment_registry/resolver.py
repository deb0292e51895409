# deployment_registry/resolver.py
"""
Address Resolver - contract addresses from deployment manifests.

Absence at any stage (no manifest, malformed manifest, unknown contract,
empty address) resolves to "no address". Callers only learn whether a
contract is deployed; lookup_address() is there when they need the reason.
"""

import logging
from typing import Dict, Optional

from .config import Settings
from .lookup import AddressLookup, LookupStatus
from .manifests.loader import ManifestReader
from .models import DeploymentManifest

logger = logging.getLogger(__name__)


class AddressResolver:
    """
    Resolve deployed contract addresses for a module on a network.

    Usage:
        resolver = AddressResolver(ManifestReader("ignition"))
        address = resolver.resolve_address("CounterModule", "Counter")
        if address is None:
            ...  # deploy fresh
    """

    def __init__(self, reader: ManifestReader):
        self.reader = reader

    def lookup_address(
        self,
        module_name: str,
        contract_name: str,
        network_name: Optional[str] = None
    ) -> AddressLookup:
        """Resolve one address, keeping the stage at which it went missing."""
        network = network_name or self.reader.default_network
        manifest_lookup = self.reader.lookup(module_name, network)

        def result(status: LookupStatus, address: Optional[str] = None) -> AddressLookup:
            return AddressLookup(
                status=status,
                module_name=module_name,
                contract_name=contract_name,
                network_name=network,
                path=manifest_lookup.path,
                address=address,
                error=manifest_lookup.error,
            )

        if not manifest_lookup.found:
            return result(manifest_lookup.status)

        record = manifest_lookup.manifest.get_contract(contract_name)
        if record is None:
            logger.debug(f"Contract {contract_name} not in deployment {module_name} on {network}")
            return result(LookupStatus.CONTRACT_NOT_FOUND)

        if not record.has_address:
            logger.debug(f"Contract {contract_name} in deployment {module_name} has no address")
            return result(LookupStatus.ADDRESS_EMPTY)

        return result(LookupStatus.FOUND, record.address)

    def resolve_address(
        self,
        module_name: str,
        contract_name: str,
        network_name: Optional[str] = None
    ) -> Optional[str]:
        """
        Get the deployed address of a contract.

        Args:
            module_name: Ignition module name
            contract_name: Contract key in the manifest (case-sensitive)
            network_name: Network name (default: reader's default network)

        Returns:
            Address string, or None if the contract is not deployed
        """
        lookup = self.lookup_address(module_name, contract_name, network_name)
        return lookup.address if lookup.found else None

    def resolve_all_addresses(
        self,
        module_name: str,
        network_name: Optional[str] = None
    ) -> Dict[str, str]:
        """
        Get every deployed address in a module.

        Returns:
            Mapping of contract name to address; contracts without an
            address are left out. Empty if the manifest is absent.
        """
        manifest = self.reader.read(module_name, network_name)
        if manifest is None:
            return {}
        return addresses_of(manifest)


def addresses_of(manifest: DeploymentManifest) -> Dict[str, str]:
    """Project a manifest onto {contract name: address}, skipping entries without one."""
    return {
        name: record.address
        for name, record in manifest.records().items()
        if record.has_address
    }


# =============================================================================
# Convenience Functions
# =============================================================================

def get_resolver(settings: Optional[Settings] = None) -> AddressResolver:
    """
    Build a resolver from settings.

    A new reader is created on every call; nothing is shared between calls.
    """
    return AddressResolver(ManifestReader.from_settings(settings))


def read_deployment(
    module_name: str,
    network_name: Optional[str] = None,
    settings: Optional[Settings] = None
) -> Optional[DeploymentManifest]:
    """Read a manifest using the configured ignition directory."""
    return get_resolver(settings).reader.read(module_name, network_name)


def get_deployment_address(
    module_name: str,
    contract_name: str,
    network_name: Optional[str] = None,
    settings: Optional[Settings] = None
) -> Optional[str]:
    """Resolve one contract address using the configured ignition directory."""
    return get_resolver(settings).resolve_address(module_name, contract_name, network_name)


def get_all_deployment_addresses(
    module_name: str,
    network_name: Optional[str] = None,
    settings: Optional[Settings] = None
) -> Dict[str, str]:
    """Resolve all contract addresses using the configured ignition directory."""
    return get_resolver(settings).resolve_all_addresses(module_name, network_name)
