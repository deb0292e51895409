# deployment_registry/__init__.py
"""
Deployment Registry - reuse contracts already deployed by Hardhat Ignition.

This package provides:
- ManifestReader: Reads {ignition}/deployments/{network}/{module}.json
- AddressResolver: Contract addresses with null-safe lookups
- DeploymentFixture: Reuse-if-present, else-deploy fixture policy
- Settings: Environment-driven configuration
"""

__version__ = "0.1.0"

from .config import Settings, get_settings

from .models import (
    ContractRecord,
    DeploymentManifest,
    NetworkScope,
    DEFAULT_NETWORK,
)

from .lookup import (
    LookupStatus,
    ManifestLookup,
    AddressLookup,
)

from .manifests import ManifestReader, ManifestLoadError

from .resolver import (
    AddressResolver,
    addresses_of,
    get_resolver,
    read_deployment,
    get_deployment_address,
    get_all_deployment_addresses,
)

from .fixtures import (
    ContractRuntime,
    ContractBinding,
    DeploymentFixture,
    FixtureAction,
    FixtureDecision,
    resolve_or_deploy,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "ContractRecord",
    "DeploymentManifest",
    "NetworkScope",
    "DEFAULT_NETWORK",
    # Lookups
    "LookupStatus",
    "ManifestLookup",
    "AddressLookup",
    # Manifest reading
    "ManifestReader",
    "ManifestLoadError",
    # Resolution
    "AddressResolver",
    "addresses_of",
    "get_resolver",
    "read_deployment",
    "get_deployment_address",
    "get_all_deployment_addresses",
    # Fixtures
    "ContractRuntime",
    "ContractBinding",
    "DeploymentFixture",
    "FixtureAction",
    "FixtureDecision",
    "resolve_or_deploy",
]
