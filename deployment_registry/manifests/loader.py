# deployment_registry/manifests/loader.py
"""
Manifest Reader for deployment manifests written by Hardhat Ignition.

Layout:
    {ignition_dir}/deployments/{network}/{module}.json

Behaviour:
- One read attempt per call, no retries, no in-memory cache
- Missing file -> "absent" (not an error)
- Malformed file or I/O failure -> logged once, then "absent"
- lookup() keeps the missing/malformed distinction for diagnostics
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from ..config import Settings, get_settings
from ..lookup import ManifestLookup
from ..models import (
    DEFAULT_NETWORK,
    MANIFEST_DIR,
    MANIFEST_SUFFIX,
    DeploymentManifest,
    NetworkScope,
)

logger = logging.getLogger(__name__)


class ManifestLoadError(Exception):
    """Raised when a manifest exists but cannot be read or parsed."""
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to load manifest '{path}': {reason}")


class ManifestReader:
    """
    Read per-network, per-module deployment manifests.

    Usage:
        reader = ManifestReader("ignition")
        manifest = reader.read("CounterModule")          # default network
        manifest = reader.read("CounterModule", "sepolia")
    """

    def __init__(
        self,
        ignition_dir: Union[str, Path],
        default_network: str = DEFAULT_NETWORK
    ):
        """
        Initialize manifest reader.

        Args:
            ignition_dir: Ignition root directory (contains deployments/)
            default_network: Network used when a call omits network_name
        """
        self.ignition_dir = Path(ignition_dir).expanduser()
        self.default_network = default_network

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ManifestReader":
        settings = settings or get_settings()
        return cls(settings.ignition_dir, default_network=settings.default_network)

    def scope(self, module_name: str, network_name: Optional[str] = None) -> NetworkScope:
        return NetworkScope(network_name or self.default_network, module_name)

    def manifest_path(self, module_name: str, network_name: Optional[str] = None) -> Path:
        """Compute where the manifest for (module, network) is stored."""
        return self.scope(module_name, network_name).manifest_path(self.ignition_dir)

    # ==========================================================================
    # Reading
    # ==========================================================================

    def read(
        self,
        module_name: str,
        network_name: Optional[str] = None
    ) -> Optional[DeploymentManifest]:
        """
        Load a deployment manifest.

        Args:
            module_name: Ignition module name (e.g. "CounterModule")
            network_name: Network name (default: reader's default network)

        Returns:
            Parsed manifest, or None if it is missing or unreadable
        """
        return self.lookup(module_name, network_name).manifest

    def lookup(
        self,
        module_name: str,
        network_name: Optional[str] = None
    ) -> ManifestLookup:
        """
        Load a deployment manifest, reporting why it is absent.

        Never raises: malformed content is logged and reported as
        MANIFEST_MALFORMED.
        """
        path = self.manifest_path(module_name, network_name)

        try:
            if not path.exists():
                logger.debug(f"No deployment manifest at {path}")
                return ManifestLookup.missing(path)
            manifest = self._parse(path)
        except ManifestLoadError as e:
            logger.error(f"Error reading deployment: {e}")
            return ManifestLookup.malformed(path, e.reason)
        except (OSError, ValueError) as e:
            # e.g. name too long, embedded null byte
            logger.error(f"Error reading deployment: {ManifestLoadError(path, str(e))}")
            return ManifestLookup.malformed(path, str(e))

        logger.debug(f"Loaded deployment '{manifest.id}' from {path} ({len(manifest.contracts)} contracts)")
        return ManifestLookup.hit(path, manifest)

    def _parse(self, path: Path) -> DeploymentManifest:
        """Read and validate one manifest file."""
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestLoadError(path, f"Unreadable file: {e}")

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ManifestLoadError(path, f"Invalid JSON: {e}")

        if not isinstance(data, dict):
            raise ManifestLoadError(path, f"Expected a JSON object, got {type(data).__name__}")

        try:
            return DeploymentManifest.model_validate(data)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise ManifestLoadError(path, f"Invalid manifest: {errors}")

    # ==========================================================================
    # Discovery
    # ==========================================================================

    def available_modules(self, network_name: Optional[str] = None) -> List[str]:
        """List module names that have a manifest on the given network."""
        network_dir = self.ignition_dir / MANIFEST_DIR / (network_name or self.default_network)
        if not network_dir.is_dir():
            return []

        return sorted(
            p.stem for p in network_dir.iterdir()
            if p.is_file() and p.suffix == MANIFEST_SUFFIX
        )
