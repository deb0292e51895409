# deployment_registry/manifests/__init__.py
"""
Deployment manifest reading.

Supports:
- Conventional per-network, per-module manifest paths
- Missing and malformed manifests collapsed to "absent"
- Tagged lookups that keep the two apart for diagnostics
"""

from .loader import ManifestReader, ManifestLoadError

__all__ = [
    "ManifestReader",
    "ManifestLoadError",
]
