"""
Deployment Registry Integration Tests

Tests covering:
- Manifest on disk -> resolver -> fixture -> live contract handle
- Reuse of an Ignition deployment vs. fresh deployment
"""
