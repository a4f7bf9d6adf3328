"""Admission checks for Proxmox cluster and machine resources."""

__version__ = "0.1.0"

__all__ = ["cluster", "errors", "ipset", "machine", "model"]