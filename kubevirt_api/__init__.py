"""Data models for virtual machine instances, virtual machines, KubeVirt deployments and snapshots."""

__version__ = "0.1.0"

__all__ = ["constants", "kubevirt", "meta", "quantity", "snapshot", "vm", "vmi"]