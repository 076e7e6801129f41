"""
Infoblox IPAM provider - network container resources for infrastructure-as-code hosts.

This package provides the provider plugin logic (allocation strategy selection,
validation and WAPI calls) and a small operator CLI.
"""

__version__ = "1.0.0"
__all__ = ["provider", "cli"]
