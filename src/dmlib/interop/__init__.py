"""Interop - host object conversion."""

from dmlib.interop.host import HostMap, filter_map, from_host, to_host, to_host_fn

__all__ = [
    "HostMap",
    "to_host",
    "from_host",
    "to_host_fn",
    "filter_map",
]
