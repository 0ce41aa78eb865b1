"""
GCE Ops - Operation Scopes

Every Compute Engine operation lives in exactly one scope:
a zone, a region, or the project's global collection.
The scope decides which operations endpoint reports its status.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ZoneScope:
    """Zonal operation (disks, instances, snapshots of zonal disks)."""
    project: str
    zone: str

    kind = 'zone'

    def __str__(self):
        return f"projects/{self.project}/zones/{self.zone}"


@dataclass(frozen=True)
class RegionScope:
    """Regional operation (addresses, target pools)."""
    project: str
    region: str

    kind = 'region'

    def __str__(self):
        return f"projects/{self.project}/regions/{self.region}"


@dataclass(frozen=True)
class GlobalScope:
    """Global operation (images, routes, templates, firewalls...)."""
    project: str

    kind = 'global'

    def __str__(self):
        return f"projects/{self.project}/global"


Scope = Union[ZoneScope, RegionScope, GlobalScope]


def resource_name(url: str) -> str:
    """
    Get the name from a resource URL.

    Example:
        resource_name('https://.../zones/us-central1-a') -> 'us-central1-a'
    """
    return url.rstrip('/').rsplit('/', 1)[-1]


def scope_from_operation(project: str, operation: dict) -> Scope:
    """
    Work out the scope of an operation from its 'zone' / 'region' URL.

    Args:
        project: Project the operation was issued in
        operation: Operation resource as returned by the Compute API

    Returns:
        ZoneScope, RegionScope or GlobalScope
    """
    if operation.get('zone'):
        return ZoneScope(project, resource_name(operation['zone']))
    if operation.get('region'):
        return RegionScope(project, resource_name(operation['region']))
    return GlobalScope(project)
