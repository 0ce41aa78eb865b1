"""
GCE Ops - Commands Module

Every command starts Compute Engine operations and waits for them
at the end of the invocation.

Usage:
    from gce_ops.commands import COMMANDS

    command_class = COMMANDS[('disks', 'delete')]
    command = command_class(compute, project, config, token=token)
    command.run(args)
"""

from gce_ops.commands.base import ComputeCommand
from gce_ops.commands.disks import DeleteDisksCommand, ResizeDisksCommand
from gce_ops.commands.instances import (
    StartInstancesCommand,
    StopInstancesCommand,
    DeleteInstancesCommand,
)
from gce_ops.commands.snapshots import CreateSnapshotsCommand, DeleteSnapshotsCommand
from gce_ops.commands.global_resources import (
    DeleteImagesCommand,
    DeleteInstanceTemplatesCommand,
    DeleteRoutesCommand,
    DeleteFirewallsCommand,
    DeleteBackendServicesCommand,
)
from gce_ops.commands.addresses import DeleteAddressesCommand
from gce_ops.commands.target_pools import (
    AddTargetPoolInstancesCommand,
    RemoveTargetPoolInstancesCommand,
)

COMMAND_CLASSES = [
    DeleteDisksCommand,
    ResizeDisksCommand,
    StartInstancesCommand,
    StopInstancesCommand,
    DeleteInstancesCommand,
    CreateSnapshotsCommand,
    DeleteSnapshotsCommand,
    DeleteImagesCommand,
    DeleteInstanceTemplatesCommand,
    DeleteRoutesCommand,
    DeleteFirewallsCommand,
    DeleteBackendServicesCommand,
    DeleteAddressesCommand,
    AddTargetPoolInstancesCommand,
    RemoveTargetPoolInstancesCommand,
]

# (group, verb) -> command class
COMMANDS = {(cls.group, cls.verb): cls for cls in COMMAND_CLASSES}

__all__ = [
    'ComputeCommand',
    'COMMAND_CLASSES',
    'COMMANDS',
] + [cls.__name__ for cls in COMMAND_CLASSES]
