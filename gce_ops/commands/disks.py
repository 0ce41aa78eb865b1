"""
GCE Ops - Disk Commands

disks delete: delete zonal disks (nothing is emitted)
disks resize: grow zonal disks, emit each disk once its resize is done
"""

from gce_ops.commands.base import ComputeCommand
from gce_ops.core.config import resolve_zone


class DeleteDisksCommand(ComputeCommand):
    """Deletes one or more disks in a zone."""

    group = 'disks'
    verb = 'delete'
    help = 'Delete Compute Engine disks.'

    def process(self, args):
        zone = resolve_zone(self.config)

        for disk_name in args.names:
            self.logger.info(f"Deleting disk {disk_name}...")
            operation = self._execute(
                self.compute.disks().delete(
                    project=self.project,
                    zone=zone,
                    disk=disk_name
                ),
                'disks.delete', project=self.project, zone=zone, disk=disk_name
            )
            self.registry.add_zone_operation(self.project, zone, operation)


class ResizeDisksCommand(ComputeCommand):
    """Resizes one or more disks in a zone. Disks can only grow."""

    group = 'disks'
    verb = 'resize'
    help = 'Resize Compute Engine disks.'

    @classmethod
    def add_arguments(cls, parser):
        super().add_arguments(parser)
        parser.add_argument(
            '--size',
            type=int,
            metavar='SIZE_GB',
            required=True,
            help='New size of the disks in GB.'
        )

    def process(self, args):
        zone = resolve_zone(self.config)

        for disk_name in args.names:
            self.logger.info(f"Resizing disk {disk_name} to {args.size}GB...")
            operation = self._execute(
                self.compute.disks().resize(
                    project=self.project,
                    zone=zone,
                    disk=disk_name,
                    body={'sizeGb': str(args.size)}
                ),
                'disks.resize', project=self.project, zone=zone, disk=disk_name
            )
            self.registry.add_zone_operation(
                self.project, zone, operation,
                on_success=self._emit_fetched(
                    lambda disk_name=disk_name: self.compute.disks().get(
                        project=self.project,
                        zone=zone,
                        disk=disk_name
                    )
                )
            )
