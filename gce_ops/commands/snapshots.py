"""
GCE Ops - Snapshot Commands

snapshots create: snapshot zonal disks. The createSnapshot operation is
    zonal (it runs against the disk) but the snapshot itself is global,
    so the result is fetched from the global snapshots collection.
snapshots delete: delete snapshots (global operations)
"""

from datetime import datetime, timezone

from gce_ops.commands.base import ComputeCommand
from gce_ops.core.config import resolve_zone


def default_snapshot_name(disk_name: str, now: datetime = None) -> str:
    """
    Snapshot name used when none is given: '<disk>-<UTC timestamp>z'.

    Example:
        default_snapshot_name('web-1') -> 'web-1-20250101120000z'
    """
    now = now or datetime.now(timezone.utc)
    return f"{disk_name}-{now:%Y%m%d%H%M%S}z"


class CreateSnapshotsCommand(ComputeCommand):
    """Creates a snapshot of each named disk."""

    group = 'snapshots'
    verb = 'create'
    help = 'Create snapshots of Compute Engine disks.'

    @classmethod
    def add_arguments(cls, parser):
        parser.add_argument(
            'names',
            metavar='DISK_NAME',
            nargs='+',
            help='Names of the disks to snapshot.'
        )
        parser.add_argument(
            '--snapshot-names',
            metavar='NAME',
            nargs='+',
            help='Snapshot names, one per disk. Default: <disk>-<timestamp>z'
        )
        parser.add_argument(
            '--description',
            metavar='TEXT',
            help='Description for the snapshots.'
        )
        parser.add_argument(
            '--guest-flush',
            action='store_true',
            help='Flush the guest file system before snapshotting (Windows VSS).'
        )

    def process(self, args):
        zone = resolve_zone(self.config)

        snapshot_names = args.snapshot_names or [default_snapshot_name(d) for d in args.names]
        if len(snapshot_names) != len(args.names):
            raise ValueError("--snapshot-names must name one snapshot per disk")

        for disk_name, snapshot_name in zip(args.names, snapshot_names):
            body = {'name': snapshot_name}
            if args.description:
                body['description'] = args.description

            params = {}
            if args.guest_flush:
                params['guestFlush'] = True

            self.logger.info(f"Creating snapshot {snapshot_name} of disk {disk_name}...")
            operation = self._execute(
                self.compute.disks().createSnapshot(
                    project=self.project,
                    zone=zone,
                    disk=disk_name,
                    body=body,
                    **params
                ),
                'disks.createSnapshot', project=self.project, zone=zone, disk=disk_name
            )
            self.registry.add_zone_operation(
                self.project, zone, operation,
                on_success=self._emit_fetched(
                    lambda snapshot_name=snapshot_name: self.compute.snapshots().get(
                        project=self.project,
                        snapshot=snapshot_name
                    )
                )
            )


class DeleteSnapshotsCommand(ComputeCommand):
    """Deletes one or more snapshots."""

    group = 'snapshots'
    verb = 'delete'
    help = 'Delete Compute Engine snapshots.'

    def process(self, args):
        for snapshot_name in args.names:
            self.logger.info(f"Deleting snapshot {snapshot_name}...")
            operation = self._execute(
                self.compute.snapshots().delete(
                    project=self.project,
                    snapshot=snapshot_name
                ),
                'snapshots.delete', project=self.project, snapshot=snapshot_name
            )
            self.registry.add_global_operation(self.project, operation)
