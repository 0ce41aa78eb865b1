"""
GCE Ops - Address Commands

addresses delete: delete regional addresses, or global ones with --global
"""

from gce_ops.commands.base import ComputeCommand
from gce_ops.core.config import resolve_region


class DeleteAddressesCommand(ComputeCommand):
    """
    Deletes regional (default) or global static addresses.

    The delete operation's own 'region' URL decides where it is waited on:
    regional deletes report their region, global deletes report none.
    """

    group = 'addresses'
    verb = 'delete'
    help = 'Delete Compute Engine static addresses.'

    @classmethod
    def add_arguments(cls, parser):
        super().add_arguments(parser)
        parser.add_argument(
            '--global',
            dest='global_address',
            action='store_true',
            help='The addresses are global addresses.'
        )

    def process(self, args):
        if args.global_address:
            kind = 'global address'
            method_name = 'globalAddresses.delete'
            location = {}
            collection = self.compute.globalAddresses()
        else:
            kind = 'address'
            method_name = 'addresses.delete'
            location = {'region': resolve_region(self.config)}
            collection = self.compute.addresses()

        for address_name in args.names:
            self.logger.info(f"Deleting {kind} {address_name}...")
            params = dict(project=self.project, address=address_name, **location)
            operation = self._execute(collection.delete(**params), method_name, **params)
            self.registry.add_operation(self.project, operation)
