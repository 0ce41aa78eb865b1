"""
GCE Ops - Target Pool Commands

target-pools add-instances / remove-instances: change the members of a
regional target pool, then emit the updated pool.
"""

from gce_ops.commands.base import ComputeCommand
from gce_ops.core.config import resolve_region, resolve_zone


def instance_url(project: str, zone: str, instance: str) -> str:
    """Partial URL of an instance, as accepted in InstanceReference."""
    if instance.startswith('projects/') or instance.startswith('https://'):
        return instance
    return f"projects/{project}/zones/{zone}/instances/{instance}"


class _TargetPoolMembershipCommand(ComputeCommand):
    """
    Adds or removes instances from one target pool.

    Subclasses set `verb` and `api_method` (targetPools method name).
    """

    group = 'target-pools'
    api_method = ''

    @classmethod
    def add_arguments(cls, parser):
        parser.add_argument(
            'names',
            metavar='NAME',
            nargs=1,
            help='Name of the target pool.'
        )
        parser.add_argument(
            '--instances',
            metavar='INSTANCE',
            nargs='+',
            required=True,
            help='Instance names or URLs. Names are looked up in --zone.'
        )

    def process(self, args):
        region = resolve_region(self.config)
        pool_name = args.names[0]

        # Only bare names need a zone to be turned into URLs
        zone = None
        if any(not i.startswith(('projects/', 'https://')) for i in args.instances):
            zone = resolve_zone(self.config)

        body = {
            'instances': [
                {'instance': instance_url(self.project, zone, i)} for i in args.instances
            ]
        }

        self.logger.info(f"Updating target pool {pool_name}...")
        operation = self._execute(
            getattr(self.compute.targetPools(), self.api_method)(
                project=self.project,
                region=region,
                targetPool=pool_name,
                body=body
            ),
            f'targetPools.{self.api_method}', project=self.project, region=region,
            targetPool=pool_name
        )
        self.registry.add_region_operation(
            self.project, region, operation,
            on_success=self._emit_fetched(
                lambda: self.compute.targetPools().get(
                    project=self.project,
                    region=region,
                    targetPool=pool_name
                )
            )
        )


class AddTargetPoolInstancesCommand(_TargetPoolMembershipCommand):
    verb = 'add-instances'
    api_method = 'addInstance'
    help = 'Add instances to a target pool.'


class RemoveTargetPoolInstancesCommand(_TargetPoolMembershipCommand):
    verb = 'remove-instances'
    api_method = 'removeInstance'
    help = 'Remove instances from a target pool.'
