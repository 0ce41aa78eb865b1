"""
GCE Ops - Instance Commands

instances start / stop: emit each instance once its operation is done
instances delete: nothing is emitted
"""

from gce_ops.commands.base import ComputeCommand
from gce_ops.core.config import resolve_zone


class _InstanceActionCommand(ComputeCommand):
    """
    Runs instances.<verb> for every named instance in a zone.

    Subclasses set `verb` (an instances method name), `action_label`
    and `emit_result`.
    """

    action_label = ''
    emit_result = True

    def process(self, args):
        zone = resolve_zone(self.config)
        action = getattr(self.compute.instances(), self.verb)

        for instance_name in args.names:
            self.logger.info(f"{self.action_label} instance {instance_name}...")
            operation = self._execute(
                action(
                    project=self.project,
                    zone=zone,
                    instance=instance_name
                ),
                f'instances.{self.verb}', project=self.project, zone=zone,
                instance=instance_name
            )

            on_success = None
            if self.emit_result:
                on_success = self._emit_fetched(
                    lambda instance_name=instance_name: self.compute.instances().get(
                        project=self.project,
                        zone=zone,
                        instance=instance_name
                    )
                )
            self.registry.add_zone_operation(self.project, zone, operation, on_success)


class StartInstancesCommand(_InstanceActionCommand):
    group = 'instances'
    verb = 'start'
    action_label = 'Starting'
    help = 'Start stopped Compute Engine instances.'


class StopInstancesCommand(_InstanceActionCommand):
    group = 'instances'
    verb = 'stop'
    action_label = 'Stopping'
    help = 'Stop running Compute Engine instances.'


class DeleteInstancesCommand(_InstanceActionCommand):
    group = 'instances'
    verb = 'delete'
    action_label = 'Deleting'
    help = 'Delete Compute Engine instances.'
    emit_result = False
