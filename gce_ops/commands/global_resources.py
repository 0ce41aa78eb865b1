"""
GCE Ops - Global Resource Deletion

Images, instance templates, routes, firewalls and backend services are
global resources: deleting them starts a global operation. They only
differ in the API collection and the name of its resource parameter.
"""

from gce_ops.commands.base import ComputeCommand


class DeleteGlobalResourcesCommand(ComputeCommand):
    """
    Deletes global resources of one collection.

    Subclasses set:
        collection: Compute API collection, e.g. 'images'
        resource_param: Name parameter of <collection>.delete, e.g. 'image'
        label: Singular name used in messages
    """

    verb = 'delete'
    collection = ''
    resource_param = ''
    label = ''

    def process(self, args):
        api = getattr(self.compute, self.collection)()

        for resource_name in args.names:
            self.logger.info(f"Deleting {self.label} {resource_name}...")
            params = {'project': self.project, self.resource_param: resource_name}
            operation = self._execute(
                api.delete(**params),
                f'{self.collection}.delete', **params
            )
            self.registry.add_global_operation(self.project, operation)


class DeleteImagesCommand(DeleteGlobalResourcesCommand):
    group = 'images'
    help = 'Delete Compute Engine images.'
    collection = 'images'
    resource_param = 'image'
    label = 'image'


class DeleteInstanceTemplatesCommand(DeleteGlobalResourcesCommand):
    group = 'instance-templates'
    help = 'Delete Compute Engine instance templates.'
    collection = 'instanceTemplates'
    resource_param = 'instanceTemplate'
    label = 'instance template'


class DeleteRoutesCommand(DeleteGlobalResourcesCommand):
    group = 'routes'
    help = 'Delete Compute Engine routes.'
    collection = 'routes'
    resource_param = 'route'
    label = 'route'


class DeleteFirewallsCommand(DeleteGlobalResourcesCommand):
    group = 'firewalls'
    help = 'Delete Compute Engine firewall rules.'
    collection = 'firewalls'
    resource_param = 'firewall'
    label = 'firewall rule'


class DeleteBackendServicesCommand(DeleteGlobalResourcesCommand):
    group = 'backend-services'
    help = 'Delete Compute Engine backend services.'
    collection = 'backendServices'
    resource_param = 'backendService'
    label = 'backend service'
