"""Fakes and builders shared by the tests."""

from gce_ops.operations import OperationSnapshot


def make_snapshot(name, status='RUNNING', error_code=None, error_message=None, warnings=()):
    """Build an OperationSnapshot the way the API would report it."""
    error = None
    if error_code:
        error = {'errors': [{'code': error_code, 'message': error_message or error_code}]}
    return OperationSnapshot(
        name=name,
        status=status,
        error=error,
        warnings=list(warnings),
    )


def make_operation(name, status='RUNNING', zone=None, region=None, error_code=None,
                   warnings=()):
    """Build a compute#operation response dict."""
    operation = {'kind': 'compute#operation', 'name': name, 'status': status}
    if zone:
        operation['zone'] = f'https://www.googleapis.com/compute/v1/projects/p/zones/{zone}'
    if region:
        operation['region'] = f'https://www.googleapis.com/compute/v1/projects/p/regions/{region}'
    if error_code:
        operation['error'] = {'errors': [{'code': error_code, 'message': f'{error_code} happened'}]}
    if warnings:
        operation['warnings'] = [{'code': 'W', 'message': w} for w in warnings]
    return operation


class FakeStatusClient:
    """Returns canned snapshots per operation id and records every query."""

    def __init__(self, responses=None, events=None):
        self.responses = {k: list(v) for k, v in (responses or {}).items()}
        self.calls = []
        self.events = events

    def query_status(self, scope, operation_id):
        self.calls.append((scope, operation_id))
        if self.events is not None:
            self.events.append(('poll', operation_id))
        response = self.responses[operation_id].pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeSleep:
    """Records requested sleeps instead of sleeping."""

    def __init__(self, on_sleep=None):
        self.calls = []
        self.on_sleep = on_sleep

    def __call__(self, seconds):
        self.calls.append(seconds)
        if self.on_sleep:
            self.on_sleep()


