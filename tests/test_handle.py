import pytest

from gce_ops.core.exceptions import HandleStateError
from gce_ops.operations import (
    GlobalScope,
    HandleState,
    OperationHandle,
    OperationSnapshot,
)

from tests.helpers import make_operation, make_snapshot


def test_snapshot_from_response():
    response = make_operation('operation-1', status='RUNNING', zone='us-central1-a',
                              warnings=['disk is small'])
    response['operationType'] = 'delete'
    response['targetLink'] = 'https://x/disks/d1'

    snapshot = OperationSnapshot.from_response(response)

    assert snapshot.name == 'operation-1'
    assert snapshot.status == 'RUNNING'
    assert not snapshot.is_done
    assert snapshot.error is None
    assert snapshot.warnings == ['disk is small']
    assert snapshot.operation_type == 'delete'
    assert snapshot.target_link == 'https://x/disks/d1'


def test_snapshot_from_response_with_error():
    snapshot = OperationSnapshot.from_response(
        make_operation('operation-1', status='DONE', error_code='QUOTA_EXCEEDED'))

    assert snapshot.is_done
    assert snapshot.error_message == 'QUOTA_EXCEEDED happened'


def test_snapshot_error_message_unknown():
    snapshot = OperationSnapshot(name='op', status='DONE', error={'errors': []})
    assert snapshot.error_message == 'Unknown error'


def test_handle_starts_pending():
    handle = OperationHandle(GlobalScope('p'), make_snapshot('op'))
    assert handle.state is HandleState.PENDING
    assert handle.operation_id == 'op'
    assert handle.on_success is None


def test_handle_moves_to_terminal_state_once():
    handle = OperationHandle(GlobalScope('p'), make_snapshot('op'))
    handle.mark(HandleState.SUCCEEDED)
    assert handle.state is HandleState.SUCCEEDED

    with pytest.raises(HandleStateError):
        handle.mark(HandleState.FAILED)
    with pytest.raises(HandleStateError):
        handle.mark(HandleState.SUCCEEDED)
    assert handle.state is HandleState.SUCCEEDED


def test_handle_cannot_be_marked_pending():
    handle = OperationHandle(GlobalScope('p'), make_snapshot('op'))
    with pytest.raises(HandleStateError):
        handle.mark(HandleState.PENDING)


def test_snapshot_describe_names_the_target():
    response = make_operation('operation-1')
    response['operationType'] = 'delete'
    response['targetLink'] = 'https://x/projects/p/zones/z/disks/d1'

    assert OperationSnapshot.from_response(response).describe() == 'operation-1 (delete d1)'
    assert make_snapshot('operation-2').describe() == 'operation-2'
