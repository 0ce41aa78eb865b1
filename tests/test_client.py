import pytest

from gce_ops.core.client import ComputeResourceClient, build_status_request
from gce_ops.operations import GlobalScope, RegionScope, ZoneScope

from tests.helpers import make_operation


def test_zone_scope_uses_zone_operations(compute):
    request = build_status_request(compute, ZoneScope('p', 'us-central1-a'), 'op-1')

    compute.zoneOperations.return_value.get.assert_called_once_with(
        project='p', zone='us-central1-a', operation='op-1')
    assert request is compute.zoneOperations.return_value.get.return_value
    compute.regionOperations.assert_not_called()
    compute.globalOperations.assert_not_called()


def test_region_scope_uses_region_operations(compute):
    build_status_request(compute, RegionScope('p', 'us-central1'), 'op-2')

    compute.regionOperations.return_value.get.assert_called_once_with(
        project='p', region='us-central1', operation='op-2')
    compute.zoneOperations.assert_not_called()


def test_global_scope_uses_global_operations(compute):
    build_status_request(compute, GlobalScope('p'), 'op-3')

    compute.globalOperations.return_value.get.assert_called_once_with(
        project='p', operation='op-3')
    compute.zoneOperations.assert_not_called()


def test_unknown_scope_is_rejected(compute):
    with pytest.raises(TypeError):
        build_status_request(compute, ('p', 'zone'), 'op')


def test_query_status_returns_snapshot(compute):
    compute.zoneOperations.return_value.get.return_value.execute.return_value = \
        make_operation('op-1', status='DONE', zone='us-central1-a', warnings=['heads up'])

    snapshot = ComputeResourceClient(compute).query_status(ZoneScope('p', 'us-central1-a'), 'op-1')

    assert snapshot.name == 'op-1'
    assert snapshot.is_done
    assert snapshot.warnings == ['heads up']
