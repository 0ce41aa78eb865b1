import dataclasses

import pytest

from gce_ops.operations.scope import (
    GlobalScope,
    RegionScope,
    ZoneScope,
    resource_name,
    scope_from_operation,
)

from tests.helpers import make_operation


def test_scope_kinds():
    assert ZoneScope('p', 'us-central1-a').kind == 'zone'
    assert RegionScope('p', 'us-central1').kind == 'region'
    assert GlobalScope('p').kind == 'global'


def test_scope_str_is_resource_path():
    assert str(ZoneScope('p', 'us-central1-a')) == 'projects/p/zones/us-central1-a'
    assert str(RegionScope('p', 'us-central1')) == 'projects/p/regions/us-central1'
    assert str(GlobalScope('p')) == 'projects/p/global'


def test_scopes_are_immutable_values():
    scope = ZoneScope('p', 'z')
    assert scope == ZoneScope('p', 'z')
    with pytest.raises(dataclasses.FrozenInstanceError):
        scope.zone = 'other'


def test_resource_name_takes_last_segment():
    assert resource_name('https://x/projects/p/zones/us-east1-b') == 'us-east1-b'
    assert resource_name('projects/p/regions/europe-west1/') == 'europe-west1'
    assert resource_name('plain') == 'plain'


def test_scope_from_operation():
    assert scope_from_operation('p', make_operation('op', zone='us-central1-a')) == \
        ZoneScope('p', 'us-central1-a')
    assert scope_from_operation('p', make_operation('op', region='us-central1')) == \
        RegionScope('p', 'us-central1')
    assert scope_from_operation('p', make_operation('op')) == GlobalScope('p')
