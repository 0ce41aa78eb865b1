import pytest

from gce_ops.core import config as config_module
from gce_ops.core.config import (
    POLL_INTERVAL_SECONDS,
    ToolConfig,
    create_tool_config,
    resolve_project,
    resolve_region,
    resolve_zone,
)
from gce_ops.core.exceptions import ConfigurationError


@pytest.fixture
def gcloud(monkeypatch):
    values = {}
    monkeypatch.setattr(config_module, 'get_gcloud_config', values.get)
    return values


def test_defaults():
    config = create_tool_config(zone='z')
    assert config.zone == 'z'
    assert config.poll_interval == POLL_INTERVAL_SECONDS == 0.15
    assert config.output_format == 'yaml'


def test_flags_win_over_gcloud_config(gcloud):
    gcloud.update({'core/project': 'gp', 'compute/zone': 'gz', 'compute/region': 'gr'})
    config = ToolConfig(project='p', zone='z', region='r')

    assert resolve_project(config) == 'p'
    assert resolve_zone(config) == 'z'
    assert resolve_region(config) == 'r'


def test_gcloud_config_fallback(gcloud):
    gcloud.update({'core/project': 'gp', 'compute/zone': 'gz', 'compute/region': 'gr'})
    config = ToolConfig()

    assert resolve_project(config) == 'gp'
    assert resolve_zone(config) == 'gz'
    assert resolve_region(config) == 'gr'


def test_project_from_credentials(gcloud):
    class Auth:
        def get_project(self):
            return 'adc-project'

    assert resolve_project(ToolConfig(), Auth()) == 'adc-project'


@pytest.mark.parametrize('resolve, setting', [
    (resolve_project, 'project'),
    (resolve_zone, 'zone'),
    (resolve_region, 'region'),
])
def test_unresolved_setting(gcloud, resolve, setting):
    with pytest.raises(ConfigurationError) as excinfo:
        resolve(ToolConfig())
    assert excinfo.value.setting == setting
