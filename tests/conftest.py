from unittest.mock import MagicMock

import pytest

from gce_ops.core.config import ToolConfig

from tests.helpers import FakeSleep


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def compute():
    """MagicMock standing in for the googleapiclient compute resource."""
    return MagicMock()


@pytest.fixture
def config():
    return ToolConfig(project='p', zone='us-central1-a', region='us-central1')
