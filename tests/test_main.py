import socket
import threading

import httplib2
import pytest
from googleapiclient.errors import HttpError

from gce_ops.commands import DeleteDisksCommand, ResizeDisksCommand
from gce_ops.commands.base import ComputeCommand
from gce_ops.core import config as config_module
from gce_ops.core.config import ToolConfig
from gce_ops.main import EXIT_CANCELLED, EXIT_FAILED, EXIT_OK, run_command

from tests.helpers import make_operation


class Args:
    def __init__(self, names):
        self.names = names


@pytest.fixture
def config():
    return ToolConfig(project='p', zone='us-central1-a', poll_interval=0.001)


def test_successful_command_exits_zero(compute, config):
    compute.disks.return_value.delete.return_value.execute.return_value = \
        make_operation('op-1', status='DONE')

    assert run_command(DeleteDisksCommand, Args(['d1']), config, compute=compute) == EXIT_OK


def test_failed_operation_exits_one_and_logs_error(compute, config, capsys):
    compute.disks.return_value.delete.return_value.execute.return_value = \
        make_operation('op-1', status='DONE', error_code='RESOURCE_IN_USE_BY_ANOTHER_RESOURCE')

    assert run_command(DeleteDisksCommand, Args(['d1']), config, compute=compute) == EXIT_FAILED

    captured = capsys.readouterr()
    assert 'ERROR: ' in captured.err
    assert 'RESOURCE_IN_USE_BY_ANOTHER_RESOURCE' in captured.err
    assert captured.out == ''


def test_http_error_from_mutating_call_exits_one(compute, config, capsys):
    response = httplib2.Response({'status': 403})
    content = b'{"error": {"message": "Required permission missing"}}'
    compute.disks.return_value.delete.return_value.execute.side_effect = \
        HttpError(response, content)

    assert run_command(DeleteDisksCommand, Args(['d1']), config, compute=compute) == EXIT_FAILED
    assert 'API request failed' in capsys.readouterr().err


def test_missing_project_exits_one(compute, monkeypatch, capsys):
    monkeypatch.setattr(config_module, 'get_gcloud_config', lambda key: None)

    assert run_command(DeleteDisksCommand, Args(['d1']), ToolConfig(), compute=compute) == EXIT_FAILED
    assert 'project' in capsys.readouterr().err
    compute.disks.assert_not_called()


def test_cancelled_invocation_exits_130(compute, config, capsys):
    class CancelledCommand(ComputeCommand):
        group = 'test'
        verb = 'cancel'

        def process(self, args):
            self.registry.add_global_operation(self.project, make_operation('op-1'))
            self.token.cancel()

    assert run_command(CancelledCommand, Args([]), config, compute=compute) == EXIT_CANCELLED
    assert 'Cancelled' in capsys.readouterr().err
    compute.globalOperations.assert_not_called()


def test_results_go_to_stdout(compute, config, capsys):
    disks = compute.disks.return_value
    disks.resize.return_value.execute.return_value = make_operation('op-1', status='DONE')
    disks.get.return_value.execute.return_value = {'name': 'd1', 'sizeGb': '20'}

    class ResizeArgs(Args):
        size = 20

    assert run_command(ResizeDisksCommand, ResizeArgs(['d1']), config, compute=compute) == EXIT_OK

    captured = capsys.readouterr()
    assert 'name: d1' in captured.out
    assert 'sizeGb' in captured.out


def test_failures_are_tagged_like_gcloud_errors(compute, config, capsys):
    compute.disks.return_value.delete.return_value.execute.return_value = \
        make_operation('op-1', status='DONE', error_code='NOT_FOUND')

    run_command(DeleteDisksCommand, Args(['d1']), config, compute=compute)

    assert "ERROR: (gce-ops) Operation 'op-1' failed" in capsys.readouterr().err


def test_transport_error_while_polling_exits_one(compute, config, capsys):
    compute.disks.return_value.delete.return_value.execute.return_value = \
        make_operation('op-1', zone='us-central1-a')
    compute.zoneOperations.return_value.get.return_value.execute.side_effect = \
        socket.timeout('timed out')

    assert run_command(DeleteDisksCommand, Args(['d1']), config, compute=compute) == EXIT_FAILED
    assert 'timed out' in capsys.readouterr().err


def test_failing_result_callback_exits_one(compute, config):
    disks = compute.disks.return_value
    disks.resize.return_value.execute.return_value = make_operation('op-1', status='DONE')
    disks.get.return_value.execute.side_effect = KeyError('sizeGb')

    class ResizeArgs(Args):
        size = 20

    assert run_command(ResizeDisksCommand, ResizeArgs(['d1']), config, compute=compute) == EXIT_FAILED


def test_runs_on_a_worker_thread(compute, config):
    compute.disks.return_value.delete.return_value.execute.return_value = \
        make_operation('op-1', status='DONE')
    results = []

    def worker():
        try:
            results.append(run_command(DeleteDisksCommand, Args(['d1']), config, compute=compute))
        except Exception as e:
            results.append(e)

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join(timeout=10)

    assert results == [EXIT_OK]
