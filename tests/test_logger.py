import io
import logging

from gce_ops.utils.logger import CleanFormatter, setup_logging


def make_record(level, message):
    return logging.LogRecord('gce_ops', level, __file__, 1, message, None, None)


def test_clean_formatter_levels():
    formatter = CleanFormatter()

    assert formatter.format(make_record(logging.INFO, 'Deleting disk d1...')) == \
        'Deleting disk d1...'
    assert formatter.format(make_record(logging.WARNING, 'disk is small')) == \
        'WARNING: disk is small'
    assert formatter.format(make_record(logging.ERROR, 'Operation failed')) == \
        'ERROR: (gce-ops) Operation failed'


def test_setup_logging_writes_to_given_stream():
    stream = io.StringIO()
    logger = setup_logging('WARNING', stream=stream)

    logger.info('hidden')
    logger.error('shown')

    assert stream.getvalue() == 'ERROR: (gce-ops) shown\n'


def test_log_file(tmp_path):
    log_file = tmp_path / 'logs' / 'gce-ops.log'
    logger = setup_logging('INFO', log_file=str(log_file), stream=io.StringIO())

    logger.info('written')
    for handler in logger.handlers:
        handler.flush()

    assert 'written' in log_file.read_text()
