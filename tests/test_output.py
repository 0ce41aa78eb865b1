import io
import json

import pytest

from gce_ops.utils.output import OutputFormatter, ResultEmitter


def test_yaml_documents_are_separated():
    stream = io.StringIO()
    emit = ResultEmitter('yaml', stream)

    emit({'name': 'd1', 'sizeGb': '10'})
    emit({'name': 'd2', 'sizeGb': '20'})

    assert stream.getvalue() == 'name: d1\nsizeGb: \'10\'\n---\nname: d2\nsizeGb: \'20\'\n'


def test_json_output():
    stream = io.StringIO()
    ResultEmitter('json', stream)({'status': 'READY', 'name': 'snap-1'})

    assert json.loads(stream.getvalue()) == {'status': 'READY', 'name': 'snap-1'}
    assert stream.getvalue().index('"name"') < stream.getvalue().index('"status"')


def test_disabled_output_prints_nothing():
    stream = io.StringIO()
    emit = ResultEmitter('disable', stream)

    emit({'name': 'd1'})

    assert stream.getvalue() == ''


def test_unknown_format():
    with pytest.raises(ValueError):
        OutputFormatter.format_output({}, 'table')
