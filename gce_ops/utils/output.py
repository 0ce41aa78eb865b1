"""
GCE Ops - Result Output

Writes resources produced by commands (e.g. a resized disk) to stdout.
"""

import json
import sys
from typing import Any, Dict

import yaml

OUTPUT_FORMATS = ('yaml', 'json', 'disable')


class OutputFormatter:
    """
    Handle output formatting similar to gcloud.

    Supports: yaml, json
    """

    @staticmethod
    def format_output(data: Dict[str, Any], format_type: str = 'yaml') -> str:
        """Format one resource."""
        if format_type == 'json':
            return json.dumps(data, indent=2, sort_keys=True)
        elif format_type == 'yaml':
            return yaml.safe_dump(data, default_flow_style=False).rstrip('\n')
        else:
            raise ValueError(f"Unknown output format: {format_type}")


class ResultEmitter:
    """
    Emits resources in the configured format, separated gcloud-style.

    Example:
        emit = ResultEmitter('yaml')
        emit({'name': 'disk-1', 'sizeGb': '20'})
    """

    def __init__(self, format_type: str = 'yaml', stream=None):
        self.format_type = format_type
        self.stream = stream or sys.stdout
        self.count = 0

    def __call__(self, resource: Dict[str, Any]):
        if self.format_type == 'disable':
            return

        if self.format_type == 'yaml' and self.count:
            print('---', file=self.stream)
        print(OutputFormatter.format_output(resource, self.format_type),
              file=self.stream, flush=True)
        self.count += 1
