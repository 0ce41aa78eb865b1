"""
GCE Ops - gcloud-compatible Command Line Interface

Usage:
    gce-ops disks delete disk-1 disk-2 --zone=us-central1-a
    gce-ops disks resize disk-1 --size=200 --zone=us-central1-a
    gce-ops snapshots create disk-1 --zone=us-central1-a
    gce-ops instance-templates delete template-1 template-2
    gce-ops target-pools add-instances pool-1 --instances vm-1 vm-2 \\
        --region=us-central1 --zone=us-central1-a

Every command waits until all the operations it started are done.
If some fail, the others are still waited on and their results shown;
the failures are reported together at the end.
"""

import argparse
import sys
import traceback

from gce_ops.commands import COMMAND_CLASSES, COMMANDS
from gce_ops.core.config import VERSION, ToolConfig
from gce_ops.main import EXIT_CANCELLED, EXIT_FAILED, run_command
from gce_ops.utils.output import OUTPUT_FORMATS


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser with gcloud-compatible structure:
    gce-ops GROUP VERB [NAMES...] [FLAGS]

    Returns:
        Configured ArgumentParser
    """

    parser = argparse.ArgumentParser(
        prog='gce-ops',
        description='Manage Compute Engine resources and wait for the operations to finish.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES
    To delete two disks:
        $ gce-ops disks delete disk-1 disk-2 --zone=us-central1-a

    To snapshot a disk and print the snapshot as JSON:
        $ gce-ops snapshots create disk-1 --zone=us-central1-a --format=json

NOTES
    Press Ctrl-C once to stop waiting; operations already started keep
    running on the Compute Engine side.
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'gce-ops v{VERSION}'
    )

    groups = parser.add_subparsers(
        dest='group',
        required=True,
        help='Resource groups'
    )

    group_parsers = {}
    for command_class in COMMAND_CLASSES:
        if command_class.group not in group_parsers:
            group_parser = groups.add_parser(
                command_class.group,
                help=f'Manage {command_class.group}'
            )
            group_parsers[command_class.group] = group_parser.add_subparsers(
                dest='verb',
                required=True
            )

        verb_parser = group_parsers[command_class.group].add_parser(
            command_class.verb,
            help=command_class.help,
            description=command_class.help
        )
        command_class.add_arguments(verb_parser)
        _add_common_args(verb_parser)

    return parser


def _add_common_args(parser: argparse.ArgumentParser):
    """Add arguments common to all commands (gcloud style)."""

    location = parser.add_argument_group('LOCATION FLAGS')
    location.add_argument(
        '--project',
        metavar='PROJECT',
        help='GCP project ID. Defaults to gcloud config project.'
    )
    location.add_argument(
        '--zone',
        metavar='ZONE',
        help='Zone of zonal resources. Defaults to gcloud config compute/zone.'
    )
    location.add_argument(
        '--region',
        metavar='REGION',
        help='Region of regional resources. Defaults to gcloud config compute/region.'
    )

    output = parser.add_argument_group('OUTPUT FLAGS')
    output.add_argument(
        '--format',
        metavar='FORMAT',
        choices=OUTPUT_FORMATS,
        default='yaml',
        help='Output format. One of: yaml, json, disable. Default: yaml'
    )
    output.add_argument(
        '--verbosity',
        metavar='VERBOSITY',
        choices=['debug', 'info', 'warning', 'error', 'critical'],
        default='info',
        help='Logging verbosity. One of: debug, info, warning, error, critical. Default: info'
    )
    output.add_argument(
        '--log-file',
        metavar='LOG_FILE',
        help='Write logs to this file.'
    )
    output.add_argument(
        '--show-progress',
        action='store_true',
        help='Show a progress bar while waiting for operations.'
    )

    other = parser.add_argument_group('OTHER FLAGS')
    other.add_argument(
        '--poll-interval',
        type=float,
        metavar='SECONDS',
        help='Seconds between operation status checks. Default: 0.15'
    )


def validate_args(args: argparse.Namespace) -> bool:
    """
    Validate arguments (gcloud-style validation).

    Returns:
        True if valid, False (after printing the problem) otherwise
    """

    if getattr(args, 'size', None) is not None and args.size < 1:
        print("ERROR: (gce-ops) Invalid value:", file=sys.stderr)
        print("  --size must be at least 1 GB", file=sys.stderr)
        return False

    snapshot_names = getattr(args, 'snapshot_names', None)
    if snapshot_names and len(snapshot_names) != len(args.names):
        print("ERROR: (gce-ops) Invalid flag combination:", file=sys.stderr)
        print("  --snapshot-names needs exactly one name per disk", file=sys.stderr)
        return False

    if args.poll_interval is not None and args.poll_interval <= 0:
        print("ERROR: (gce-ops) Invalid value:", file=sys.stderr)
        print("  --poll-interval must be greater than 0", file=sys.stderr)
        return False

    return True


def args_to_config(args: argparse.Namespace) -> ToolConfig:
    """Convert arguments to ToolConfig."""
    config = ToolConfig()

    config.project = args.project
    config.zone = args.zone
    config.region = args.region

    if args.poll_interval is not None:
        config.poll_interval = args.poll_interval
    config.show_progress = args.show_progress

    config.output_format = args.format
    config.log_level = args.verbosity.upper()
    config.log_file = args.log_file

    return config


def _debug_requested(argv) -> bool:
    """True if --verbosity=debug (or --verbosity debug) is in argv."""
    argv = list(argv)
    if '--verbosity=debug' in argv:
        return True
    return any(a == '--verbosity' and b == 'debug' for a, b in zip(argv, argv[1:]))


def main(argv=None) -> int:
    """Main CLI entry point (gcloud-compatible)."""

    try:
        parser = create_parser()
        args = parser.parse_args(argv)

        if not validate_args(args):
            return EXIT_FAILED

        command_class = COMMANDS[(args.group, args.verb)]
        return run_command(command_class, args, args_to_config(args))

    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.", file=sys.stderr)
        return EXIT_CANCELLED
    except Exception as e:
        print(f"ERROR: (gce-ops) Unexpected error: {str(e)}", file=sys.stderr)
        if _debug_requested(sys.argv[1:] if argv is None else argv):
            traceback.print_exc()
        return EXIT_FAILED


if __name__ == '__main__':
    sys.exit(main())
