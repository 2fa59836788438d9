"""Command line options shared by the GUI and headless entry points."""

import argparse
from datetime import date

from models.filters import filter_ids
from models.workout import WorkoutStats


def _parse_date(text):
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got '{text}'")


def add_workout_arguments(parser, config):
    """Add the run stat options. Values stay strings: WorkoutStats parses them."""
    group = parser.add_argument_group('workout')
    group.add_argument('--hours', default='0', help='Elapsed hours.')
    group.add_argument('--minutes', default='0', help='Elapsed minutes.')
    group.add_argument('--seconds', default='0', help='Elapsed seconds.')
    group.add_argument('-d', '--distance', default='', help='Distance in km.')
    group.add_argument('--heart-rate', default='', help='Average heart rate (bpm).')
    group.add_argument('--temperature', default='', help='Temperature (°C).')
    group.add_argument(
        '--date', type=_parse_date, default=None,
        help='Run date as YYYY-MM-DD (default: today).',
    )
    group.add_argument(
        '--filter', default=config.get('default_filter', 'none'),
        choices=filter_ids(), help='Photo filter preset.',
    )
    emoji = group.add_mutually_exclusive_group()
    emoji.add_argument('--emoji', dest='show_emojis', action='store_true',
                       help='Prefix stat labels with icons.')
    emoji.add_argument('--no-emoji', dest='show_emojis', action='store_false',
                       help='Plain stat labels.')
    parser.set_defaults(show_emojis=bool(config.get('show_emojis', True)))
    return group


def workout_stats_from_args(args):
    return WorkoutStats.from_form(
        hours=args.hours,
        minutes=args.minutes,
        seconds=args.seconds,
        distance=args.distance,
        heart_rate=args.heart_rate,
        temperature=args.temperature,
        show_emojis=args.show_emojis,
        filter_id=args.filter,
        run_date=args.date,
    )
