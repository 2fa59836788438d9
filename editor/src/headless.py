"""Headless story renderer, CLI entry point.

Renders a photo plus run stats to a 1080x1920 JPEG without opening a
window. Photo placement is expressed as the same gestures the editor
uses: wheel notches for zoom and a drag in output pixels for position.

Usage:
    python editor/src/headless.py <photo> [-o OUTPUT] [stat options] [--zoom N] [--pan DX DY]

Examples:
    python editor/src/headless.py run.jpg --minutes 30 -d 5.0
    python editor/src/headless.py run.jpg --hours 1 --minutes 52 --seconds 7 -d 21.1 \\
        --heart-rate 162 --filter vivid --zoom 3 --pan 0 -120 -o story.jpg
"""

import sys
import os
import argparse
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from constants import OUTPUT_WIDTH
from components.transform_widgets import PointerDown, PointerMove, PointerUp, Wheel
from services.editor_session import EditorSession
from services.file_operations import load_source_image, export_story, PhotoLoadError
from utils.cli import add_workout_arguments, workout_stats_from_args
from utils.config import load_config
from utils.logger import configure_logging
from version import get_version

logger = logging.getLogger('headless')


def apply_placement(session, zoom_steps=0, pan=(0.0, 0.0)):
    """Replay zoom/pan as gestures on a 1:1 surface (output pixels)."""
    direction = 1 if zoom_steps > 0 else -1
    for _ in range(abs(zoom_steps)):
        session.handle_gesture(Wheel(direction), OUTPUT_WIDTH)

    dx, dy = pan
    if dx or dy:
        session.handle_gesture(PointerDown(0.0, 0.0), OUTPUT_WIDTH)
        session.handle_gesture(PointerMove(dx, dy), OUTPUT_WIDTH)
        session.handle_gesture(PointerUp(), OUTPUT_WIDTH)


def build_parser(config):
    parser = argparse.ArgumentParser(
        description='Render a running story image (1080x1920 JPEG) without the editor.',
    )
    parser.add_argument('photo', help='Path to the background photo.')
    parser.add_argument(
        '-o', '--output',
        default='./runsnap.jpg',
        help='Output JPEG path (default: ./runsnap.jpg).',
    )
    parser.add_argument(
        '--zoom', type=int, default=0,
        help='Wheel notches: positive zooms in (x1.1 each), negative zooms out (x0.9 each).',
    )
    parser.add_argument(
        '--pan', type=float, nargs=2, default=(0.0, 0.0), metavar=('DX', 'DY'),
        help='Move the photo by DX, DY output pixels.',
    )
    parser.add_argument(
        '--quality', type=int, default=config.get('jpeg_quality'),
        help='JPEG quality (default from config, 90).',
    )
    parser.add_argument('--version', action='version', version=get_version())
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    add_workout_arguments(parser, config)
    return parser


def main(argv=None):
    config = load_config()
    args = build_parser(config).parse_args(argv)
    configure_logging(args.verbose)

    photo_path = os.path.abspath(args.photo)
    if not os.path.isfile(photo_path):
        print(f"Error: Photo not found: {photo_path}")
        return 1

    try:
        source = load_source_image(photo_path)
    except PhotoLoadError as e:
        print(f"Error: {e}")
        return 1

    session = EditorSession.from_config(config, stats=workout_stats_from_args(args))
    session.load_photo(source)
    apply_placement(session, args.zoom, tuple(args.pan))

    output_path = os.path.abspath(args.output)
    export_story(session.frame, output_path, quality=args.quality)

    print(f"Pace: {session.pace_text()}")
    print(f"Saved {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
