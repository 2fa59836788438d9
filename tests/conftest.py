"""
Shared fixtures for RunSnap tests.

Provides sample photos, workout stats and editor sessions.
"""
import sys
import os
from datetime import date

import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Qt widgets render offscreen in tests
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


RUN_DATE = date(2024, 10, 17)


def make_photo(width=400, height=300):
    """Quadrant photo: red, green, blue, yellow (top-left clockwise)"""
    from PIL import Image
    img = Image.new('RGB', (width, height), (200, 40, 40))
    half_w, half_h = width // 2, height // 2
    img.paste((40, 200, 40), (half_w, 0, width, half_h))
    img.paste((40, 40, 200), (half_w, half_h, width, height))
    img.paste((220, 200, 40), (0, half_h, half_w, height))
    return img


@pytest.fixture
def photo():
    """SourceImage of a 400x300 quadrant photo"""
    from models.photo import SourceImage
    return SourceImage.from_image(make_photo())


@pytest.fixture
def full_canvas_photo():
    """SourceImage exactly covering the 1080x1920 output canvas"""
    from models.photo import SourceImage
    return SourceImage.from_image(make_photo(1080, 1920))


@pytest.fixture
def stats():
    """30:00 over 5 km with heart rate and temperature"""
    from models.workout import WorkoutStats
    return WorkoutStats.from_form(
        hours='0', minutes='30', seconds='0', distance='5.0',
        heart_rate='152', temperature='18', run_date=RUN_DATE,
    )


@pytest.fixture
def session(stats):
    """EditorSession without a photo"""
    from services.editor_session import EditorSession
    return EditorSession(stats=stats)
