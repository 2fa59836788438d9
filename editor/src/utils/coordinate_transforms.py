"""Coordinate transformation utilities for the story canvas.

Provides conversion between the two coordinate systems:
- Display space: widget pixels, whatever size the preview is shown at
- Output space: pixels of the fixed-size export canvas

Only distances are converted. The preview always shows the whole output
canvas scaled uniformly, so a displacement of d display pixels is
d * (output_width / displayed_width) output pixels.
"""
import logging

from constants import OUTPUT_WIDTH
from models.transform import Vec2

logger = logging.getLogger(__name__)


def display_to_output_ratio(displayed_width, output_width=OUTPUT_WIDTH):
	"""Output pixels per display pixel.

	Args:
		displayed_width: Current on-screen width of the canvas surface
		output_width: Width of the export canvas

	Returns:
		float ratio, 1.0 when the displayed width is unknown (<= 0)
	"""
	if not displayed_width or displayed_width <= 0:
		logger.debug("No displayed width (%r), using 1:1 mapping", displayed_width)
		return 1.0
	return output_width / displayed_width


def fit_rect(container_width, container_height, output_width, output_height):
	"""Largest rect with the output aspect ratio centred inside a container.

	Returns:
		(x, y, width, height) in container pixels
	"""
	if container_width <= 0 or container_height <= 0:
		return (0.0, 0.0, 0.0, 0.0)
	scale = min(container_width / output_width, container_height / output_height)
	width = output_width * scale
	height = output_height * scale
	return ((container_width - width) / 2, (container_height - height) / 2, width, height)


class CoordinateMapper:
	"""Maps display-space drag distances onto the export canvas.

	The displayed width is passed on every call rather than stored, so a
	window resize in the middle of a drag takes effect on the next event.
	"""

	def __init__(self, output_width=OUTPUT_WIDTH):
		self.output_width = output_width

	def to_output_delta(self, display_delta, displayed_width):
		"""Scale a 1D display distance to output pixels."""
		return display_delta * display_to_output_ratio(displayed_width, self.output_width)

	def to_output_vector(self, display_vector, displayed_width):
		"""Scale a Vec2 display displacement to output pixels."""
		ratio = display_to_output_ratio(displayed_width, self.output_width)
		return Vec2(display_vector.x * ratio, display_vector.y * ratio)
