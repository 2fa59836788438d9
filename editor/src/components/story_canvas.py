# PyQt5 imports
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QEvent, QRectF, QSize
from PyQt5.QtGui import QPainter, QImage, QColor

import logging

from constants import OUTPUT_WIDTH, OUTPUT_HEIGHT
from models.transform import Vec2
from components.transform_widgets import (
	PointerDown, PointerMove, PointerUp,
	TouchStart, TouchMove, TouchEnd, Wheel,
)
from utils.coordinate_transforms import fit_rect


def pil_to_qimage(image):
	"""Copy an RGBA PIL image into a QImage"""
	data = image.tobytes('raw', 'RGBA')
	qimage = QImage(data, image.width, image.height, image.width * 4, QImage.Format_RGBA8888)
	# Make a copy since the buffer will be deallocated
	return qimage.copy()


class StoryCanvas(QWidget):
	"""Interactive preview of the story.

	Shows the session's latest frame letterboxed at 9:16 and turns mouse,
	touch and wheel input into gesture inputs for the session. The displayed
	width is measured on every event so resizes apply mid-gesture.
	"""

	_logger = logging.getLogger('StoryCanvas')

	def __init__(self, session, parent=None):
		super().__init__(parent)
		self.session = session
		self._qimage = None
		self._touch_count = 0

		self.setAttribute(Qt.WA_AcceptTouchEvents, True)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMinimumSize(180, 320)

		self.session.add_listener(self._on_frame)
		if self.session.frame is not None:
			self._on_frame(self.session.frame)

	def sizeHint(self):
		return QSize(OUTPUT_WIDTH // 3, OUTPUT_HEIGHT // 3)

	# ========================================
	# Geometry
	# ========================================

	def display_rect(self):
		"""Where the output canvas is drawn inside the widget"""
		return QRectF(*fit_rect(self.width(), self.height(), OUTPUT_WIDTH, OUTPUT_HEIGHT))

	def displayed_width(self):
		"""Current on-screen width of the story surface"""
		return self.display_rect().width()

	# ========================================
	# Frames
	# ========================================

	def _on_frame(self, frame):
		self._qimage = pil_to_qimage(frame) if frame is not None else None
		self.update()

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.fillRect(self.rect(), QColor(0, 0, 0))
		if self._qimage is not None:
			painter.setRenderHint(QPainter.SmoothPixmapTransform, True)
			painter.drawImage(self.display_rect(), self._qimage)
		else:
			painter.setPen(QColor(160, 160, 160))
			painter.drawText(self.rect(), Qt.AlignCenter, "Open a photo (Ctrl+O)")
		painter.end()

	# ========================================
	# Mouse Event Handlers
	# ========================================

	def _send(self, gesture):
		return self.session.handle_gesture(gesture, self.displayed_width())

	def mousePressEvent(self, event):
		"""Start dragging the photo"""
		if event.button() == Qt.LeftButton and self.session.has_photo:
			self._send(PointerDown(event.x(), event.y()))
			self.setCursor(Qt.ClosedHandCursor)
			event.accept()
		else:
			super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		self._send(PointerMove(event.x(), event.y()))
		event.accept()

	def mouseReleaseEvent(self, event):
		if event.button() == Qt.LeftButton:
			self._send(PointerUp())
			self.setCursor(Qt.OpenHandCursor if self.session.has_photo else Qt.ArrowCursor)
			event.accept()
		else:
			super().mouseReleaseEvent(event)

	def leaveEvent(self, event):
		"""Leaving the widget ends a mouse drag"""
		self._send(PointerUp())
		super().leaveEvent(event)

	def wheelEvent(self, event):
		"""Zoom the photo about the canvas centre"""
		delta = event.angleDelta().y()
		if delta and self.session.has_photo:
			self._send(Wheel(1 if delta > 0 else -1))
		event.accept()

	# ========================================
	# Touch
	# ========================================

	def event(self, event):
		if event.type() in (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd, QEvent.TouchCancel):
			self._handle_touch(event)
			event.accept()
			return True
		return super().event(event)

	def _handle_touch(self, event):
		"""Translate the active touch points into TouchStart/Move/End"""
		if event.type() == QEvent.TouchCancel:
			points = ()
		else:
			points = tuple(
				Vec2(p.pos().x(), p.pos().y())
				for p in event.touchPoints()
				if p.state() != Qt.TouchPointReleased
			)

		if len(points) > self._touch_count:
			gesture = TouchStart(points)
		elif len(points) < self._touch_count:
			gesture = TouchEnd(points)
		else:
			gesture = TouchMove(points)
		self._touch_count = len(points)
		self._send(gesture)
