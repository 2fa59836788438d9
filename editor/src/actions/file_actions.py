"""File operations for the main window - open photo, export story"""
import os

from PyQt5.QtWidgets import QFileDialog, QMessageBox

from services.file_operations import load_source_image, export_story, PhotoLoadError
from utils.logger import loggerRaise

PHOTO_FILTER = "Images (*.jpg *.jpeg *.png *.webp *.bmp *.gif);;All Files (*)"


class FileActions:
	"""Handles all file menu operations"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The RunSnapWindow instance
		"""
		self.main_window = main_window

	@property
	def session(self):
		return self.main_window.session

	def open_photo(self):
		"""Ask for a photo and load it"""
		filename, _ = QFileDialog.getOpenFileName(
			self.main_window,
			"Open Photo",
			"",
			PHOTO_FILTER
		)
		if filename:
			self.open_photo_path(filename)

	def open_photo_path(self, filename):
		"""Load a photo from disk into the session

		Returns:
			True if the photo was loaded
		"""
		try:
			source = load_source_image(filename)
		except PhotoLoadError as e:
			QMessageBox.warning(self.main_window, "Open Photo", str(e))
			return False

		self.session.load_photo(source)
		self.main_window.set_status(f"Opened {os.path.basename(filename)}")
		self.main_window.update_actions()
		return True

	def export_story(self):
		"""Export the current frame as JPEG"""
		if self.session.frame is None:
			return

		filename = self.main_window.output_path
		if not filename:
			filename, _ = QFileDialog.getSaveFileName(
				self.main_window,
				"Export Story",
				"runsnap.jpg",
				"JPEG Files (*.jpg *.jpeg)"
			)
			if not filename:
				return

		# Ensure .jpg extension
		if not filename.lower().endswith(('.jpg', '.jpeg')):
			filename += '.jpg'

		try:
			export_story(self.session.frame, filename, quality=self.main_window.jpeg_quality)
		except OSError as e:
			loggerRaise(e, f"Failed to export story: {e}", "Export Error")

		self.main_window.set_status(f"Exported to {os.path.basename(filename)}")
