"""Photo document: one SourceImage plus the controller placing it.

A new photo always means a new PhotoDocument, so a transform can never
outlive (or predate) its image.
"""
from dataclasses import dataclass

from components.transform_widgets.gesture_controller import TransformController
from models.photo import SourceImage


@dataclass(frozen=True)
class PhotoDocument:
    """A SourceImage and the controller holding its transform."""
    source: SourceImage
    controller: TransformController

    @classmethod
    def open(cls, source):
        """Start a document with a fresh identity transform."""
        return cls(source, TransformController())

    @property
    def transform(self):
        return self.controller.transform
