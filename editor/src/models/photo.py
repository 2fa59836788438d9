"""Photo model.

SourceImage is the decoded photo. It is immutable: loading another photo
replaces the SourceImage, it never edits one.
"""
from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class SourceImage:
    """Decoded raster, RGBA, never mutated after load."""
    image: Image.Image

    @classmethod
    def from_image(cls, image):
        """Wrap a Pillow image, taking a private RGBA copy."""
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        else:
            image = image.copy()
        return cls(image)

    @property
    def width(self):
        return self.image.width

    @property
    def height(self):
        return self.image.height

    @property
    def size(self):
        return self.image.size
