"""Preview module for image output.

Components:
    export: 8-bit quantization, binary PPM encoding and PNG export
"""

from tinyray.preview.export import (
    encode_ppm,
    image_to_uint8,
    save_image,
    save_png,
    write_ppm,
)

__all__ = [
    "encode_ppm",
    "image_to_uint8",
    "save_image",
    "save_png",
    "write_ppm",
]
