"""Image encoding and export for rendered framebuffers.

Every channel is clamped to [0, 1], scaled by 255 and truncated (not
rounded) to one byte. The binary PPM stream is

    P6\\n<width> <height>\\n255\\n

followed by ``width * height * 3`` bytes: pixels row-major from the
top-left, channels in R, G, B order.

Supported formats:
    - PPM (binary P6, written directly)
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from tinyray.core.integrator import render
    >>> from tinyray.preview.export import save_image
    >>>
    >>> framebuffer = render(scene, config)
    >>> save_image(framebuffer, config.width, config.height, "out.ppm")
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)


def image_to_uint8(framebuffer: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Quantize colors to 8 bits per channel.

    Args:
        framebuffer: Float color array of any shape ending in 3.

    Returns:
        Array of the same shape with dtype uint8, ``uint8(255 * clamp(c))``.
    """
    clamped = np.clip(framebuffer.astype(np.float32), 0.0, 1.0)
    return (clamped * 255).astype(np.uint8)


def _to_image_array(
    framebuffer: npt.NDArray[np.floating], width: int, height: int
) -> npt.NDArray[np.uint8]:
    """Reshape a flat framebuffer to (height, width, 3) uint8."""
    if framebuffer.size != width * height * 3:
        raise ValueError(
            f"Framebuffer has {framebuffer.size} values, expected {width}x{height}x3"
        )
    return image_to_uint8(framebuffer).reshape(height, width, 3)


def encode_ppm(framebuffer: npt.NDArray[np.floating], width: int, height: int) -> bytes:
    """Serialize a framebuffer as a binary PPM (P6) byte stream.

    Args:
        framebuffer: Flat row-major colors, shape ``(width * height, 3)``.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        The complete PPM file contents.

    Raises:
        ValueError: If the framebuffer size does not match width x height.
    """
    pixels = _to_image_array(framebuffer, width, height)
    header = f"P6\n{width} {height}\n255\n".encode("ascii")
    return header + pixels.tobytes()


def write_ppm(
    framebuffer: npt.NDArray[np.floating], width: int, height: int, filepath: str | Path
) -> None:
    """Write a framebuffer to a binary PPM file.

    Raises:
        OSError: If the file cannot be opened or written.
    """
    data = encode_ppm(framebuffer, width, height)
    with open(filepath, "wb") as fp:
        fp.write(data)


def save_png(
    framebuffer: npt.NDArray[np.floating], width: int, height: int, filepath: str | Path
) -> None:
    """Save a framebuffer as an 8-bit RGB PNG using the same quantization.

    Raises:
        OSError: If the file cannot be written.
    """
    pil_image = PILImage.fromarray(_to_image_array(framebuffer, width, height), mode="RGB")
    pil_image.save(filepath, format="PNG")


def save_image(
    framebuffer: npt.NDArray[np.floating], width: int, height: int, filepath: str | Path
) -> Path:
    """Save a framebuffer, choosing the format from the file suffix.

    ``.png`` writes PNG; anything else writes binary PPM.

    Returns:
        The path written.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(filepath)
    if path.suffix.lower() == ".png":
        save_png(framebuffer, width, height, path)
    else:
        write_ppm(framebuffer, width, height, path)
    logger.info("Saved %dx%d image to %s", width, height, path)
    return path
