"""Render configuration.

All settings that shape a render (resolution, field of view, background
color and visibility bound) live in one immutable RenderConfig value that
is passed explicitly to the render entry points.

Example:
    >>> from tinyray.core.config import RenderConfig
    >>> config = RenderConfig(width=320, height=240)
    >>> config.aspect_ratio
    1.3333333333333333
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_FOV = math.pi / 2.0
DEFAULT_BACKGROUND = (0.2, 0.7, 0.8)
DEFAULT_VISIBILITY = 1000.0

Vec3Like = Sequence[float]


def as_vec3(values: Vec3Like, name: str = "vector") -> tuple[float, float, float]:
    """Convert a 3-component sequence to a tuple of finite floats.

    Raises:
        ValueError: If ``values`` does not have exactly three finite components.
    """
    components = tuple(float(v) for v in values)
    if len(components) != 3:
        raise ValueError(f"{name} must have 3 components, got {len(components)}")
    if not all(math.isfinite(c) for c in components):
        raise ValueError(f"{name} has non-finite components: {components}")
    return components  # type: ignore[return-value]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for one render.

    Attributes:
        width: Output width in pixels.
        height: Output height in pixels.
        fov: Full field of view angle in radians, across the image height.
        background: Color (R, G, B) of pixels whose ray hits nothing.
        visibility: Distance bound; hits at or beyond it count as misses.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    fov: float = DEFAULT_FOV
    background: tuple[float, float, float] = DEFAULT_BACKGROUND
    visibility: float = DEFAULT_VISIBILITY

    def __post_init__(self) -> None:
        if not (_is_int(self.width) and _is_int(self.height)):
            raise ValueError(
                f"Image dimensions must be integers, got {self.width!r}x{self.height!r}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if not 0.0 < self.fov < math.pi:
            raise ValueError(f"Field of view must be in (0, pi) radians, got {self.fov}")
        object.__setattr__(self, "background", as_vec3(self.background, "Background color"))
        if not self.visibility > 0.0:
            raise ValueError(f"Visibility bound must be positive, got {self.visibility}")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    @property
    def tan_half_fov(self) -> float:
        return math.tan(self.fov / 2.0)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height
