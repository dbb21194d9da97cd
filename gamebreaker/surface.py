"""Off-screen surfaces and the render target that selects one."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Surface:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("surface size must be positive")


class RenderTarget:
    """Which surface drawing goes to; None means the screen."""

    def __init__(self) -> None:
        self.target: Surface | None = None

    @property
    def active(self) -> bool:
        return self.target is not None

    def set(self, surface: Surface) -> None:
        self.target = surface

    def reset(self) -> None:
        self.target = None


def surface_dest_rect(
    surface: Surface, x: float, y: float, xscale: float = 1.0, yscale: float = 1.0
) -> tuple[int, int, int, int]:
    """Destination rectangle (x, y, w, h) for drawing a scaled surface."""
    return (int(x), int(y), int(surface.width * xscale), int(surface.height * yscale))