"""Geometry of the single exterior surface and its window."""

import numpy as np
from pydantic import BaseModel, Field
from shapely import Polygon

from zonebench.exceptions import WindowExceedsSurface
from zonebench.model import Vertex


def compute_areas(
    surface_width: float,
    surface_height: float,
    window_width: float,
    window_height: float,
) -> tuple[float, float]:
    """Compute the net opaque area and the window area of a surface.

    Args:
        surface_width (float): The width of the surface, window included [m].
        surface_height (float): The height of the surface, window included [m].
        window_width (float): The width of the window [m].
        window_height (float): The height of the window [m].

    Returns:
        opaque_area (float): The surface area minus the window area [m2].
        window_area (float): The window area [m2].
    """
    if window_width > surface_width or window_height > surface_height:
        raise WindowExceedsSurface(
            surface_width, surface_height, window_width, window_height
        )
    window_area = window_width * window_height
    opaque_area = surface_width * surface_height - window_area
    return opaque_area, window_area


class FacadeGeometry(BaseModel, frozen=True, allow_inf_nan=False):
    """A rectangular wall with an optional centred window.

    The wall lies in a vertical plane with its bottom edge centred on the
    origin.  In the plane, `u` runs horizontally (left to right when seen
    from the outside) and `v` runs upwards.
    """

    surface_width: float = Field(..., title="Surface width [m]", gt=0)
    surface_height: float = Field(..., title="Surface height [m]", gt=0)
    window_width: float = Field(default=0, title="Window width [m]", ge=0)
    window_height: float = Field(default=0, title="Window height [m]", ge=0)
    orientation: float = Field(
        default=0,
        title="Orientation [deg]",
        description="The azimuth the exterior faces: 0 is south, increasing clockwise.",
    )

    def areas(self) -> tuple[float, float]:
        """Return the net opaque area and the window area [m2]."""
        return compute_areas(
            self.surface_width,
            self.surface_height,
            self.window_width,
            self.window_height,
        )

    @property
    def has_window(self) -> bool:
        """Whether the window has a non-zero area."""
        return self.areas()[1] > 0

    @property
    def _window_ring(self) -> list[tuple[float, float]]:
        half = self.window_width / 2
        sill = (self.surface_height - self.window_height) / 2
        head = sill + self.window_height
        return [(-half, sill), (half, sill), (half, head), (-half, head)]

    @property
    def _surface_ring(self) -> list[tuple[float, float]]:
        half = self.surface_width / 2
        return [
            (-half, 0.0),
            (half, 0.0),
            (half, self.surface_height),
            (-half, self.surface_height),
        ]

    @property
    def surface_polygon(self) -> Polygon:
        """The opaque part of the wall, in the plane, with the window cut out."""
        holes = [self._window_ring] if self.has_window else None
        return Polygon(self._surface_ring, holes)

    @property
    def window_polygon(self) -> Polygon | None:
        """The window, in the plane, or None if there is no window."""
        if not self.has_window:
            return None
        return Polygon(self._window_ring)

    @property
    def outward_normal(self) -> np.ndarray:
        """Unit vector the exterior faces (x east, y north, z up)."""
        azimuth = np.deg2rad(self.orientation)
        return np.array([-np.sin(azimuth), -np.cos(azimuth), 0.0])

    def _to_world(self, ring: list[tuple[float, float]]) -> tuple[Vertex, ...]:
        azimuth = np.deg2rad(self.orientation)
        u_axis = np.array([np.cos(azimuth), -np.sin(azimuth), 0.0])
        v_axis = np.array([0.0, 0.0, 1.0])
        points = np.array(ring)
        world = np.outer(points[:, 0], u_axis) + np.outer(points[:, 1], v_axis)
        return tuple((float(x), float(y), float(z)) for x, y, z in world)

    @property
    def surface_vertices(self) -> tuple[Vertex, ...]:
        """The outer loop of the wall, counter-clockwise seen from outside."""
        return self._to_world(self._surface_ring)

    @property
    def window_vertices(self) -> tuple[Vertex, ...]:
        """The loop of the window, or an empty tuple if there is no window."""
        if not self.has_window:
            return ()
        return self._to_world(self._window_ring)
