import math

import torch

from IsoMesher.field import ScalarFieldBase

#: squared distances to a metaball centre are clamped to this value so the
#: field stays finite at the centre
MIN_SQUARED_DISTANCE = 1e-12


class ConstantField(ScalarFieldBase):
    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def _compute(self, queries: torch.Tensor) -> torch.Tensor:
        return torch.full(
            (queries.shape[0], 1), self.value, dtype=queries.dtype, device=queries.device
        )


class PlaneField(ScalarFieldBase):
    """Linear field, positive on the side the normal points to."""

    def __init__(self, point, normal):
        super().__init__()
        self.point = torch.tensor(point, dtype=torch.float32)
        self.normal = torch.tensor(normal, dtype=torch.float32)
        self.normal = self.normal / torch.linalg.norm(self.normal)

    def _compute(self, queries: torch.Tensor) -> torch.Tensor:
        point = self.point.to(device=queries.device, dtype=queries.dtype)
        normal = self.normal.to(device=queries.device, dtype=queries.dtype)
        return torch.matmul(queries - point, normal).reshape(-1, 1)


class SphereField(ScalarFieldBase):
    def __init__(self, center, radius):
        super().__init__()
        self.center = torch.tensor(center, dtype=torch.float32)
        self.r = radius

    def _compute(self, queries: torch.Tensor) -> torch.Tensor:
        center = self.center.to(device=queries.device, dtype=queries.dtype)
        return (self.r - torch.linalg.norm(queries - center, dim=1)).reshape(-1, 1)


class MetaBall:
    """A single metaball with an optional circular orbit in the xy plane.

    Parameters
    ----------
    center : sequence of 3 floats
        Rest position, the centre of the orbit.
    radius : float
        Radius of the ball when it is on its own.
    orbit_radius : float, default 0.0
        Radius of the circular motion. Zero keeps the ball static.
    angular_speed : float, default 1.0
        Angular speed of the orbit in radians per unit of time.
    phase : float, default 0.0
        Orbit angle at time zero.
    """

    def __init__(self, center, radius, orbit_radius=0.0, angular_speed=1.0, phase=0.0):
        self.center = torch.tensor(center, dtype=torch.float32)
        self.radius = radius
        self.orbit_radius = orbit_radius
        self.angular_speed = angular_speed
        self.phase = phase

    def position(self, time: float) -> torch.Tensor:
        angle = self.angular_speed * time + self.phase
        offset = torch.tensor(
            [math.cos(angle), math.sin(angle), 0.0], dtype=torch.float32
        )
        return self.center + self.orbit_radius * offset

    def potential(self, queries: torch.Tensor, time: float) -> torch.Tensor:
        center = self.position(time).to(device=queries.device, dtype=queries.dtype)
        squared_distance = ((queries - center) ** 2).sum(dim=1)
        squared_distance = torch.clamp(squared_distance, min=MIN_SQUARED_DISTANCE)
        return (self.radius**2 / squared_distance).reshape(-1, 1)


class MetaBallField(ScalarFieldBase):
    """Sum of metaball potentials minus a threshold.

    ``f(p) = sum_i r_i^2 / |p - c_i(t)|^2 - threshold``

    A lone ball with ``threshold=1`` has its surface at distance ``r`` from its
    centre; nearby balls blend into a single smooth surface. Each call to
    :meth:`advance` moves the field forward by ``time_step``.

    Parameters
    ----------
    balls : list of MetaBall
    threshold : float, default 1.0
    time_step : float, default 0.05

    Examples
    --------
    >>> from IsoMesher.field_primitives import MetaBall, MetaBallField
    >>> field = MetaBallField(
    ...     [MetaBall([0.4, 0.5, 0.5], 0.15), MetaBall([0.6, 0.5, 0.5], 0.15)]
    ... )
    >>> field.evaluate([0.5, 0.5, 0.5]) > 0
    True
    """

    def __init__(self, balls: list[MetaBall], threshold=1.0, time_step=0.05):
        super().__init__()
        self.balls = list(balls)
        self.threshold = threshold
        self.time_step = time_step

    def _compute(self, queries: torch.Tensor) -> torch.Tensor:
        values = torch.full(
            (queries.shape[0], 1),
            -self.threshold,
            dtype=queries.dtype,
            device=queries.device,
        )
        for ball in self.balls:
            values = values + ball.potential(queries, self.time)
        return values

    def advance(self):
        self.time += self.time_step
