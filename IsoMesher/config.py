"""
Mesher Configuration
====================

The traversal region, the cube size and the normal estimation step are
supplied from outside and stay constant during a run. They are collected in
:class:`GridConfig`, which can be read from a JSON specification file::

    {
        "Origin": [-1.0, -1.0, -1.0],
        "Extent": 2.0,
        "CubeEdge": 0.05,
        "NormalDelta": 0.001,
        "MetaBalls": [
            {"Center": [0.0, 0.0, 0.0], "Radius": 0.3, "OrbitRadius": 0.4}
        ],
        "TimeStep": 0.05
    }

``MetaBalls``, ``Threshold`` and ``TimeStep`` are only read by
:func:`load_metaball_field`.
"""

import json
import logging
import math
import os

import torch

from IsoMesher.field_primitives import MetaBall, MetaBallField
import IsoMesher

logger = logging.getLogger(IsoMesher.__name__)


class ConfigurationError(ValueError):
    """Raised for an unusable grid or field configuration."""


def _is_finite_number(value) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class GridConfig:
    """Bounding region and resolution of the cube grid.

    Parameters
    ----------
    origin : sequence of 3 floats
        Minimum corner of the cube shaped bounding region.
    extent : float
        Side length of the bounding region.
    cube_edge : float
        Edge length of a single marching cube. Must be positive; cubes larger
        than the region produce no geometry.
    normal_delta : float, default 1e-3
        Step of the central finite differences used for normals. Too large
        biases the normals, too small amplifies evaluation noise.
    """

    def __init__(self, origin, extent, cube_edge, normal_delta=1e-3):
        self.origin = tuple(origin)
        self.extent = extent
        self.cube_edge = cube_edge
        self.normal_delta = normal_delta
        if (
            _is_finite_number(cube_edge)
            and _is_finite_number(extent)
            and cube_edge > extent
        ):
            logger.warning(
                f"Cube edge {cube_edge} exceeds extent {extent}, "
                "no geometry will be generated"
            )

    def validate(self):
        """Raise ConfigurationError if the configuration cannot be traversed."""
        if len(self.origin) != 3 or not all(
            _is_finite_number(v) for v in self.origin
        ):
            raise ConfigurationError(
                f"Origin must be three finite numbers, got {self.origin}"
            )
        if not _is_finite_number(self.extent) or self.extent < 0:
            raise ConfigurationError(
                f"Extent must be a finite non-negative number, got {self.extent}"
            )
        if not _is_finite_number(self.cube_edge) or self.cube_edge <= 0:
            raise ConfigurationError(
                f"Cube edge must be a finite positive number, got {self.cube_edge}"
            )
        if not _is_finite_number(self.normal_delta) or self.normal_delta <= 0:
            raise ConfigurationError(
                f"Normal delta must be a finite positive number, got {self.normal_delta}"
            )

    def bounds(self) -> torch.Tensor:
        origin = torch.tensor(self.origin, dtype=torch.float32)
        return torch.stack([origin, origin + self.extent], dim=0)

    @classmethod
    def from_dict(cls, specs: dict):
        missing = [key for key in ("Origin", "Extent", "CubeEdge") if key not in specs]
        if missing:
            raise ConfigurationError(f"Missing configuration keys: {missing}")
        return cls(
            origin=specs["Origin"],
            extent=specs["Extent"],
            cube_edge=specs["CubeEdge"],
            normal_delta=specs.get("NormalDelta", 1e-3),
        )

    def to_dict(self) -> dict:
        return {
            "Origin": list(self.origin),
            "Extent": self.extent,
            "CubeEdge": self.cube_edge,
            "NormalDelta": self.normal_delta,
        }

    def __repr__(self):
        return (
            f"GridConfig(origin={self.origin}, extent={self.extent}, "
            f"cube_edge={self.cube_edge}, normal_delta={self.normal_delta})"
        )


def load_specifications(filename) -> dict:
    if not os.path.isfile(filename):
        raise ConfigurationError(f"Configuration file {filename} does not exist")
    with open(filename) as f:
        return json.load(f)


def load_grid_config(filename) -> GridConfig:
    config = GridConfig.from_dict(load_specifications(filename))
    config.validate()
    return config


def load_metaball_field(specs: dict) -> MetaBallField:
    """Build a MetaBallField from the ``MetaBalls`` section of a specification.

    Without a ``MetaBalls`` entry two orbiting balls around the centre of the
    grid region are used.
    """
    if "MetaBalls" in specs:
        ball_specs = specs["MetaBalls"]
    else:
        grid = GridConfig.from_dict(specs)
        center = [o + grid.extent / 2 for o in grid.origin]
        ball_specs = [
            {"Center": center, "Radius": grid.extent / 8, "OrbitRadius": grid.extent / 6},
            {
                "Center": center,
                "Radius": grid.extent / 10,
                "OrbitRadius": grid.extent / 5,
                "Phase": math.pi,
            },
        ]

    balls = []
    for ball in ball_specs:
        if "Center" not in ball or "Radius" not in ball:
            raise ConfigurationError(
                f"Every metaball needs a Center and a Radius, got {ball}"
            )
        balls.append(
            MetaBall(
                center=ball["Center"],
                radius=ball["Radius"],
                orbit_radius=ball.get("OrbitRadius", 0.0),
                angular_speed=ball.get("AngularSpeed", 1.0),
                phase=ball.get("Phase", 0.0),
            )
        )
    return MetaBallField(
        balls,
        threshold=specs.get("Threshold", 1.0),
        time_step=specs.get("TimeStep", 0.05),
    )
