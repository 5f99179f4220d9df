import json
import logging
import math

import pytest
import torch

from IsoMesher.config import (
    ConfigurationError,
    GridConfig,
    load_grid_config,
    load_metaball_field,
    load_specifications,
)


@pytest.fixture
def specs():
    return {
        "Origin": [-1.0, -1.0, -1.0],
        "Extent": 2.0,
        "CubeEdge": 0.1,
        "NormalDelta": 0.002,
        "MetaBalls": [
            {"Center": [0.0, 0.0, 0.0], "Radius": 0.3},
            {
                "Center": [0.2, 0.0, 0.0],
                "Radius": 0.2,
                "OrbitRadius": 0.4,
                "AngularSpeed": 2.0,
                "Phase": 0.5,
            },
        ],
        "Threshold": 0.8,
        "TimeStep": 0.1,
    }


@pytest.fixture
def specs_file(specs, tmp_path):
    fname = tmp_path / "specs.json"
    with open(fname, "w") as f:
        json.dump(specs, f, indent=2)
    return fname


def test_load_grid_config(specs_file):
    config = load_grid_config(specs_file)
    assert config.origin == (-1.0, -1.0, -1.0)
    assert config.extent == 2.0
    assert config.cube_edge == 0.1
    assert config.normal_delta == 0.002
    torch.testing.assert_close(
        config.bounds(), torch.tensor([[-1.0, -1.0, -1.0], [1.0, 1.0, 1.0]])
    )


def test_dict_conversion(specs):
    config = GridConfig.from_dict(specs)
    assert GridConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()

    del specs["NormalDelta"]
    assert GridConfig.from_dict(specs).normal_delta == 1e-3
    del specs["CubeEdge"]
    with pytest.raises(ConfigurationError):
        GridConfig.from_dict(specs)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_specifications(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "origin, extent, cube_edge, normal_delta",
    [
        ((0.0, 0.0), 1.0, 0.1, 1e-3),
        ((0.0, 0.0, math.nan), 1.0, 0.1, 1e-3),
        ((0.0, True, 0.0), 1.0, 0.1, 1e-3),
        ((0.0, 0.0, 0.0), -1.0, 0.1, 1e-3),
        ((0.0, 0.0, 0.0), math.inf, 0.1, 1e-3),
        ((0.0, 0.0, 0.0), 1.0, 0.0, 1e-3),
        ((0.0, 0.0, 0.0), 1.0, "0.1", 1e-3),
        ((0.0, 0.0, 0.0), 1.0, 0.1, -1e-3),
    ],
)
def test_invalid_config(origin, extent, cube_edge, normal_delta):
    config = GridConfig(origin, extent, cube_edge, normal_delta)
    with pytest.raises(ConfigurationError):
        config.validate()
    # configuration errors are value errors
    with pytest.raises(ValueError):
        config.validate()


def test_large_cube_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="IsoMesher"):
        config = GridConfig((0.0, 0.0, 0.0), extent=1.0, cube_edge=2.0)
        for _ in range(3):
            config.validate()
    assert caplog.text.count("exceeds extent") == 1


def test_load_metaball_field(specs):
    field = load_metaball_field(specs)
    assert len(field.balls) == 2
    assert field.threshold == 0.8
    assert field.time_step == 0.1
    assert field.balls[0].orbit_radius == 0.0
    assert field.balls[1].orbit_radius == 0.4
    assert field.balls[1].angular_speed == 2.0
    assert field.balls[1].phase == 0.5


def test_default_metaballs(specs):
    del specs["MetaBalls"]
    field = load_metaball_field(specs)
    assert len(field.balls) == 2
    for ball in field.balls:
        torch.testing.assert_close(ball.center, torch.zeros(3))
        assert ball.orbit_radius > 0


def test_invalid_metaball(specs):
    del specs["MetaBalls"][0]["Radius"]
    with pytest.raises(ConfigurationError):
        load_metaball_field(specs)
