import math

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest
import torch

from IsoMesher.field import (
    FieldEvaluationError,
    NegatedField,
    ScalarFieldBase,
    SDFField,
    SummedField,
)
from IsoMesher.field_primitives import (
    MIN_SQUARED_DISTANCE,
    ConstantField,
    MetaBall,
    MetaBallField,
    PlaneField,
    SphereField,
)


@pytest.fixture
def queries():
    torch.manual_seed(42)
    return torch.rand(10, 3)


class BrokenField(ScalarFieldBase):
    def __init__(self, output):
        super().__init__()
        self.output = output

    def _compute(self, queries):
        return self.output(queries)


def test_field_primitives(queries):
    fields = [
        ConstantField(0.3),
        PlaneField(point=[0.5, 0.0, 0.0], normal=[0.0, 2.0, 0.0]),
        SphereField(center=[0.5, 0.5, 0.5], radius=0.3),
        MetaBallField([MetaBall([0.5, 0.5, 0.5], 0.2)]),
    ]
    for field in fields:
        print(f"Testing {field.__class__.__name__}")
        values = field(queries)
        assert values.shape == (10, 1)
        assert torch.isfinite(values).all()


def test_sphere_sign():
    sphere = SphereField(center=[0.0, 0.0, 0.0], radius=1.0)
    values = sphere(torch.tensor([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]]))
    torch.testing.assert_close(values, torch.tensor([[1.0], [-1.0]]))
    assert sphere.evaluate([0.0, 0.0, 1.0]) == pytest.approx(0.0)


def test_plane_normalizes_normal():
    plane = PlaneField(point=[0.0, 0.0, 0.0], normal=[0.0, 0.0, 4.0])
    assert plane.evaluate([3.0, -2.0, 0.25]) == pytest.approx(0.25)
    assert plane.evaluate([0.0, 0.0, -1.0]) == pytest.approx(-1.0)


def test_invalid_queries():
    sphere = SphereField(center=[0.0, 0.0, 0.0], radius=1.0)
    with pytest.raises(ValueError):
        sphere(torch.rand(10, 2))
    with pytest.raises(ValueError):
        sphere(torch.rand(10))


@pytest.mark.parametrize(
    "output",
    [
        lambda q: None,
        lambda q: torch.zeros(q.shape[0]),
        lambda q: torch.zeros(q.shape[0] + 1, 1),
        lambda q: torch.full((q.shape[0], 1), float("nan")),
        lambda q: torch.full((q.shape[0], 1), float("inf")),
    ],
)
def test_invalid_field_output(output, queries):
    with pytest.raises(FieldEvaluationError):
        BrokenField(output)(queries)


def test_sdf_adapter(queries):
    """
    Signed distance functions are negative inside, the adapter flips them so
    inside is positive.
    """
    sdf = SDFField(lambda q: torch.linalg.norm(q, dim=1) - 0.5)
    reference = SphereField(center=[0.0, 0.0, 0.0], radius=0.5)
    torch.testing.assert_close(sdf(queries), reference(queries))


def test_combinators(queries):
    sphere = SphereField(center=[0.5, 0.5, 0.5], radius=0.3)
    offset = ConstantField(0.1)
    summed = sphere + offset
    negated = -sphere
    assert isinstance(summed, SummedField)
    assert isinstance(negated, NegatedField)
    torch.testing.assert_close(summed(queries), sphere(queries) + 0.1)
    torch.testing.assert_close(negated(queries), -sphere(queries))


def test_combinators_advance_operands():
    balls = MetaBallField([MetaBall([0.0, 0.0, 0.0], 0.2)], time_step=0.25)
    summed = balls + ConstantField(0.0)
    summed.advance()
    assert balls.time == pytest.approx(0.25)
    assert summed.time == pytest.approx(0.25)
    negated = -balls
    negated.advance()
    assert balls.time == pytest.approx(0.5)
    assert negated.time == pytest.approx(0.5)


def test_single_metaball_surface():
    field = MetaBallField([MetaBall([0.0, 0.0, 0.0], 0.4)], threshold=1.0)
    assert field.evaluate([0.0, 0.0, 0.0]) > 0
    assert math.isfinite(field.evaluate([0.0, 0.0, 0.0]))
    assert field.evaluate([0.36, 0.0, 0.0]) > 0
    assert field.evaluate([0.44, 0.0, 0.0]) < 0
    assert field.evaluate([0.0, 0.4, 0.0]) == pytest.approx(0.0, abs=1e-5)


def test_metaball_centre_clamped():
    ball = MetaBall([0.2, 0.3, 0.4], 0.1)
    centre = torch.tensor([[0.2, 0.3, 0.4]], dtype=torch.float64)
    potential = ball.potential(centre, time=0.0)
    torch.testing.assert_close(
        potential, torch.tensor([[0.1**2 / MIN_SQUARED_DISTANCE]], dtype=torch.float64)
    )
    field = MetaBallField([ball], threshold=1.0)
    assert math.isfinite(field.evaluate([0.2, 0.3, 0.4]))


def test_metaballs_blend():
    """Two balls closer than their radii merge at the midpoint."""
    balls = [MetaBall([-0.2, 0.0, 0.0], 0.15), MetaBall([0.2, 0.0, 0.0], 0.15)]
    apart = MetaBallField(balls[:1])
    together = MetaBallField(balls)
    assert apart.evaluate([0.0, 0.0, 0.0]) < 0
    assert together.evaluate([0.0, 0.0, 0.0]) > apart.evaluate([0.0, 0.0, 0.0])


def test_metaball_orbit():
    ball = MetaBall([0.0, 0.0, 0.5], 0.1, orbit_radius=0.3, angular_speed=math.pi)
    torch.testing.assert_close(ball.position(0.0), torch.tensor([0.3, 0.0, 0.5]))
    torch.testing.assert_close(
        ball.position(0.5), torch.tensor([0.0, 0.3, 0.5]), atol=1e-6, rtol=0
    )

    field = MetaBallField([ball], time_step=0.5)
    before = field.evaluate([0.3, 0.0, 0.5])
    # evaluation does not change the field
    assert field.evaluate([0.3, 0.0, 0.5]) == before
    field.advance()
    assert field.time == pytest.approx(0.5)
    assert field.evaluate([0.3, 0.0, 0.5]) < before
    assert field.evaluate([0.0, 0.3, 0.5]) == pytest.approx(before)


def test_static_fields_ignore_advance(queries):
    sphere = SphereField(center=[0.5, 0.5, 0.5], radius=0.3)
    before = sphere(queries)
    sphere.advance()
    torch.testing.assert_close(sphere(queries), before)


def test_plot_slice():
    sphere = SphereField(center=[0.0, 0.0, 0.0], radius=0.5)
    fig, axs = plt.subplots(1, 3)
    for ax, normal in zip(axs, [(0, 0, 1), (0, 1, 0), (1, 0, 0)]):
        sphere.plot_slice(normal=normal, res=(20, 30), ax=ax)
    plt.close(fig)

    fig, ax = plt.subplots()
    with pytest.raises(NotImplementedError):
        sphere.plot_slice(normal=(1, 1, 0), ax=ax)
    plt.close(fig)


if __name__ == "__main__":
    test_sphere_sign()
    test_single_metaball_surface()
    test_metaball_orbit()
