from abc import ABC, abstractmethod
from typing import Callable
import logging

import torch

from IsoMesher.plotting import plot_slice
import IsoMesher

logger = logging.getLogger(IsoMesher.__name__)


class FieldEvaluationError(RuntimeError):
    """Raised when a scalar field returns missing, malformed or non-finite values."""


class ScalarFieldBase(ABC):
    """Abstract base class for scalar fields sampled by the mesher.

    A scalar field assigns a real value to every point in space. Points with a
    value strictly greater than zero are *inside*, all other points (including
    exactly zero) are *outside*. The isosurface extracted by
    :class:`IsoMesher.marching_cubes.MarchingCubes` is the zero level set.

    Fields may be time dependent. The mesher calls :meth:`advance` exactly
    once at the beginning of every update cycle, before any evaluation of
    that cycle; evaluation itself must not change the state of the field.

    Notes
    -----
    Subclasses must implement:
    - ``_compute(queries)``: field values for a batch of query points

    Subclasses with animation state override ``advance()``.

    Examples
    --------
    >>> from IsoMesher.field_primitives import SphereField
    >>> import torch
    >>>
    >>> sphere = SphereField(center=[0, 0, 0], radius=1.0)
    >>> points = torch.tensor([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
    >>> sphere(points)  # [[1.0], [-1.0]] (inside, outside)
    """

    def __init__(self):
        self.time = 0.0

    def __call__(self, queries: torch.Tensor) -> torch.Tensor:
        """Evaluate the field at given query points.

        Parameters
        ----------
        queries : torch.Tensor
            Query points of shape (N, 3).

        Returns
        -------
        torch.Tensor
            Field values of shape (N, 1).

        Raises
        ------
        ValueError
            If queries have invalid shape.
        FieldEvaluationError
            If the field computation returns missing, malformed or
            non-finite output.
        """
        self._validate_input(queries)
        values = self._compute(queries)
        if values is None:
            raise FieldEvaluationError("Invalid field output")
        if values.shape != (queries.shape[0], 1):
            raise FieldEvaluationError(
                f"Expected field output of shape ({queries.shape[0]}, 1), "
                f"got {tuple(values.shape)}"
            )
        if not torch.isfinite(values).all():
            n_bad = int((~torch.isfinite(values)).sum())
            raise FieldEvaluationError(
                f"{self.__class__.__name__} returned {n_bad} non-finite values"
            )
        return values

    def _validate_input(self, queries: torch.Tensor):
        if queries.ndim != 2 or queries.shape[1] != 3:
            raise ValueError(f"Expected input of shape (N, 3), got {queries.shape}")

    @abstractmethod
    def _compute(self, queries: torch.Tensor) -> torch.Tensor:
        """Compute field values for query points.

        Parameters
        ----------
        queries : torch.Tensor
            Query points of shape (N, 3).

        Returns
        -------
        torch.Tensor
            Field values of shape (N, 1).
        """
        pass

    def evaluate(self, position) -> float:
        """Evaluate the field at a single position.

        Parameters
        ----------
        position : sequence of 3 floats or torch.Tensor of shape (3,)

        Returns
        -------
        float
        """
        query = torch.as_tensor(position, dtype=torch.float32).reshape(1, 3)
        return float(self(query)[0, 0])

    def advance(self):
        """Advance the animation state by one step. Static fields do nothing."""
        pass

    def plot_slice(self, *args, **kwargs):
        return plot_slice(self, *args, **kwargs)

    def __add__(self, other):
        return SummedField(self, other)

    def __neg__(self):
        return NegatedField(self)


class SummedField(ScalarFieldBase):
    def __init__(self, obj1: ScalarFieldBase, obj2: ScalarFieldBase):
        super().__init__()
        self.obj1 = obj1
        self.obj2 = obj2

    def _compute(self, queries):
        return self.obj1._compute(queries) + self.obj2._compute(queries)

    def advance(self):
        self.obj1.advance()
        self.obj2.advance()
        self.time = max(self.obj1.time, self.obj2.time)


class NegatedField(ScalarFieldBase):
    def __init__(self, obj: ScalarFieldBase):
        super().__init__()
        self.obj = obj

    def _compute(self, queries):
        return -self.obj._compute(queries)

    def advance(self):
        self.obj.advance()
        self.time = self.obj.time


class SDFField(ScalarFieldBase):
    """Adapter for signed distance functions.

    Signed distance functions are negative inside the geometry, the mesher
    treats positive values as inside. This wrapper negates the distance so
    any callable mapping ``(N, 3)`` queries to ``(N, 1)`` or ``(N,)``
    distances can be meshed directly.

    Parameters
    ----------
    sdf : callable
        Signed distance function, negative inside.
    """

    def __init__(self, sdf: Callable[[torch.Tensor], torch.Tensor]):
        super().__init__()
        self.sdf = sdf

    def _compute(self, queries):
        return -torch.as_tensor(self.sdf(queries)).reshape(-1, 1)
