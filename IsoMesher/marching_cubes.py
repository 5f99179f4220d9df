"""
Marching Cubes Isosurface Extraction
====================================

Extracts a triangle mesh of the zero level set of a :class:`ScalarFieldBase`.

Every update cycle walks a regular grid of cubes over the configured
bounding region, classifies each cube by the signs of the field at its
8 corners, looks up the triangles of that case in :mod:`IsoMesher.tables`
and places one vertex per triangle edge by linear interpolation of the field
along the cube edge. Normals are estimated with central finite differences.

Cubes, triangles and vertices are processed in a fixed order: cubes with x
outermost and z innermost, then triangles in case table order, then the
three edges of each triangle in table order. Vertices are never shared
between triangles.

Examples
--------
>>> from IsoMesher.config import GridConfig
>>> from IsoMesher.field_primitives import SphereField
>>> from IsoMesher.marching_cubes import MarchingCubes
>>>
>>> mesher = MarchingCubes(
...     SphereField(center=[0, 0, 0], radius=0.5),
...     GridConfig(origin=(-1, -1, -1), extent=2.0, cube_edge=0.1),
... )
>>> mesh = mesher.update()
"""

import logging
import math
import time
from typing import Callable

import torch

from IsoMesher.config import GridConfig
from IsoMesher.field import ScalarFieldBase
from IsoMesher.mesh import MeshBuffers, MeshBuilder
from IsoMesher.tables import (
    CASE_TO_EDGES,
    CASE_TO_TRIANGLE_COUNT,
    CUBE_CORNERS,
    CUBE_EDGES,
    N_CASES,
)
import IsoMesher

logger = logging.getLogger(IsoMesher.__name__)

#: absolute tolerance that lets the last row of cubes reach the region border
GRID_TOLERANCE = 1e-4

#: normals point toward decreasing field values, out of the inside region
OUTWARD_NORMAL_SIGN = -1.0

_CORNER_OFFSETS = torch.tensor(CUBE_CORNERS, dtype=torch.int64)
_EDGE_CORNERS = torch.tensor(CUBE_EDGES, dtype=torch.int64)
_CORNER_BITS = torch.tensor([1 << i for i in range(8)], dtype=torch.int64)
_TRIANGLE_COUNTS = torch.tensor(CASE_TO_TRIANGLE_COUNT, dtype=torch.int64)


def _padded_triangle_table() -> torch.Tensor:
    max_edges = 3 * max(CASE_TO_TRIANGLE_COUNT)
    table = torch.full((N_CASES, max_edges), -1, dtype=torch.int64)
    for case_index, triangles in enumerate(CASE_TO_EDGES):
        edges = [edge for triangle in triangles for edge in triangle]
        if edges:
            table[case_index, : len(edges)] = torch.tensor(edges)
    return table


# (256, 15) edge indices per case, padded with -1
_TRIANGLE_TABLE = _padded_triangle_table()


def classify_cubes(
    field: ScalarFieldBase, corners: torch.Tensor, cube_edge: float
) -> torch.Tensor:
    """Compute the case index of a batch of cubes.

    Parameters
    ----------
    field : ScalarFieldBase
        Field to sample.
    corners : torch.Tensor
        Minimum corners of the cubes, shape (N, 3).
    cube_edge : float
        Edge length of the cubes.

    Returns
    -------
    torch.Tensor
        int64 case indices of shape (N,). Bit ``i`` is set iff the field is
        strictly positive at corner ``i``.
    """
    if corners.shape[0] == 0:
        return torch.zeros(0, dtype=torch.int64, device=corners.device)
    offsets = _CORNER_OFFSETS.to(device=corners.device, dtype=corners.dtype)
    samples = corners[:, None, :] + offsets[None, :, :] * cube_edge
    values = field(samples.reshape(-1, 3)).reshape(-1, 8)
    inside = (values > 0).to(torch.int64)
    return (inside * _CORNER_BITS.to(corners.device)).sum(dim=1)


def classify_cube(field: ScalarFieldBase, corner, cube_edge: float) -> int:
    corner = torch.as_tensor(corner, dtype=torch.float32).reshape(1, 3)
    return int(classify_cubes(field, corner, cube_edge)[0])


def outward_normal(gradient: torch.Tensor) -> torch.Tensor:
    """Turn field gradients of shape (M, 3) into unit surface normals.

    A zero gradient has no direction and gives non-finite components.
    """
    norm = torch.linalg.norm(gradient, dim=-1, keepdim=True)
    return OUTWARD_NORMAL_SIGN * gradient / norm


def estimate_gradient(
    field: ScalarFieldBase, points: torch.Tensor, normal_delta: float
) -> torch.Tensor:
    """Unnormalised central differences ``f(p + d e_k) - f(p - d e_k)``.

    All ``6 M`` samples are evaluated in a single field call.
    """
    steps = torch.eye(3, dtype=points.dtype, device=points.device) * normal_delta
    forward = points[:, None, :] + steps[None, :, :]
    backward = points[:, None, :] - steps[None, :, :]
    samples = torch.cat([forward.reshape(-1, 3), backward.reshape(-1, 3)], dim=0)
    values = field(samples).reshape(2, -1, 3)
    return values[0] - values[1]


def interpolate_edges(
    field: ScalarFieldBase,
    edges: torch.Tensor,
    corners: torch.Tensor,
    cube_edge: float,
    normal_delta: float,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Locate the zero crossing and the surface normal on a batch of cube edges.

    Parameters
    ----------
    field : ScalarFieldBase
        Field to sample.
    edges : torch.Tensor
        Edge indices in [0, 11], shape (M,).
    corners : torch.Tensor
        Minimum corner of the cube each edge belongs to, shape (M, 3).
    cube_edge : float
        Edge length of the cubes.
    normal_delta : float
        Finite difference step for the normals.

    Returns
    -------
    points : torch.Tensor
        Crossing points of shape (M, 3), ``p1 + t (p2 - p1)`` with
        ``t = -f1 / (f2 - f1)``.
    normals : torch.Tensor
        Outward unit normals of shape (M, 3).

    Notes
    -----
    The endpoints of every edge are expected to have opposite signs. If both
    endpoint values are equal the crossing is undefined and the returned
    point and normal contain non-finite values; the field is not sampled
    around such points.
    """
    edge_corners = _EDGE_CORNERS.to(corners.device)[edges]
    offsets = _CORNER_OFFSETS.to(device=corners.device, dtype=corners.dtype)
    p1 = corners + offsets[edge_corners[:, 0]] * cube_edge
    p2 = corners + offsets[edge_corners[:, 1]] * cube_edge

    endpoint_values = field(torch.cat([p1, p2], dim=0)).reshape(2, -1)
    f1, f2 = endpoint_values[0], endpoint_values[1]
    t = (-f1 / (f2 - f1)).unsqueeze(1)
    points = p1 + t * (p2 - p1)

    finite = torch.isfinite(points).all(dim=1)
    normals = torch.full_like(points, float("nan"))
    if finite.any():
        gradient = estimate_gradient(field, points[finite], normal_delta)
        normals[finite] = outward_normal(gradient)
    return points, normals


def interpolate_edge(
    field: ScalarFieldBase,
    edge: int,
    corner,
    cube_edge: float,
    normal_delta: float,
    builder: MeshBuilder,
) -> int:
    """Interpolate a single cube edge and emit the vertex.

    Appends one vertex, its normal and its index to ``builder``.

    Returns
    -------
    int
        Index of the new vertex.
    """
    if not 0 <= edge < len(CUBE_EDGES):
        raise ValueError(f"Edge index must be in [0, {len(CUBE_EDGES) - 1}], got {edge}")
    corner = torch.as_tensor(corner, dtype=builder.dtype, device=builder.device)
    points, normals = interpolate_edges(
        field,
        torch.tensor([edge], device=builder.device),
        corner.reshape(1, 3),
        cube_edge,
        normal_delta,
    )
    return builder.emit_vertex(points[0], normals[0])


def cells_per_axis(extent: float, cube_edge: float) -> int:
    """Number of whole cubes that fit along one side of the region.

    A cube that overshoots the region by less than GRID_TOLERANCE is kept.
    """
    return max(int(math.floor((extent + GRID_TOLERANCE) / cube_edge)), 0)


def cube_corners(
    origin,
    cube_edge: float,
    n_cells: int,
    dtype=torch.float32,
    device="cpu",
    x_cells: range | None = None,
) -> torch.Tensor:
    """Minimum corners of an ``n_cells^3`` grid, x outermost, z innermost.

    Corners are computed as ``origin + index * cube_edge`` from integer cell
    indices. ``x_cells`` restricts the grid to a slab of x indices.
    """
    index = torch.arange(n_cells, device=device)
    if x_cells is None:
        x_index = index
    else:
        x_index = torch.arange(x_cells.start, x_cells.stop, device=device)
    grid = torch.meshgrid(x_index, index, index, indexing="ij")
    cells = torch.stack(grid, dim=-1).reshape(-1, 3)
    origin = torch.as_tensor(origin, dtype=dtype, device=device)
    return origin + cells.to(dtype) * cube_edge


class MarchingCubes:
    """Marching cubes mesher, re-run once per update cycle.

    Every call to :meth:`update` validates the configuration, advances the
    field once, rebuilds all buffers from scratch and publishes them. The
    published mesh is only replaced after a cycle completed, so an error
    anywhere in the cycle leaves the previous mesh in place.

    Parameters
    ----------
    field : ScalarFieldBase
        The field to mesh. Its ``advance`` is called at the start of every cycle.
    config : GridConfig
        Bounding region, cube size and normal step.
    device : str or torch.device, default "cpu"
    dtype : torch.dtype, default torch.float32
    consumer : callable, optional
        Called with the new :class:`MeshBuffers` at the end of every cycle,
        e.g. a renderer upload. The cycle only completes once the consumer
        has returned; if it raises, ``mesh`` and ``cycle`` stay unchanged.

    Attributes
    ----------
    mesh : MeshBuffers
        Mesh of the last completed cycle, empty before the first one.
    cycle : int
        Number of completed cycles.
    max_batch_cubes : int
        Upper bound on the cubes classified in one field call. The grid is
        processed in slabs of whole x layers, so memory stays bounded for
        fine grids while the x outermost order is kept.
    """

    max_batch_cubes = 2**18

    def __init__(
        self,
        field: ScalarFieldBase,
        config: GridConfig,
        device="cpu",
        dtype=torch.float32,
        consumer: Callable[[MeshBuffers], None] | None = None,
    ):
        self.field = field
        self.config = config
        self.device = device
        self.dtype = dtype
        self.consumer = consumer
        self.mesh = MeshBuffers.empty(dtype=dtype, device=device)
        self.cycle = 0

    def update(self) -> MeshBuffers:
        """Run one full cycle and return the new mesh."""
        self.config.validate()
        start = time.time()

        self.field.advance()
        builder = MeshBuilder(dtype=self.dtype, device=self.device)
        n_cells = self._traverse(builder)
        mesh = builder.build()

        if self.consumer is not None:
            self.consumer(mesh)
        self.mesh = mesh
        self.cycle += 1
        logger.debug(
            f"Cycle {self.cycle}: {n_cells} cubes, {mesh.n_triangles} triangles, "
            f"{mesh.n_vertices} vertices in {time.time() - start:.3f}s"
        )
        return mesh

    def _traverse(self, builder: MeshBuilder) -> int:
        config = self.config
        n_cells = cells_per_axis(config.extent, config.cube_edge)
        if n_cells == 0:
            return 0

        slab_size = max(1, self.max_batch_cubes // (n_cells * n_cells))
        n_dropped = 0
        for x_start in range(0, n_cells, slab_size):
            corners = cube_corners(
                config.origin,
                config.cube_edge,
                n_cells,
                self.dtype,
                self.device,
                x_cells=range(x_start, min(x_start + slab_size, n_cells)),
            )
            n_dropped += self._march_slab(corners, builder)

        if n_dropped > 0:
            logger.warning(
                f"Dropped {n_dropped} degenerate triangles with non-finite "
                "vertices or normals"
            )
        return n_cells**3

    def _march_slab(self, corners: torch.Tensor, builder: MeshBuilder) -> int:
        """Emit the triangles of a batch of cubes, return the number dropped."""
        config = self.config
        cases = classify_cubes(self.field, corners, config.cube_edge)

        triangle_counts = _TRIANGLE_COUNTS.to(self.device)[cases]
        active = torch.nonzero(triangle_counts > 0).squeeze(1)
        if active.numel() == 0:
            return 0

        # edges of all triangles of all active cubes, flattened in emission order
        rows = _TRIANGLE_TABLE.to(self.device)[cases[active]]
        valid = rows >= 0
        edges = rows[valid]
        cube_ids = active[:, None].expand_as(rows)[valid]

        points, normals = interpolate_edges(
            self.field,
            edges,
            corners[cube_ids],
            config.cube_edge,
            config.normal_delta,
        )

        finite = torch.isfinite(points).all(dim=1) & torch.isfinite(normals).all(dim=1)
        keep_triangle = finite.reshape(-1, 3).all(dim=1)
        n_dropped = int((~keep_triangle).sum())
        if n_dropped > 0:
            keep = keep_triangle.repeat_interleave(3)
            points, normals = points[keep], normals[keep]

        builder.emit_vertices(points, normals)
        return n_dropped


def create_isosurface_mesh(
    field: ScalarFieldBase,
    origin,
    extent: float,
    cube_edge: float,
    normal_delta: float = 1e-3,
    device="cpu",
) -> MeshBuffers:
    """Mesh the zero level set of ``field`` in a single cycle.

    Note that this advances the field once, like every update cycle.
    """
    config = GridConfig(origin, extent, cube_edge, normal_delta=normal_delta)
    return MarchingCubes(field, config, device=device).update()
