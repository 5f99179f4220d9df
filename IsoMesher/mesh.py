"""
Mesh Buffers and Export
=======================

Output side of the mesher. :class:`MeshBuilder` accumulates vertices, normals
and triangle indices during one update cycle; :meth:`MeshBuilder.build` turns
them into an immutable :class:`MeshBuffers` that is handed to the consumer.

No vertex is ever shared: every emitted vertex gets its own normal and its
own entry in the index buffer, so ``indices`` is simply
``0, 1, 2, ..., n_vertices - 1`` unless triangles were dropped.
"""

import logging
import os
import pathlib

import gustaf as gus
import numpy as np
import torch as _torch
import trimesh
import vtk

import IsoMesher

logger = logging.getLogger(IsoMesher.__name__)


class MeshBuffers:
    """Vertex, normal and flat triangle index buffers of one update cycle.

    Parameters
    ----------
    vertices : torch.Tensor
        Vertex positions of shape (V, 3).
    normals : torch.Tensor
        Unit normals of shape (V, 3), index aligned with ``vertices``.
    indices : torch.Tensor
        Flat int64 triangle indices of shape (3T,).
    """

    def __init__(
        self, vertices: _torch.Tensor, normals: _torch.Tensor, indices: _torch.Tensor
    ):
        self.vertices = vertices
        self.normals = normals
        self.indices = indices

    @classmethod
    def empty(cls, dtype=_torch.float32, device="cpu"):
        return cls(
            _torch.zeros((0, 3), dtype=dtype, device=device),
            _torch.zeros((0, 3), dtype=dtype, device=device),
            _torch.zeros((0,), dtype=_torch.int64, device=device),
        )

    @property
    def faces(self) -> _torch.Tensor:
        return self.indices.reshape(-1, 3)

    @property
    def n_vertices(self) -> int:
        return self.vertices.shape[0]

    @property
    def n_triangles(self) -> int:
        return self.indices.shape[0] // 3

    def is_empty(self) -> bool:
        return self.n_vertices == 0 and self.indices.shape[0] == 0

    def validate(self):
        """Check the buffer invariants.

        Raises
        ------
        ValueError
            If normals and vertices differ in length, the index count is
            not a multiple of three or an index is out of range.
        """
        if self.normals.shape != self.vertices.shape:
            raise ValueError(
                f"Got {self.normals.shape[0]} normals for {self.vertices.shape[0]} vertices"
            )
        if self.indices.shape[0] % 3 != 0:
            raise ValueError(
                f"Number of indices ({self.indices.shape[0]}) is not a multiple of 3"
            )
        if self.indices.numel() > 0:
            if self.indices.min() < 0 or self.indices.max() >= self.n_vertices:
                raise ValueError(
                    f"Triangle indices out of range for {self.n_vertices} vertices"
                )

    def to_gus(self):
        return gus.Faces(
            self.vertices.detach().cpu().numpy().astype(np.float64),
            self.faces.detach().cpu().numpy(),
        )

    def to_trimesh(self):
        return trimesh.Trimesh(
            vertices=self.vertices.detach().cpu().numpy(),
            faces=self.faces.detach().cpu().numpy(),
            vertex_normals=self.normals.detach().cpu().numpy(),
            process=False,
        )

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(n_vertices={self.n_vertices}, "
            f"n_triangles={self.n_triangles})"
        )


class MeshBuilder:
    """Mutable accumulator for the buffers of a single update cycle.

    Every emitted vertex is appended together with its normal, and its new
    index is appended to the index buffer. The builder is owned by the
    traversal and thrown away once :meth:`build` has been called.
    """

    def __init__(self, dtype=_torch.float32, device="cpu"):
        self.dtype = dtype
        self.device = device
        self._vertices = []
        self._normals = []
        self._indices = []
        self._n_vertices = 0

    @property
    def n_vertices(self) -> int:
        return self._n_vertices

    def emit_vertex(self, position, normal) -> int:
        """Append one vertex and its normal, return the new vertex index."""
        position = _torch.as_tensor(position, dtype=self.dtype, device=self.device)
        normal = _torch.as_tensor(normal, dtype=self.dtype, device=self.device)
        indices = self.emit_vertices(position.reshape(1, 3), normal.reshape(1, 3))
        return int(indices[0])

    def emit_vertices(
        self, positions: _torch.Tensor, normals: _torch.Tensor
    ) -> _torch.Tensor:
        """Append a batch of vertices in order, return their indices.

        Parameters
        ----------
        positions : torch.Tensor
            Shape (M, 3).
        normals : torch.Tensor
            Shape (M, 3).

        Returns
        -------
        torch.Tensor
            int64 indices of shape (M,), consecutive from ``n_vertices``.
        """
        if positions.shape != normals.shape or positions.ndim != 2:
            raise ValueError(
                f"Positions {tuple(positions.shape)} and normals "
                f"{tuple(normals.shape)} must both have shape (M, 3)"
            )
        n_new = positions.shape[0]
        indices = _torch.arange(
            self._n_vertices,
            self._n_vertices + n_new,
            dtype=_torch.int64,
            device=self.device,
        )
        self._vertices.append(positions.to(dtype=self.dtype, device=self.device))
        self._normals.append(normals.to(dtype=self.dtype, device=self.device))
        self._indices.append(indices)
        self._n_vertices += n_new
        return indices

    def build(self) -> MeshBuffers:
        if self._n_vertices == 0:
            return MeshBuffers.empty(dtype=self.dtype, device=self.device)
        mesh = MeshBuffers(
            _torch.cat(self._vertices, dim=0),
            _torch.cat(self._normals, dim=0),
            _torch.cat(self._indices, dim=0),
        )
        mesh.validate()
        return mesh


def _export_surface_mesh_vtk(mesh: MeshBuffers, filename):
    """
    Writes legacy VTK polydata with the normals as point data.
    """
    vtk_points = vtk.vtkPoints()
    for v in mesh.vertices.detach().cpu():
        vtk_points.InsertNextPoint(v.tolist())

    vtk_cells = vtk.vtkCellArray()
    for f in mesh.faces.detach().cpu().tolist():
        triangle = vtk.vtkTriangle()
        triangle.GetPointIds().SetId(0, f[0])
        triangle.GetPointIds().SetId(1, f[1])
        triangle.GetPointIds().SetId(2, f[2])
        vtk_cells.InsertNextCell(triangle)

    polydata = vtk.vtkPolyData()
    polydata.SetPoints(vtk_points)
    polydata.SetPolys(vtk_cells)

    vtk_normals = vtk.vtkDoubleArray()
    vtk_normals.SetNumberOfComponents(3)
    vtk_normals.SetName("Normals")
    for n in mesh.normals.detach().cpu():
        vtk_normals.InsertNextTuple(n.tolist())
    polydata.GetPointData().SetNormals(vtk_normals)

    writer = vtk.vtkPolyDataWriter()
    writer.SetFileName(str(filename))
    writer.SetInputData(polydata)
    writer.Write()
    logger.debug(f"Mesh saved to {filename}")


def export_surface_mesh(
    filename: str | bytes | os.PathLike[str] | os.PathLike[bytes],
    mesh: MeshBuffers | gus.Faces,
):
    """Write a mesh to disk.

    ``.vtk`` files are written with vtk and keep the vertex normals, all
    other formats go through gustaf's meshio export.
    """
    export_filename = pathlib.Path(filename)
    if not os.path.isdir(export_filename.parent):
        os.makedirs(export_filename.parent)
    ext = export_filename.suffix.lower()
    match ext:
        case ".vtk" if isinstance(mesh, MeshBuffers):
            _export_surface_mesh_vtk(mesh, export_filename)
        case _:
            if isinstance(mesh, MeshBuffers):
                mesh = mesh.to_gus()
            gus.io.meshio.export(str(export_filename), mesh)
