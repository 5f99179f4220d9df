import math

import meshio
import pytest
import torch
import vtk

from IsoMesher.field_primitives import SphereField
from IsoMesher.marching_cubes import create_isosurface_mesh
from IsoMesher.mesh import MeshBuffers, MeshBuilder, export_surface_mesh


@pytest.fixture
def sphere_mesh():
    sphere = SphereField(center=[0.0, 0.0, 0.0], radius=0.5)
    return create_isosurface_mesh(sphere, (-1.0, -1.0, -1.0), extent=2.0, cube_edge=0.2)


def test_builder_indices():
    builder = MeshBuilder()
    assert builder.n_vertices == 0
    assert builder.build().is_empty()

    assert builder.emit_vertex([0.0, 0.0, 0.0], [0.0, 0.0, 1.0]) == 0
    indices = builder.emit_vertices(torch.rand(5, 3), torch.rand(5, 3))
    torch.testing.assert_close(indices, torch.tensor([1, 2, 3, 4, 5]))
    assert builder.n_vertices == 6

    mesh = builder.build()
    assert mesh.n_vertices == 6
    assert mesh.n_triangles == 2
    assert mesh.faces.shape == (2, 3)
    torch.testing.assert_close(mesh.indices, torch.arange(6))


def test_builder_rejects_bad_input():
    builder = MeshBuilder()
    with pytest.raises(ValueError):
        builder.emit_vertices(torch.rand(3, 3), torch.rand(2, 3))
    builder.emit_vertices(torch.rand(2, 3), torch.rand(2, 3))
    # two vertices do not make a triangle
    with pytest.raises(ValueError):
        builder.build()


def test_validate():
    vertices = torch.rand(3, 3)
    MeshBuffers(vertices, torch.rand(3, 3), torch.tensor([0, 1, 2])).validate()
    with pytest.raises(ValueError):
        MeshBuffers(vertices, torch.rand(2, 3), torch.tensor([0, 1, 2])).validate()
    with pytest.raises(ValueError):
        MeshBuffers(vertices, torch.rand(3, 3), torch.tensor([0, 1])).validate()
    with pytest.raises(ValueError):
        MeshBuffers(vertices, torch.rand(3, 3), torch.tensor([0, 1, 3])).validate()


def test_empty_buffers():
    mesh = MeshBuffers.empty(dtype=torch.float64)
    assert mesh.is_empty()
    assert mesh.vertices.dtype == torch.float64
    assert mesh.indices.dtype == torch.int64
    assert mesh.n_triangles == 0
    mesh.validate()
    assert repr(mesh) == "MeshBuffers(n_vertices=0, n_triangles=0)"


def test_vtk_export_keeps_normals(sphere_mesh, tmp_path):
    fname = tmp_path / "out" / "sphere.vtk"
    export_surface_mesh(fname, sphere_mesh)
    assert fname.is_file()

    reader = vtk.vtkPolyDataReader()
    reader.SetFileName(str(fname))
    reader.Update()
    polydata = reader.GetOutput()
    assert polydata.GetNumberOfPoints() == sphere_mesh.n_vertices
    assert polydata.GetNumberOfCells() == sphere_mesh.n_triangles

    normals = polydata.GetPointData().GetNormals()
    assert normals is not None
    assert normals.GetNumberOfTuples() == sphere_mesh.n_vertices
    torch.testing.assert_close(
        torch.tensor(normals.GetTuple3(0), dtype=torch.float32),
        sphere_mesh.normals[0],
        atol=1e-6,
        rtol=0,
    )


def test_meshio_export(sphere_mesh, tmp_path):
    fname = tmp_path / "sphere.obj"
    export_surface_mesh(fname, sphere_mesh)
    mesh = meshio.read(fname)
    assert mesh.points.shape == (sphere_mesh.n_vertices, 3)
    n_cells = sum(len(block.data) for block in mesh.cells)
    assert n_cells == sphere_mesh.n_triangles


def test_export_gustaf_faces(sphere_mesh, tmp_path):
    fname = tmp_path / "sphere_faces.vtk"
    export_surface_mesh(fname, sphere_mesh.to_gus())
    assert fname.is_file()


def test_conversions(sphere_mesh):
    faces = sphere_mesh.to_gus()
    assert faces.vertices.shape == (sphere_mesh.n_vertices, 3)
    assert faces.faces.shape == (sphere_mesh.n_triangles, 3)

    tri = sphere_mesh.to_trimesh()
    assert tri.vertices.shape == (sphere_mesh.n_vertices, 3)
    assert tri.faces.shape == (sphere_mesh.n_triangles, 3)
    # all vertices lie close to the sphere
    assert abs(tri.vertices.max() - 0.5) < 0.05


def test_trimesh_volume_positive():
    sphere = SphereField(center=[0.5, 0.5, 0.5], radius=0.35)
    mesh = create_isosurface_mesh(sphere, (0.0, 0.0, 0.0), extent=1.0, cube_edge=0.1)
    volume = mesh.to_trimesh().volume
    assert volume > 0
    assert volume == pytest.approx(4 / 3 * math.pi * 0.35**3, rel=0.1)


if __name__ == "__main__":
    test_builder_indices()
    test_validate()
    test_empty_buffers()
