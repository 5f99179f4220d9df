from IsoMesher.config import GridConfig
from IsoMesher.field_primitives import MetaBall, MetaBallField
from IsoMesher.marching_cubes import MarchingCubes
from IsoMesher.mesh import export_surface_mesh
import math

field = MetaBallField(
    [
        MetaBall([0.0, 0.0, 0.0], 0.3, orbit_radius=0.35),
        MetaBall([0.0, 0.0, 0.0], 0.2, orbit_radius=0.5, phase=math.pi),
        MetaBall([0.0, 0.0, 0.2], 0.15),
    ],
    time_step=0.1,
)
field.plot_slice(origin=(0, 0, 0))

mesher = MarchingCubes(field, GridConfig(origin=(-1, -1, -1), extent=2.0, cube_edge=0.04))

for i_frame in range(20):
    mesh = mesher.update()
    export_surface_mesh(f"frames/metaballs_{i_frame:02d}.vtk", mesh)

export_surface_mesh("frames/metaballs_last.obj", mesh)
mesh.to_trimesh().show()
