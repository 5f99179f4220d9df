"""
IsoMesher - Marching Cubes Isosurface Extraction for Animated Scalar Fields
===========================================================================

IsoMesher turns a scalar field into a triangle mesh of its zero level set with
the marching cubes algorithm. The mesh is rebuilt from scratch on every update
cycle, so time dependent fields such as moving metaballs can be meshed frame
by frame.

Key Components
--------------

Scalar Fields
    - ``IsoMesher.field``: Field interface (``evaluate``/``advance``) and
      combinators
    - ``IsoMesher.field_primitives``: Planes, spheres and animated metaballs

Isosurface Extraction
    - ``IsoMesher.tables``: Marching cubes case tables
    - ``IsoMesher.marching_cubes``: Cube classification, edge interpolation
      and grid traversal

Output
    - ``IsoMesher.mesh``: Mesh buffers, conversion and export

Utilities
    - ``IsoMesher.config``: Grid configuration and JSON specifications
    - ``IsoMesher.animate``: Frame by frame export of an animated field
    - ``IsoMesher.plotting``: Field slice plots
    - ``IsoMesher.utils``: Logging configuration

Examples
--------
Mesh a sphere::

    from IsoMesher.field_primitives import SphereField
    from IsoMesher.marching_cubes import create_isosurface_mesh

    sphere = SphereField(center=[0, 0, 0], radius=0.5)
    mesh = create_isosurface_mesh(sphere, origin=(-1, -1, -1), extent=2.0, cube_edge=0.05)

Animate two metaballs::

    from IsoMesher.config import GridConfig
    from IsoMesher.field_primitives import MetaBall, MetaBallField
    from IsoMesher.marching_cubes import MarchingCubes

    field = MetaBallField([MetaBall([0, 0, 0], 0.3, orbit_radius=0.4)])
    mesher = MarchingCubes(field, GridConfig((-1, -1, -1), 2.0, 0.05))
    for _ in range(10):
        mesh = mesher.update()
"""

import IsoMesher.utils

IsoMesher.utils.configure_logging()

__version__ = "0.1.0"
