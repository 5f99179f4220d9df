import datetime
import logging
import os
import pathlib
import time

from IsoMesher.config import load_grid_config, load_metaball_field, load_specifications
from IsoMesher.marching_cubes import MarchingCubes
from IsoMesher.mesh import export_surface_mesh
import IsoMesher

logger = logging.getLogger(IsoMesher.__name__)


def main(config_file, output_directory, n_frames, file_format=".vtk"):
    """Mesh an animated metaball field frame by frame and export every frame."""
    specs = load_specifications(config_file)
    config = load_grid_config(config_file)
    field = load_metaball_field(specs)

    output_directory = pathlib.Path(output_directory)
    if not os.path.isdir(output_directory):
        os.makedirs(output_directory)
    if not file_format.startswith("."):
        file_format = "." + file_format

    mesher = MarchingCubes(field, config)
    written = []
    start = time.time()
    for i_frame in range(n_frames):
        mesh = mesher.update()
        fname = output_directory / f"frame_{i_frame:04d}{file_format}"
        export_surface_mesh(fname, mesh)
        written.append(fname)

        avg_time_per_frame = (time.time() - start) / (i_frame + 1)
        remaining = avg_time_per_frame * (n_frames - i_frame - 1)
        time_string = str(datetime.timedelta(seconds=round(remaining)))
        logger.info(
            f"Frame {i_frame + 1}/{n_frames} [{(i_frame + 1) / n_frames * 100:.2f}%]: "
            f"{mesh.n_triangles} triangles, {time_string} remaining "
            f"({avg_time_per_frame:.2f}s/frame)"
        )
    return written


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--config", "-c", type=str, required=True)
    parser.add_argument("--output_directory", "-o", type=str, default="frames")
    parser.add_argument("--n_frames", "-n", type=int, default=100)
    parser.add_argument("--format", "-f", type=str, default=".vtk")

    args = parser.parse_args()

    main(args.config, args.output_directory, args.n_frames, args.format)
