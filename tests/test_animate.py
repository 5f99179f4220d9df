import json

import vtk

from IsoMesher.animate import main


def test_animate_frames(tmp_path):
    config_file = tmp_path / "metaballs.json"
    with open(config_file, "w") as f:
        json.dump(
            {"Origin": [-1.0, -1.0, -1.0], "Extent": 2.0, "CubeEdge": 0.2},
            f,
        )

    written = main(config_file, tmp_path / "frames", n_frames=3)
    assert [p.name for p in written] == [
        "frame_0000.vtk",
        "frame_0001.vtk",
        "frame_0002.vtk",
    ]

    n_points = []
    for fname in written:
        assert fname.is_file()
        reader = vtk.vtkPolyDataReader()
        reader.SetFileName(str(fname))
        reader.Update()
        n_points.append(reader.GetOutput().GetNumberOfPoints())
    assert all(n > 0 for n in n_points)


def test_animate_format(tmp_path):
    config_file = tmp_path / "metaballs.json"
    with open(config_file, "w") as f:
        json.dump(
            {
                "Origin": [0.0, 0.0, 0.0],
                "Extent": 1.0,
                "CubeEdge": 0.1,
                "MetaBalls": [{"Center": [0.5, 0.5, 0.5], "Radius": 0.25}],
            },
            f,
        )
    written = main(config_file, tmp_path, n_frames=1, file_format="obj")
    assert written == [tmp_path / "frame_0000.obj"]
    assert written[0].is_file()
