"""
Visualization and Plotting Utilities
=====================================

Contour plots of scalar fields on axis-aligned planes, handy to check where
the zero level set lies before meshing it.

Functions
---------
plot_slice
    Create a contour plot of a field on a 2D plane slice.
generate_plane_points
    Generate a regular grid of points on a plane in 3D space.
"""

import matplotlib.pyplot as plt
import numpy as np
import torch


def plot_slice(
    fun,
    origin=(0, 0, 0),
    normal=(0, 0, 1),
    res=(100, 100),
    ax=None,
    xlim=(-1, 1),
    ylim=(-1, 1),
    clim=(-1, 1),
    cmap="seismic",
    show_zero_level=True,
):
    """Plot a 2D slice through a scalar field as a contour plot.

    Parameters
    ----------
    fun : callable
        The field to visualize. Should accept a torch.Tensor
        of shape (N, 3) and return values of shape (N, 1).
    origin : tuple of float, default (0, 0, 0)
        A point on the slice plane.
    normal : tuple of float, default (0, 0, 1)
        Normal vector of the slice plane. Only axis-aligned planes
        are supported: (1,0,0), (0,1,0), or (0,0,1).
    res : tuple of int, default (100, 100)
        Resolution of the slice grid (num_points_u, num_points_v).
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates a new figure and shows it.
    xlim, ylim : tuple of float, default (-1, 1)
        Range along the first and second plane axis.
    clim : tuple of float, default (-1, 1)
        Color map limits.
    cmap : str, default 'seismic'
        Matplotlib colormap name.
    show_zero_level : bool, default True
        If True, draws a black contour line at value 0 (the isosurface).

    Returns
    -------
    fig, ax : matplotlib.figure.Figure, matplotlib.axes.Axes
        Only returned if ax was None (i.e., a new figure was created).
    """
    plt_show = False
    if ax is None:
        fig, ax = plt.subplots()
        plt_show = True

    points, u, v = generate_plane_points(origin, normal, res, xlim, ylim)

    points = torch.from_numpy(points).to(torch.float32)
    values = fun(points).reshape((res[0], res[1]))
    X = u.reshape((res[0], res[1]))
    Y = v.reshape((res[0], res[1]))
    if isinstance(values, torch.Tensor):
        values = values.detach().cpu().numpy()

    cbar = ax.contourf(X, Y, values, cmap=cmap, levels=10)
    if show_zero_level and values.min() < 0 < values.max():
        ax.contour(X, Y, values, levels=[0], colors="black", linewidths=0.5)
    cbar.set_clim(clim[0], clim[1])
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_aspect(1)
    if plt_show:
        plt.show()
        return fig, ax


def generate_plane_points(origin, normal, res, xlim, ylim):
    """Generate evenly spaced points on an axis-aligned plane.

    Returns
    -------
    points : np.ndarray of shape (num_points_u * num_points_v, 3)
    u : np.ndarray of shape (num_points_u * num_points_v,)
    v : np.ndarray of shape (num_points_u * num_points_v,)

    Raises
    ------
    NotImplementedError
        If normal is not axis-aligned.

    Notes
    -----
    - Normal [0,0,1] (XY plane): u=[1,0,0], v=[0,1,0]
    - Normal [0,1,0] (XZ plane): u=[1,0,0], v=[0,0,1]
    - Normal [1,0,0] (YZ plane): u=[0,1,0], v=[0,0,1]
    """
    normal = np.array(normal, dtype=float)
    normal = normal / np.linalg.norm(normal)
    origin = np.array(origin, dtype=float)
    if np.allclose(normal, [0, 0, 1]):
        u = np.array([1, 0, 0])
        v = np.array([0, 1, 0])
    elif np.allclose(normal, [0, 1, 0]):
        u = np.array([1, 0, 0])
        v = np.array([0, 0, 1])
    elif np.allclose(normal, [1, 0, 0]):
        u = np.array([0, 1, 0])
        v = np.array([0, 0, 1])
    else:
        raise NotImplementedError(
            "Normal vector other than [1,0,0], [0,1,0] and [0,0,1] not supported yet."
        )

    u_coords = np.linspace(xlim[0], xlim[1], res[0])
    v_coords = np.linspace(ylim[0], ylim[1], res[1])
    uu, vv = np.meshgrid(u_coords, v_coords, indexing="ij")
    uu = uu.reshape(-1)
    vv = vv.reshape(-1)

    points = origin + uu[:, None] * u[None, :] + vv[:, None] * v[None, :]
    return points, uu, vv
