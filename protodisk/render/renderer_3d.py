"""3D renderer using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D
from matplotlib.figure import Figure
from typing import Optional, Tuple
from protodisk.render.base import Renderer


class Renderer3D(Renderer):
    """3D point-cloud renderer: white particles, yellow protostar at the origin."""

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        extent: Optional[float] = None,
        elevation: float = 90.0,
        azimuth: float = -90.0,
        point_size: float = 0.5,
        point_alpha: float = 0.7,
        protostar_size: float = 80.0,
        color_by_speed: bool = False,
        render_every_k_steps: int = 1,
        show_window: bool = True
    ):
        """Initialize 3D renderer.

        Args:
            figsize: Figure size
            dpi: Dots per inch
            extent: Half-width of the view box; derived from the first frame if None
            elevation: Camera elevation angle (90 looks down the spin axis)
            azimuth: Camera azimuth angle
            point_size: Marker size of disk particles
            point_alpha: Opacity of disk particles
            protostar_size: Marker size of the central body
            color_by_speed: Color particles by speed instead of plain white
            render_every_k_steps: Draw only every k-th call to render()
            show_window: Open an interactive window (False for headless use)
        """
        self.initialized = False
        self.figsize = figsize
        self.dpi = dpi
        self.extent = extent
        self.elevation = elevation
        self.azimuth = azimuth
        self.point_size = point_size
        self.point_alpha = point_alpha
        self.protostar_size = protostar_size
        self.color_by_speed = color_by_speed
        self.render_every_k_steps = max(1, render_every_k_steps)
        self.show_window = show_window
        self._calls = 0
        self.frame_count = 0
        self.fig: Optional[Figure] = None
        self.ax: Optional[Axes3D] = None
        self.scatter = None

    def _initialize(self, positions: np.ndarray):
        """Initialize plot if not already done."""
        if self.initialized:
            return

        self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        self.ax = self.fig.add_subplot(111, projection='3d')
        self.fig.patch.set_facecolor('black')
        self.ax.set_facecolor('black')
        self.ax.set_axis_off()

        if self.extent is None:
            radii = np.linalg.norm(positions, axis=1) if positions.shape[0] else np.zeros(1)
            self.extent = max(float(np.max(radii)), 1.0)
        e = self.extent
        self.ax.set_xlim(-e, e)
        self.ax.set_ylim(-e, e)
        self.ax.set_zlim(-e, e)
        self.ax.view_init(elev=self.elevation, azim=self.azimuth)

        # Central body is fixed, draw it once
        self.ax.scatter([0.0], [0.0], [0.0], c='yellow', s=self.protostar_size, depthshade=False)

        if self.show_window:
            plt.show(block=False)
            plt.pause(0.1)

        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            self.scatter = None
            return False
        return True

    def render(self, positions: np.ndarray, velocities: Optional[np.ndarray] = None):
        """Render current frame."""
        # Window closed by the user - stop drawing
        if self.initialized and not self._is_figure_open():
            return
        self._calls += 1
        if (self._calls - 1) % self.render_every_k_steps != 0:
            return

        self._initialize(positions)

        if self.scatter is not None:
            self.scatter.remove()

        if self.color_by_speed and velocities is not None:
            speed = np.linalg.norm(velocities, axis=1)
            colors = (speed - speed.min()) / (speed.max() - speed.min() + 1e-10)
            self.scatter = self.ax.scatter(
                positions[:, 0], positions[:, 1], positions[:, 2],
                c=colors, cmap=plt.cm.plasma, s=self.point_size,
                alpha=self.point_alpha, edgecolors='none'
            )
        else:
            self.scatter = self.ax.scatter(
                positions[:, 0], positions[:, 1], positions[:, 2],
                c='white', s=self.point_size,
                alpha=self.point_alpha, edgecolors='none'
            )
        self.frame_count += 1

        if self.show_window:
            plt.draw()
            plt.pause(0.001)
        else:
            self.fig.canvas.draw_idle()

    def set_view(self, elevation: float, azimuth: float):
        """Set camera view angles.

        Args:
            elevation: Elevation angle
            azimuth: Azimuth angle
        """
        self.elevation = elevation
        self.azimuth = azimuth
        if self.ax is not None:
            self.ax.view_init(elev=elevation, azim=azimuth)

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.scatter = None
            self.initialized = False
