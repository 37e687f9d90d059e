"""Simulation stepper: one integrator step per external tick."""

from typing import Optional, Callable
import time
from protodisk.physics.diagnostics import Diagnostics
from protodisk.physics.integrators.base import Integrator
from protodisk.physics.integrators.symplectic_euler import SemiImplicitEulerIntegrator
from protodisk.physics.parameters import PhysicalParameters
from protodisk.physics.state import ParticleState
from protodisk.render.base import Renderer


class SimulationStepper:
    """Drives the integrator and notifies the render collaborator.

    The host calls ``tick()`` at whatever cadence it likes (once per display
    frame, or in a tight loop). The stepper has no notion of frames, only of
    discrete steps of size ``params.dt``. Ticks are strictly sequential.
    """

    def __init__(
        self,
        state: ParticleState,
        params: PhysicalParameters,
        integrator: Optional[Integrator] = None,
        renderer: Optional[Renderer] = None
    ):
        """Initialize stepper.

        Args:
            state: Particle state, owned by the stepper from now on
            params: Physical parameters (G, M, dt are used each tick)
            integrator: Integrator to use (default: semi-implicit Euler)
            renderer: Optional render collaborator, given read-only buffers
        """
        self.state = state
        self.params = params
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self.renderer = renderer

        self.time = 0.0
        self.step_count = 0
        self.paused = False

        # Profiling: last tick timing (ms)
        self._last_integrator_ms: Optional[float] = None
        self._last_render_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.debug_table: bool = False
        self.debug_table_interval: int = 100

    def set_profiling(self, enabled: bool = True):
        """Enable or disable tick timing (integrator ms, render ms)."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last tick timing in ms: integrator_ms, render_ms."""
        return {
            "integrator_ms": self._last_integrator_ms,
            "render_ms": self._last_render_ms,
        }

    def tick(self):
        """Advance one step, then signal "positions changed" to the renderer."""
        if self.paused:
            return

        if self._profile:
            t0 = time.perf_counter()
        self.integrator.step(self.state, self.params.G, self.params.M, self.params.dt)
        if self._profile:
            t1 = time.perf_counter()

        self.time += self.params.dt
        self.step_count += 1

        if self.state.needs_update:
            if self.renderer is not None:
                self.renderer.render(self.state.positions_view(), self.state.velocities_view())
            self.state.needs_update = False
        if self._profile:
            t2 = time.perf_counter()
            self._last_integrator_ms = (t1 - t0) * 1000.0
            self._last_render_ms = (t2 - t1) * 1000.0

        if self.debug_table and (self.step_count % self.debug_table_interval == 0):
            self._log_stability_table()

        if self.on_step_callback:
            self.on_step_callback(self)

    def _log_stability_table(self):
        """Log K, U, E, Lz, bound fraction and median radius."""
        diagnostics = Diagnostics(self.params.G, self.params.M)
        K, U, E = diagnostics.compute_energies(self.state)
        Lz = diagnostics.compute_angular_momentum_z(self.state)
        bound_frac = diagnostics.compute_bound_fraction(self.state)
        r_med = diagnostics.compute_radius_stats(self.state)["r_med"]
        print(
            f"[Diag] step={self.step_count} K={K:.4f} U={U:.4f} E={E:.4f} "
            f"Lz={Lz:.4f} bound={bound_frac:.2f} r_med={r_med:.3f}"
        )

    def run(self, n_steps: int):
        """Run simulation for specified number of ticks.

        Args:
            n_steps: Number of ticks to run
        """
        for _ in range(n_steps):
            if self.paused:
                return
            self.tick()

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_integrator(self, integrator: Integrator):
        """Set integrator.

        Args:
            integrator: New integrator
        """
        self.integrator = integrator

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, time, step_count); the arrays are
            read-only views of the live buffers
        """
        return self.state.positions_view(), self.state.velocities_view(), self.time, self.step_count
