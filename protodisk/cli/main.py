"""CLI main entry point."""

import argparse
from dataclasses import fields
import numpy as np
from protodisk.physics.diagnostics import Diagnostics, relative_drift
from protodisk.physics.integrators import INTEGRATORS, get_integrator
from protodisk.physics.simulator import SimulationStepper
from protodisk.presets.protoplanetary_disk import ProtoplanetaryDisk
from protodisk.render.renderer_3d import Renderer3D
from protodisk.utils.config import Config, load_config, save_config
from protodisk.utils.reproducibility import make_rng, set_all_seeds


def _print_row(step, t, K, U, E, Lz, r_med, dE):
    print(f"{step:<8} {t:<10.2f} {K:<14.4f} {U:<14.4f} {E:<14.4f} {Lz:<14.4f} {r_med:<10.3f} {dE:<10.4f}%")


def run_simulation(config: Config):
    """Run a simulation described by ``config``."""
    params = config.physical_parameters()
    integrator = get_integrator(config.integrator)

    if config.seed is not None:
        set_all_seeds(config.seed)

    preset = ProtoplanetaryDisk(
        n_particles=config.particle_count,
        rng=make_rng(config.seed),
        params=params,
        dtype=np.dtype(config.dtype),
    )
    state = preset.generate()

    renderer = None
    if config.render:
        renderer = Renderer3D(
            extent=params.max_radius,
            elevation=config.elevation,
            azimuth=config.azimuth,
            render_every_k_steps=config.render_every,
        )

    stepper = SimulationStepper(state, params, integrator=integrator, renderer=renderer)
    diagnostics = Diagnostics(params.G, params.M)

    print(f"Running simulation: {preset.name} with {state.particle_count} particles "
          f"({state.protostar_count} protostar, {state.disk_count} disk)")
    print(f"Integrator: {integrator.name}, G: {params.G}, M: {params.M}, dt: {params.dt}, "
          f"R_max: {params.max_radius}, thickness: {params.thickness}")

    K0, U0, E0 = diagnostics.compute_energies(state)
    Lz0 = diagnostics.compute_angular_momentum_z(state)
    r_med0 = diagnostics.compute_radius_stats(state)["r_med"]

    print(f"{'Step':<8} {'Time':<10} {'K':<14} {'U':<14} {'E':<14} {'Lz':<14} {'r_med':<10} {'dE/E0':<10}")
    print("-" * 100)
    _print_row(0, 0.0, K0, U0, E0, Lz0, r_med0, 0.0)

    try:
        for step in range(1, config.steps + 1):
            stepper.tick()

            if step % config.debug_every == 0:
                K, U, E = diagnostics.compute_energies(state)
                Lz = diagnostics.compute_angular_momentum_z(state)
                r_med = diagnostics.compute_radius_stats(state)["r_med"]
                dE = relative_drift(E0, E) * 100
                _print_row(step, stepper.time, K, U, E, Lz, r_med, dE)
    finally:
        if renderer:
            renderer.close()

    print("Simulation complete!")
    return stepper


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Protodisk - protoplanetary disk test-particle simulation")

    parser.add_argument('--config', type=str, default=None,
                        help='Load settings from a .json or .yaml file (flags override it)')
    parser.add_argument('--save-config', type=str, default=None,
                        help='Write the effective configuration to a .json or .yaml file')

    # Simulation parameters
    parser.add_argument('--particles', dest='particle_count', type=int, default=None,
                        help='Number of particles (default: 30000)')
    parser.add_argument('--protostar-fraction', type=float, default=None,
                        help='Fraction of particles collapsed into the protostar (default: 0.05)')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant (default: 10)')
    parser.add_argument('--M', type=float, default=None,
                        help='Central protostar mass (default: 20)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step (default: 0.1)')
    parser.add_argument('--max-radius', type=float, default=None,
                        help='Radius of the initial particle cloud (default: 200)')
    parser.add_argument('--thickness', type=float, default=None,
                        help='Vertical velocity spread as a fraction of orbital speed (default: 0.05)')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of simulation steps (default: 1000)')
    parser.add_argument('--integrator', type=str, default=None,
                        choices=list(INTEGRATORS.keys()),
                        help='Numerical integrator (default: symplectic_euler)')
    parser.add_argument('--dtype', type=str, default=None, choices=['float32', 'float64'],
                        help='Floating point precision of particle buffers')
    parser.add_argument('--debug-every', type=int, default=None,
                        help='Print diagnostics every N steps (default: 100)')

    # Rendering
    parser.add_argument('--render', action='store_true', default=None,
                        help='Enable real-time rendering')
    parser.add_argument('--render-every', type=int, default=None,
                        help='Render every N steps')
    parser.add_argument('--elevation', type=float, default=None,
                        help='Camera elevation angle in degrees')
    parser.add_argument('--azimuth', type=float, default=None,
                        help='Camera azimuth angle in degrees')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Merge a config file (if any) with explicitly given command line flags."""
    config = load_config(args.config) if args.config else Config()
    overrides = {}
    for field in fields(Config):
        value = getattr(args, field.name, None)
        if value is not None:
            overrides[field.name] = value
    if overrides:
        merged = {field.name: getattr(config, field.name) for field in fields(Config)}
        merged.update(overrides)
        config = Config(**merged)
    return config


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
        config.physical_parameters()
        get_integrator(config.integrator)
    except ValueError as exc:
        parser.error(str(exc))

    if args.save_config:
        save_config(config, args.save_config)
        print(f"Configuration saved to {args.save_config}")

    run_simulation(config)


if __name__ == '__main__':
    main()
