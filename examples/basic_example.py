"""Basic example of running the protoplanetary disk simulation."""

from protodisk import PhysicalParameters, ProtoplanetaryDisk, SimulationStepper
from protodisk.physics.diagnostics import Diagnostics


def main():
    """Run a small disk for a few hundred steps and report energy drift."""
    params = PhysicalParameters(G=10.0, M=20.0, dt=0.1, max_radius=200.0, thickness=0.05)

    # Generate initial conditions
    preset = ProtoplanetaryDisk(n_particles=5000, seed=42, params=params)
    state = preset.generate()

    # Headless stepper: no render collaborator attached
    stepper = SimulationStepper(state, params)
    diagnostics = Diagnostics(params.G, params.M)

    _, _, E0 = diagnostics.compute_energies(state)
    print("Running simulation...")
    print(f"Initial energy: {E0:.6f}")

    for step in range(500):
        stepper.tick()
        if step % 100 == 0:
            _, _, energy = diagnostics.compute_energies(state)
            print(f"Step {step}: Time={stepper.time:.2f}, Energy={energy:.6f}")

    _, _, E = diagnostics.compute_energies(state)
    print(f"Final energy: {E:.6f}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
