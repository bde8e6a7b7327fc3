"""Command-line entry point of the benchmark."""

import sys
import time

from .config import CLIError, SimulationMethod, read_cli
from .initialization import initialize_simulation
from .report import border, center_text, logo, print_input_summary, validate_and_print_results
from .simulation import run_event_based_simulation

VERSION = 13
_WIDTH = 79
_HASH_MODULUS = 999983


def _section(title):
    print(border())
    print(center_text(title, _WIDTH))
    print(border())


def main(argv=None):
    """Run the benchmark and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = read_cli(argv)
    except CLIError as exc:
        print(exc, end="")
        return exc.exit_code

    print(logo(VERSION))
    print(center_text("INPUT SUMMARY", _WIDTH))
    print(border())
    print_input_summary(config)

    _section("INITIALIZATION")
    start = time.perf_counter()
    data = initialize_simulation(config)
    stop = time.perf_counter()
    print(f"Initialization Complete. ({stop - start:.2f} seconds)")

    _section("SIMULATION")
    start = time.perf_counter()
    if config.simulation_method == SimulationMethod.EVENT_BASED:
        if config.kernel_id != 0:
            print(f"Error: No kernel ID {config.kernel_id} found!")
            return 1
        result = run_event_based_simulation(config, data)
    else:
        print(
            "History-based simulation not implemented. Instead,\n"
            'use the event-based method with "-m event" argument.'
        )
        return 1
    stop = time.perf_counter()

    vhash = result.vhash % _HASH_MODULUS
    print("Simulation Complete.")

    _section("RESULTS")
    is_invalid = validate_and_print_results(config, stop - start, vhash, result.kernel_init_time)
    print(border())
    return is_invalid


if __name__ == "__main__":
    sys.exit(main())