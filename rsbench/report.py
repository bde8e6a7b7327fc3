"""Console formatting of the benchmark banner, input summary and results."""

from .config import HMSize, SimulationMethod

_WIDTH = 79

_ART = (
    "                    _____   _____ ____                  _     ",
    "                   |  __ \\ / ____|  _ \\                | |    ",
    "                   | |__) | (___ | |_) | ___ _ __   ___| |__  ",
    "                   |  _  / \\___ \\|  _ < / _ \\ '_ \\ / __| '_ \\ ",
    "                   | | \\ \\ ____) | |_) |  __/ | | | (__| | | |",
    "                   |_|  \\_\\_____/|____/ \\___|_| |_|\\___|_| |_|",
    "",
)

# In-memory sizes of the data records used for the memory estimate.
_POLE_BYTES = 72
_WINDOW_BYTES = 32
_POINTER_BYTES = 8
_DOUBLE_BYTES = 8
_INT_BYTES = 4

_EXPECTED_CHECKSUMS = {
    (SimulationMethod.HISTORY_BASED, HMSize.LARGE): 351485,
    (SimulationMethod.HISTORY_BASED, HMSize.SMALL): 879693,
    (SimulationMethod.EVENT_BASED, HMSize.LARGE): 358389,
    (SimulationMethod.EVENT_BASED, HMSize.SMALL): 880018,
}


def border():
    """Return the horizontal rule separating sections."""
    return "=" * 80


def center_text(s, width):
    """Return ``s`` preceded by enough spaces to centre it in ``width`` columns."""
    gap = width - len(s)
    half = gap // 2 if gap >= 0 else -((-gap) // 2)
    return " " * max(half + 1, 0) + s


def fancy_int(a):
    """Return ``a`` with comma-separated thousands."""
    if a < 1000:
        return str(a)
    return f"{a:,}"


def logo(version):
    """Return the program banner."""
    lines = [border(), *_ART, border(), center_text(f"Version: {version}", _WIDTH), border()]
    return "\n".join(lines)


def get_mem_estimate(input):
    """Estimate the bytes needed for the generated resonance data."""
    n = input.n_nuclides
    poles = n * input.avg_n_poles * _POLE_BYTES + n * _POINTER_BYTES
    windows = n * input.avg_n_windows * _WINDOW_BYTES + n * _POINTER_BYTES
    pseudo_k0rs = n * input.num_l * _DOUBLE_BYTES + n * _DOUBLE_BYTES
    other = n * 2 * _INT_BYTES
    return poles + windows + pseudo_k0rs + other


def print_input_summary(input):
    """Print the parameters of the run."""
    mem = get_mem_estimate(input)
    if input.simulation_method == SimulationMethod.EVENT_BASED:
        print("Simulation Method:           Event Based")
    else:
        print("Simulation Method:           History Based")
    print("Materials:                   12")
    size = "Small" if input.hm == HMSize.SMALL else "Large"
    print(f"H-M Benchmark Size:          {size}")
    print(f"Temperature Dependence:      {'ON' if input.doppler else 'OFF'}")
    print(f"Total Nuclides:              {input.n_nuclides}")
    print(f"Avg Poles per Nuclide:       {fancy_int(input.avg_n_poles)}")
    print(f"Avg Windows per Nuclide:     {fancy_int(input.avg_n_windows)}")

    lookups = input.lookups
    if input.simulation_method == SimulationMethod.HISTORY_BASED:
        print(f"Particles:                   {fancy_int(input.particles)}")
        print(f"XS Lookups per Particle:     {fancy_int(input.lookups)}")
        lookups *= input.particles
    print(f"Total XS Lookups:            {fancy_int(lookups)}")
    print(f"Est. Memory Usage (MB):      {mem / 1024.0 / 1024.0:.1f}")


def _rate(lookups, seconds):
    return int(lookups / seconds) if seconds > 0 else 0


def validate_and_print_results(input, runtime, vhash, kernel_init_time):
    """Print timing and checksum; return 0 if the checksum is valid, else 1."""
    if input.simulation_method == SimulationMethod.HISTORY_BASED:
        lookups = input.lookups * input.particles
    else:
        lookups = input.lookups

    kernel_runtime = runtime - kernel_init_time
    print("Total Time Statistics (Initialization + Simulation Kernel)")
    print(f"Runtime:               {runtime:.3f} seconds")
    print(f"Lookups:               {fancy_int(lookups)}")
    print(f"Lookups/s:             {fancy_int(_rate(lookups, runtime))}")
    print("Simulation Kernel Only Statistics")
    print(f"Runtime:               {kernel_runtime:.3f} seconds")
    print(f"Lookups/s:             {fancy_int(_rate(lookups, kernel_runtime))}")

    if input.hm not in (HMSize.LARGE, HMSize.SMALL):
        return 1
    expected = _EXPECTED_CHECKSUMS.get((input.simulation_method, input.hm))
    if vhash == expected:
        print(f"Verification checksum: {vhash} (Valid)")
        return 0
    print(f"Verification checksum: {vhash} (WARNING - INAVALID CHECKSUM!)")
    return 1