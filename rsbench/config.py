"""Benchmark input parameters and command-line parsing."""

import enum
import re
from dataclasses import dataclass


class HMSize(enum.IntEnum):
    """Hoogenboom-Martin benchmark size."""

    SMALL = 0
    LARGE = 1
    XL = 2
    XXL = 3


class SimulationMethod(enum.IntEnum):
    """How lookups are organised."""

    HISTORY_BASED = 1
    EVENT_BASED = 2


def usage_text():
    """Return the usage message shown on invalid command lines."""
    return (
        "Usage: ./multibench <options>\n"
        "Options include:\n"
        "  -s <size>        Size of H-M Benchmark to run (small, large)\n"
        "  -l <lookups>     Number of Cross-section (XS) lookups per particle history\n"
        "  -p <particles>   Number of particle histories\n"
        "  -P <poles>       Average Number of Poles per Nuclide\n"
        "  -W <poles>       Average Number of Windows per Nuclide\n"
        "  -d               Disables Temperature Dependence (Doppler Broadening)\n"
        "Default is equivalent to: -s large -l 34 -p 300000 -P 1000 -W 100\n"
        "See readme for full description of default run values\n"
    )


class CLIError(ValueError):
    """Raised for an invalid command line; carries the usage text and exit code."""

    exit_code = 4

    def __init__(self, message=None):
        super().__init__(message if message is not None else usage_text())


@dataclass
class Input:
    """Parameters of one benchmark run."""

    nthreads: int = 1
    n_nuclides: int = 355
    lookups: int = 34
    hm: HMSize = HMSize.LARGE
    avg_n_poles: int = 1000
    avg_n_windows: int = 100
    num_l: int = 4
    doppler: bool = True
    particles: int = 300000
    simulation_method: SimulationMethod = SimulationMethod.HISTORY_BASED
    kernel_id: int = 0


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text):
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_cli(argv):
    """Parse command-line arguments (without the program name) into an Input."""
    args = iter(argv)
    config = Input()
    default_lookups = True
    default_particles = True

    def value():
        try:
            return next(args)
        except StopIteration:
            raise CLIError() from None

    for arg in args:
        if arg == "-m":
            method = value()
            if method == "history":
                config.simulation_method = SimulationMethod.HISTORY_BASED
            elif method == "event":
                config.simulation_method = SimulationMethod.EVENT_BASED
                if default_lookups and default_particles:
                    config.lookups *= config.particles
                    config.particles = 0
            else:
                raise CLIError()
        elif arg == "-l":
            config.lookups = _atoi(value())
            default_lookups = False
        elif arg == "-p":
            config.particles = _atoi(value())
            default_particles = False
        elif arg == "-n":
            config.n_nuclides = _atoi(value())
        elif arg == "-s":
            size = value()
            if size == "small":
                config.hm = HMSize.SMALL
            elif size == "large":
                config.hm = HMSize.LARGE
            else:
                raise CLIError()
        elif arg == "-d":
            config.doppler = False
        elif arg == "-W":
            config.avg_n_windows = _atoi(value())
        elif arg == "-P":
            config.avg_n_poles = _atoi(value())
        elif arg == "-k":
            config.kernel_id = _atoi(value())
        else:
            raise CLIError()

    if (
        config.nthreads < 1
        or config.n_nuclides < 1
        or config.lookups < 1
        or config.avg_n_poles < 1
        or config.avg_n_windows < 1
    ):
        raise CLIError()

    if config.hm == HMSize.SMALL:
        config.n_nuclides = 68

    return config