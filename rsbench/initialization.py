"""Generation of the synthetic resonance data used by the benchmark."""

from dataclasses import dataclass

from .complexmath import c_mul
from .materials import Materials, get_materials
from .rng import LCG

INITIALIZATION_SEED = 42

# Pole scaling factor: biases lookups so that ~99.5% hit the fast
# Faddeeva region.
_POLE_SCALE = 152.5


@dataclass(frozen=True)
class Pole:
    """Multipole parameters of a single resonance."""

    mp_ea: complex
    mp_rt: complex
    mp_ra: complex
    mp_rf: complex
    l_value: int


@dataclass(frozen=True)
class Window:
    """Background coefficients and the inclusive pole range of one window."""

    t: float
    a: float
    f: float
    start: int
    end: int


@dataclass
class SimulationData:
    """All read-only data consumed by the cross-section lookups."""

    materials: Materials
    n_poles: list
    n_windows: list
    poles: list
    windows: list
    pseudo_k0rs: list

    @property
    def num_nucs(self):
        return self.materials.num_nucs

    @property
    def mats(self):
        return self.materials.mats

    @property
    def concs(self):
        return self.materials.concs

    @property
    def max_num_nucs(self):
        return self.materials.max_num_nucs

    @property
    def max_num_poles(self):
        return max(self.n_poles)

    @property
    def max_num_windows(self):
        return max(self.n_windows)


def _distribute(n_nuclides, average, rng):
    counts = [1] * n_nuclides
    for _ in range(average * n_nuclides - n_nuclides):
        counts[rng.random_int() % n_nuclides] += 1
    return counts


def generate_n_poles(input, rng):
    """Return the number of poles per nuclide; every nuclide gets at least one."""
    return _distribute(input.n_nuclides, input.avg_n_poles, rng)


def generate_n_windows(input, rng):
    """Return the number of windows per nuclide; every nuclide gets at least one."""
    return _distribute(input.n_nuclides, input.avg_n_windows, rng)


def _scaled(rng):
    r = rng.random_double()
    im = rng.random_double()
    return complex(_POLE_SCALE * r, im)


def _make_pole(rng, num_l):
    scale = complex(_POLE_SCALE, 0.0)
    r = rng.random_double()
    im = rng.random_double()
    mp_ea = c_mul(scale, complex(r, im))
    mp_rt = _scaled(rng)
    mp_ra = _scaled(rng)
    mp_rf = _scaled(rng)
    l_value = rng.random_int() % num_l
    return Pole(mp_ea=mp_ea, mp_rt=mp_rt, mp_ra=mp_ra, mp_rf=mp_rf, l_value=l_value)


def generate_poles(input, n_poles, rng):
    """Return, per nuclide, its list of randomly generated poles."""
    return [[_make_pole(rng, input.num_l) for _ in range(count)] for count in n_poles]


def _nuclide_windows(n_window, n_pole, rng):
    space, remainder = divmod(n_pole, n_window)
    windows = []
    ctr = 0
    for j in range(n_window):
        t = rng.random_double()
        a = rng.random_double()
        f = rng.random_double()
        start = ctr
        end = ctr + space - 1
        ctr += space
        if j < remainder:
            ctr += 1
            end += 1
        windows.append(Window(t=t, a=a, f=f, start=start, end=end))
    return windows


def generate_window_params(input, n_windows, n_poles, rng):
    """Return, per nuclide, windows that split its poles into contiguous ranges."""
    return [
        _nuclide_windows(n_window, n_pole, rng)
        for n_window, n_pole in zip(n_windows[: input.n_nuclides], n_poles)
    ]


def generate_pseudo_k0rs(input, rng):
    """Return per-nuclide 0K l-value data, ``num_l`` values per nuclide."""
    return [
        [rng.random_double() for _ in range(input.num_l)]
        for _ in range(input.n_nuclides)
    ]


def initialize_simulation(input):
    """Generate the complete, deterministic data set for a run."""
    rng = LCG(INITIALIZATION_SEED)

    print("Loading Hoogenboom-Martin material data...")
    materials = get_materials(input, rng)

    print("Generating resonance distributions...")
    n_poles = generate_n_poles(input, rng)

    print("Generating window distributions...")
    n_windows = generate_n_windows(input, rng)

    print("Generating resonance parameter grid...")
    poles = generate_poles(input, n_poles, rng)

    print("Generating window parameter grid...")
    windows = generate_window_params(input, n_windows, n_poles, rng)

    print("Generating 0K l_value data...")
    pseudo_k0rs = generate_pseudo_k0rs(input, rng)

    return SimulationData(
        materials=materials,
        n_poles=n_poles,
        n_windows=n_windows,
        poles=poles,
        windows=windows,
        pseudo_k0rs=pseudo_k0rs,
    )