"""Event-based cross-section lookup kernel."""

import math
import sys
import time
from dataclasses import dataclass

from .complexmath import c_div, c_mul, fast_nuclear_w
from .rng import LCG, fast_forward_lcg

STARTING_SEED = 1070

# Fraction (by volume) of each material in the core.
_MATERIAL_DISTRIBUTION = (
    0.140,  # fuel
    0.052,  # cladding
    0.275,  # cold, borated water
    0.134,  # hot, borated water
    0.154,  # RPV
    0.064,  # lower, radial reflector
    0.066,  # upper reflector / top plate
    0.055,  # bottom plate
    0.008,  # bottom nozzle
    0.015,  # top nozzle
    0.025,  # top of fuel assemblies
    0.013,  # bottom of fuel assemblies
)

# Cumulative thresholds; the running sum for material i covers entries i..1,
# so material 0 is only reached when no threshold is exceeded.
_THRESHOLDS = tuple(
    sum(reversed(_MATERIAL_DISTRIBUTION[1 : i + 1]))
    for i in range(len(_MATERIAL_DISTRIBUTION))
)

_DOPPLER = complex(0.5, 0.0)
_I = complex(0.0, 1.0)


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of a simulation run."""

    vhash: int
    kernel_init_time: float


def pick_mat(rng):
    """Pick a material index according to the core volume fractions."""
    roll = rng.random_double()
    return next((i for i, limit in enumerate(_THRESHOLDS) if roll < limit), 0)


def calculate_sig_t(nuc, e, input, pseudo_k0rs):
    """Return the four complex sigma-T phase factors of a nuclide at energy ``e``."""
    sqrt_e = math.sqrt(e)
    factors = []
    for i, k0 in enumerate(pseudo_k0rs[nuc][:4]):
        phi = k0 * sqrt_e
        if i == 1:
            phi -= -math.atan(phi)
        elif i == 2:
            phi -= math.atan(3.0 * phi / (3.0 - phi * phi))
        elif i == 3:
            phi -= math.atan(phi * (15.0 - phi * phi) / (15.0 - 6.0 * phi * phi))
        phi *= 2.0
        factors.append(complex(math.cos(phi), -math.sin(phi)))
    return factors


def _window_for(nuc, e, data):
    count = data.n_windows[nuc]
    window = int(e / (1.0 / count))
    if window == count:
        window -= 1
    return data.windows[nuc][window]


def calculate_micro_xs(nuc, e, input, data):
    """Return (total, absorption, fission, elastic) at 0K for one nuclide."""
    factors = calculate_sig_t(nuc, e, input, data.pseudo_k0rs)
    w = _window_for(nuc, e, data)
    sig_t = e * w.t
    sig_a = e * w.a
    sig_f = e * w.f

    sqrt_e = complex(math.sqrt(e), 0.0)
    e_c = complex(e, 0.0)
    for pole in data.poles[nuc][w.start : w.end]:
        psiiki = c_div(_I, pole.mp_ea - sqrt_e)
        cdum = c_div(psiiki, e_c)
        sig_t += c_mul(pole.mp_rt, c_mul(cdum, factors[pole.l_value])).real
        sig_a += c_mul(pole.mp_ra, cdum).real
        sig_f += c_mul(pole.mp_rf, cdum).real

    return (sig_t, sig_a, sig_f, sig_t - sig_a)


def calculate_micro_xs_doppler(nuc, e, input, data):
    """Return (total, absorption, fission, elastic) with Doppler broadening."""
    factors = calculate_sig_t(nuc, e, input, data.pseudo_k0rs)
    w = _window_for(nuc, e, data)
    sig_t = e * w.t
    sig_a = e * w.a
    sig_f = e * w.f

    e_c = complex(e, 0.0)
    for pole in data.poles[nuc][w.start : w.end]:
        z = c_mul(e_c - pole.mp_ea, _DOPPLER)
        faddeeva = fast_nuclear_w(z)
        sig_t += c_mul(pole.mp_rt, c_mul(faddeeva, factors[pole.l_value])).real
        sig_a += c_mul(pole.mp_ra, faddeeva).real
        sig_f += c_mul(pole.mp_rf, faddeeva).real

    return (sig_t, sig_a, sig_f, sig_t - sig_a)


def calculate_macro_xs(mat, e, input, data):
    """Return the four macroscopic cross sections of material ``mat``."""
    micro_fn = calculate_micro_xs_doppler if input.doppler else calculate_micro_xs
    macro = [0.0, 0.0, 0.0, 0.0]
    for nuc, conc in zip(data.mats[mat], data.concs[mat]):
        micro = micro_fn(nuc, e, input, data)
        macro = [total + xs * conc for total, xs in zip(macro, micro)]
    return tuple(macro)


def lookup_verification(index, input, data):
    """Perform lookup ``index`` and return 1 + the index of its largest XS."""
    rng = LCG(fast_forward_lcg(STARTING_SEED, 2 * index))
    p_energy = rng.random_double()
    mat = pick_mat(rng)
    macro = calculate_macro_xs(mat, p_energy, input, data)

    best = -sys.float_info.max
    best_idx = 0
    for j, value in enumerate(macro):
        if value > best:
            best = value
            best_idx = j
    return best_idx + 1


def run_event_based_simulation(input, data):
    """Run every lookup and return the summed verification value and timing."""
    print("Beginning event based simulation...")
    start = time.perf_counter()
    vhash = sum(lookup_verification(i, input, data) for i in range(input.lookups))
    stop = time.perf_counter()
    print(f"Simulation kernel took {stop - start:.2f} seconds.")
    return SimulationResult(vhash=vhash, kernel_init_time=stop - start)