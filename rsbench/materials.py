"""Hoogenboom-Martin reactor materials: nuclide lists and concentrations."""

from dataclasses import dataclass

NUM_MATERIALS = 12

# Number of nuclides in the fuel of the small benchmark; the large one uses more.
_SMALL_N_NUCLIDES = 68
_FUEL_SMALL = 34
_FUEL_LARGE = 321

_FUEL_BASE = (
    58, 59, 60, 61, 40, 42, 43, 44, 45, 46, 1, 2, 3, 7,
    8, 9, 10, 29, 57, 47, 48, 0, 62, 15, 33, 34, 52, 53,
    54, 55, 56, 18, 23, 41,
)

_REFLECTOR = (
    24, 41, 4, 5, 19, 20, 21, 22, 35, 36, 37, 38, 39, 25,
    49, 50, 51, 11, 12, 13, 14,
)
_WATER = (24, 41, 4, 5)
_ASSEMBLY_END = (24, 41, 4, 5, 63, 64, 65, 66, 67)

_NON_FUEL = (
    (63, 64, 65, 66, 67),  # cladding
    _WATER,  # cold borated water
    _WATER,  # hot borated water
    (
        19, 20, 21, 22, 35, 36, 37, 38, 39, 25, 27, 28, 29,
        30, 31, 32, 26, 49, 50, 51, 11, 12, 13, 14, 6, 16, 17,
    ),  # RPV
    _REFLECTOR,  # lower radial reflector
    _REFLECTOR,  # top reflector / plate
    _REFLECTOR,  # bottom plate
    _REFLECTOR,  # bottom nozzle
    _REFLECTOR,  # top nozzle
    _ASSEMBLY_END,  # top of fuel assemblies
    _ASSEMBLY_END,  # bottom of fuel assemblies
)


@dataclass
class Materials:
    """Nuclide membership and concentrations for each of the 12 materials."""

    num_nucs: list
    mats: list
    concs: list

    @property
    def max_num_nucs(self):
        """Largest number of nuclides in any material."""
        return max(self.num_nucs)


def load_num_nucs(n_nuclides):
    """Return the number of nuclides contained in each material."""
    fuel = _FUEL_SMALL if n_nuclides == _SMALL_N_NUCLIDES else _FUEL_LARGE
    return [fuel, 5, 4, 4, 27, 21, 21, 21, 21, 21, 9, 9]


def _fuel_nuclides(n_nuclides):
    if n_nuclides == _SMALL_N_NUCLIDES:
        return list(_FUEL_BASE)
    extra = range(_SMALL_N_NUCLIDES, _SMALL_N_NUCLIDES + _FUEL_LARGE - _FUEL_SMALL)
    return [*_FUEL_BASE, *extra]


def load_mats(n_nuclides, num_nucs):
    """Return, per material, the list of nuclide ids it contains."""
    sources = (_fuel_nuclides(n_nuclides), *_NON_FUEL)
    return [list(source[:count]) for source, count in zip(sources, num_nucs)]


def load_concs(num_nucs, rng):
    """Return random concentrations, one per nuclide of each material."""
    return [[rng.random_double() for _ in range(count)] for count in num_nucs]


def get_materials(input, rng):
    """Build all material data for the given input, drawing from ``rng``."""
    num_nucs = load_num_nucs(input.n_nuclides)
    mats = load_mats(input.n_nuclides, num_nucs)
    concs = load_concs(num_nucs, rng)
    return Materials(num_nucs=num_nucs, mats=mats, concs=concs)