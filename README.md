# rsbench

A proxy benchmark for the macroscopic cross-section lookup kernel of Monte
Carlo neutron transport, using the windowed multipole method. It builds a
synthetic Hoogenboom-Martin reactor model of 12 materials (355 nuclides by
default, 68 for the small problem), generates random resonance poles and
windows, then runs an event-based series of lookups. Each lookup samples an
energy and a material, evaluates every nuclide's microscopic cross sections
(with optional Doppler broadening through a fast Faddeeva approximation) and
records 1 + the index of the largest of the four macroscopic values. These
are summed, reduced modulo 999983, and compared with a reference checksum
for the chosen problem size.

All random numbers come from a fixed 63-bit linear congruential generator,
so the generated data and the lookups are reproducible.

## Installation

```
pip install .
```

## Usage

```
rsbench -m event -s small -l 10000
```

Options:

| Option          | Meaning                                                     |
|-----------------|-------------------------------------------------------------|
| `-m <method>`   | Simulation method: `history` or `event`                     |
| `-s <size>`     | Hoogenboom-Martin problem size: `small` or `large`          |
| `-l <lookups>`  | Cross-section lookups per particle (or in total for event)  |
| `-p <particles>`| Number of particle histories                                |
| `-n <nuclides>` | Number of nuclides (overridden to 68 by `-s small`)         |
| `-P <poles>`    | Average number of poles per nuclide                         |
| `-W <windows>`  | Average number of windows per nuclide                       |
| `-d`            | Disable temperature dependence (Doppler broadening)         |
| `-k <id>`       | Kernel variant; only `0` is available                       |

Defaults are equivalent to `-s large -l 34 -p 300000 -P 1000 -W 100`, with
the history-based method selected. If `-m event` is given before any `-l`
or `-p`, the default becomes 34 × 300,000 total lookups and the particle
count is set to 0.

Exit status:

- 4 for an invalid command line (unknown option, missing value, or a
  nuclide, lookup, pole or window count below 1); the usage text is printed.
- 1 when the history-based method is selected (it is not available) or when
  a kernel other than `0` is requested.
- 0 when the run completes with a valid checksum, 1 when the checksum does
  not match.

A full-size run is heavy in pure Python; use `-l` to choose a smaller
number of lookups for a quick check. The reference checksums only match the
default lookup count.

## Library use

```python
from rsbench.config import read_cli
from rsbench.initialization import initialize_simulation
from rsbench.simulation import run_event_based_simulation

params = read_cli(["-m", "event", "-s", "small", "-l", "1000"])
data = initialize_simulation(params)
result = run_event_based_simulation(params, data)
print(result.vhash, result.kernel_init_time)
```

Modules:

- `rsbench.config` — `Input`, `HMSize`, `SimulationMethod`, `read_cli`,
  `usage_text` and `CLIError` (carrying `exit_code` 4).
- `rsbench.rng` — the `LCG` generator (`random_int`, `random_double`) and
  `fast_forward_lcg` to jump ahead by `n` steps.
- `rsbench.complexmath` — component-wise `c_mul` and `c_div`, `fast_exp`,
  `fast_cexp`, and the Faddeeva approximation `fast_nuclear_w`.
- `rsbench.materials` — `Materials`, `load_num_nucs`, `load_mats`,
  `load_concs`, `get_materials`.
- `rsbench.initialization` — `Pole`, `Window`, `SimulationData` and the
  generators, with `initialize_simulation` producing the full data set from
  a fixed seed.
- `rsbench.simulation` — `pick_mat`, `calculate_sig_t`,
  `calculate_micro_xs`, `calculate_micro_xs_doppler`, `calculate_macro_xs`,
  `lookup_verification`, `run_event_based_simulation` and
  `SimulationResult`.
- `rsbench.report` — banner and summary output: `border`, `center_text`,
  `fancy_int`, `logo`, `get_mem_estimate`, `print_input_summary`,
  `validate_and_print_results`.
- `rsbench.cli` — `main`, the `rsbench` command.

## Limitations

- Only the event-based method runs; the history-based method is reported as
  unavailable.
- Lookups run one after another in a single process; there is no thread
  count option and no parallel or accelerator execution.
- Only kernel variant `0` exists.

## Tests

```
pip install .[test]
pytest
```