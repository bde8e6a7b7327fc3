from dataclasses import replace

import pytest

from rsbench.config import HMSize, Input, SimulationMethod
from rsbench.report import (
    border,
    center_text,
    fancy_int,
    get_mem_estimate,
    logo,
    print_input_summary,
    validate_and_print_results,
)


def test_border_is_eighty_equals():
    assert border() == "=" * 80


@pytest.mark.parametrize("text", ["RESULTS", "INPUT SUMMARY", "SIMULATION", "x"])
def test_center_text_keeps_text_and_roughly_centres(text):
    line = center_text(text, 79)
    assert line.lstrip(" ") == text
    left = len(line) - len(text)
    right = 79 - len(line)
    assert abs(left - right) <= 2


def test_center_text_pinned():
    assert center_text("ab", 10) == "     ab"


def test_center_text_overlong_string_is_unpadded():
    assert center_text("abcdef", 2) == "abcdef"


@pytest.mark.parametrize("n", [0, 7, 999, 1000, 12345, 999999, 1000000, 34 * 300000, 2147483647])
def test_fancy_int_round_trip(n):
    text = fancy_int(n)
    assert int(text.replace(",", "")) == n
    groups = text.split(",")
    assert all(len(g) == 3 for g in groups[1:])
    assert 1 <= len(groups[0]) <= 3


def test_fancy_int_pinned():
    assert fancy_int(1000) == "1,000"


def test_logo_layout():
    lines = logo(13).splitlines()
    assert lines[0] == border()
    assert lines[-1] == border()
    assert center_text("Version: 13", 79) in lines


def test_mem_estimate_grows_linearly_with_poles():
    base = Input(n_nuclides=10)
    values = [get_mem_estimate(replace(base, avg_n_poles=p)) for p in (1, 2, 3)]
    assert values[0] > 0
    assert values[2] - values[1] == values[1] - values[0] > 0


def test_mem_estimate_grows_with_windows():
    base = Input(n_nuclides=10)
    assert get_mem_estimate(replace(base, avg_n_windows=50)) < get_mem_estimate(
        replace(base, avg_n_windows=60)
    )


def test_summary_history(capsys):
    inp = Input()
    print_input_summary(inp)
    out = capsys.readouterr().out
    assert "History Based" in out
    assert "Temperature Dependence:      ON" in out
    assert f"Total XS Lookups:            {fancy_int(inp.lookups * inp.particles)}" in out
    assert f"Particles:                   {fancy_int(inp.particles)}" in out


def test_summary_event_without_doppler(capsys):
    inp = Input(
        simulation_method=SimulationMethod.EVENT_BASED,
        doppler=False,
        hm=HMSize.SMALL,
        lookups=5000,
    )
    print_input_summary(inp)
    out = capsys.readouterr().out
    assert "Event Based" in out
    assert "Temperature Dependence:      OFF" in out
    assert "H-M Benchmark Size:          Small" in out
    assert "Particles:" not in out
    assert f"Total XS Lookups:            {fancy_int(5000)}" in out


@pytest.mark.parametrize(
    "method, hm, vhash",
    [
        (SimulationMethod.HISTORY_BASED, HMSize.LARGE, 351485),
        (SimulationMethod.HISTORY_BASED, HMSize.SMALL, 879693),
        (SimulationMethod.EVENT_BASED, HMSize.LARGE, 358389),
        (SimulationMethod.EVENT_BASED, HMSize.SMALL, 880018),
    ],
)
def test_valid_checksums(capsys, method, hm, vhash):
    inp = Input(simulation_method=method, hm=hm)
    assert validate_and_print_results(inp, 2.0, vhash, 1.0) == 0
    assert f"Verification checksum: {vhash} (Valid)" in capsys.readouterr().out


def test_invalid_checksum(capsys):
    inp = Input(simulation_method=SimulationMethod.EVENT_BASED, hm=HMSize.LARGE)
    assert validate_and_print_results(inp, 2.0, 351485, 1.0) == 1
    assert "WARNING - INAVALID CHECKSUM!" in capsys.readouterr().out


def test_zero_kernel_time_does_not_fail(capsys):
    inp = Input(simulation_method=SimulationMethod.EVENT_BASED, lookups=100)
    assert validate_and_print_results(inp, 1.0, 0, 1.0) == 1
    out = capsys.readouterr().out
    assert f"Lookups:               {fancy_int(100)}" in out