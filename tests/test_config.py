import pytest

from rsbench.config import CLIError, HMSize, Input, SimulationMethod, read_cli, usage_text


def test_defaults_without_arguments():
    config = read_cli([])
    assert config == Input()
    assert config.n_nuclides == 355
    assert config.lookups == 34
    assert config.particles == 300000
    assert config.hm is HMSize.LARGE
    assert config.simulation_method is SimulationMethod.HISTORY_BASED
    assert config.doppler is True


def test_event_mode_folds_particles_into_lookups():
    defaults = Input()
    config = read_cli(["-m", "event"])
    assert config.simulation_method is SimulationMethod.EVENT_BASED
    assert config.lookups == defaults.lookups * defaults.particles
    assert config.particles == 0


def test_event_mode_keeps_explicit_counts():
    config = read_cli(["-l", "5", "-p", "7", "-m", "event"])
    assert config.lookups == 5
    assert config.particles == 7


def test_lookups_after_event_mode_override():
    config = read_cli(["-m", "event", "-l", "5"])
    assert config.lookups == 5
    assert config.particles == 0


def test_history_mode():
    config = read_cli(["-m", "history"])
    assert config.simulation_method is SimulationMethod.HISTORY_BASED


def test_small_size_forces_68_nuclides():
    config = read_cli(["-n", "500", "-s", "small"])
    assert config.hm is HMSize.SMALL
    assert config.n_nuclides == 68


def test_large_size_keeps_nuclides():
    config = read_cli(["-s", "large", "-n", "12"])
    assert config.hm is HMSize.LARGE
    assert config.n_nuclides == 12


def test_numeric_options():
    config = read_cli(["-P", "20", "-W", "3", "-k", "2", "-d"])
    assert config.avg_n_poles == 20
    assert config.avg_n_windows == 3
    assert config.kernel_id == 2
    assert config.doppler is False


def test_integer_prefix_is_used():
    assert read_cli(["-n", "12abc"]).n_nuclides == 12


@pytest.mark.parametrize(
    "argv",
    [
        ["-x"],
        ["-m"],
        ["-m", "batch"],
        ["-l"],
        ["-s", "medium"],
        ["-s"],
        ["-n", "0"],
        ["-l", "0"],
        ["-P", "0"],
        ["-W", "abc"],
        ["-k"],
    ],
)
def test_invalid_arguments_raise(argv):
    with pytest.raises(CLIError) as excinfo:
        read_cli(argv)
    assert excinfo.value.exit_code == 4
    assert str(excinfo.value) == usage_text()


def test_usage_text_lists_options():
    text = usage_text()
    assert text.startswith("Usage: ./multibench <options>\n")
    assert "-s <size>" in text
    assert "-d " in text