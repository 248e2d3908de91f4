import pytest
from hypothesis import given
from hypothesis import strategies as st

from gnsskit.baudrate import BAUDRATES, baudrate_steps


def test_no_steps_when_already_at_target():
    assert list(baudrate_steps(115200, 115200)) == []


def test_increase_from_default_rate():
    assert list(baudrate_steps(115200, 921600)) == [230400, 460800, 500000, 576000, 921600]


def test_decrease_sets_target_directly():
    assert list(baudrate_steps(115200, 9600)) == [9600]


def test_unsupported_target_runs_to_highest_rate():
    steps = list(baudrate_steps(115200, 100000))
    assert steps[0] == 115200
    assert steps[-1] == BAUDRATES[-1]
    assert 100000 not in steps


def test_steps_are_a_generator():
    steps = baudrate_steps(1200, 4800)
    assert next(steps) == 2400
    assert next(steps) == 4800
    with pytest.raises(StopIteration):
        next(steps)


@given(st.sampled_from(BAUDRATES), st.sampled_from(BAUDRATES))
def test_supported_target_is_reached(current, target):
    steps = list(baudrate_steps(current, target))
    if current == target:
        assert steps == []
    else:
        assert steps[-1] == target
        assert steps.count(target) == 1


@given(st.integers(min_value=0, max_value=5_000_000), st.sampled_from(BAUDRATES))
def test_steps_are_supported_and_ascending(current, target):
    steps = list(baudrate_steps(current, target))
    assert all(rate in BAUDRATES for rate in steps)
    assert steps == sorted(set(steps))


@given(st.sampled_from(BAUDRATES), st.sampled_from(BAUDRATES))
def test_steps_never_exceed_higher_of_current_and_target(current, target):
    steps = list(baudrate_steps(current, target))
    assert all(rate <= max(current, target) for rate in steps)