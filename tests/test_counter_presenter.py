"""
Unit Tests for CounterPresenter.

Exercises the ViewModel without any widgets.
"""
import random

import pytest
from unittest.mock import MagicMock

from counter_mvvm.model.counter import Counter
from counter_mvvm.ui.viewmodels.counter_presenter import CounterPresenter


@pytest.fixture
def presenter():
    return CounterPresenter()


def assert_consistent(presenter: CounterPresenter):
    value = presenter.display_value.get()
    assert presenter.can_increment.get() == (value < presenter.max_value)
    assert presenter.can_decrement.get() == (value > presenter.min_value)


class TestInitialState:

    def test_defaults(self, presenter):
        assert presenter.display_value.get() == 0
        assert presenter.status_message.get() == "Ready"
        assert presenter.min_value == -100
        assert presenter.max_value == 100
        assert presenter.can_increment.get() is True
        assert presenter.can_decrement.get() is True

    def test_flags_reflect_custom_counter(self):
        presenter = CounterPresenter(Counter(initial_value=5, min_value=5, max_value=10))
        assert presenter.display_value.get() == 5
        assert presenter.can_decrement.get() is False
        assert presenter.can_increment.get() is True


class TestCommands:

    def test_increment(self, presenter):
        presenter.increment()
        assert presenter.display_value.get() == 1
        assert presenter.status_message.get() == "Incremented to 1"

    def test_decrement(self, presenter):
        presenter.increment()
        presenter.decrement()
        assert presenter.display_value.get() == 0
        assert presenter.status_message.get() == "Decremented to 0"

    def test_reset(self, presenter):
        for _ in range(3):
            presenter.increment()
        presenter.reset()
        assert presenter.display_value.get() == 0
        assert presenter.status_message.get() == "Counter reset"
        assert_consistent(presenter)

    def test_reset_from_negative(self, presenter):
        for _ in range(10):
            presenter.decrement()
        presenter.reset()
        assert presenter.display_value.get() == 0

    def test_max_value(self, presenter):
        for _ in range(100):
            presenter.increment()
        assert presenter.display_value.get() == 100
        assert presenter.can_increment.get() is False

        presenter.increment()

        assert presenter.display_value.get() == 100
        assert presenter.status_message.get() == "Maximum value reached!"
        assert presenter.can_increment.get() is False

    def test_min_value(self, presenter):
        for _ in range(100):
            presenter.decrement()
        assert presenter.display_value.get() == -100

        presenter.decrement()

        assert presenter.display_value.get() == -100
        assert presenter.status_message.get() == "Minimum value reached!"
        assert presenter.can_decrement.get() is False

    def test_increment_then_decrement_restores(self, presenter):
        for _ in range(7):
            presenter.increment()
        presenter.increment()
        presenter.decrement()
        assert presenter.display_value.get() == 7

    def test_leaving_bound_reenables_button(self, presenter):
        for _ in range(100):
            presenter.increment()
        presenter.decrement()
        assert presenter.can_increment.get() is True
        assert presenter.status_message.get() == "Decremented to 99"


class TestInvariants:

    def test_random_sequence_keeps_flags_consistent(self):
        rng = random.Random(42)
        presenter = CounterPresenter(Counter(initial_value=0, min_value=-5, max_value=5))
        commands = [presenter.increment, presenter.decrement, presenter.reset]
        for _ in range(300):
            rng.choices(commands, weights=[5, 5, 1])[0]()
            assert -5 <= presenter.display_value.get() <= 5
            assert_consistent(presenter)

    def test_reset_outside_bounds_is_preserved_and_logged(self, log_messages):
        presenter = CounterPresenter(Counter(initial_value=5, min_value=5, max_value=10))
        presenter.reset()
        assert presenter.display_value.get() == 0
        assert presenter.status_message.get() == "Counter reset"
        assert any(r["level"].name == "WARNING" for r in log_messages)


class TestLogging:

    def test_successful_command_logs_debug(self, presenter, log_messages):
        presenter.increment()
        debug = [r for r in log_messages if r["level"].name == "DEBUG"]
        assert any("incremented to 1" in r["message"] for r in debug)

    def test_boundary_hit_logs_info(self, log_messages):
        presenter = CounterPresenter(Counter(initial_value=1, min_value=0, max_value=1))
        presenter.increment()
        info = [r for r in log_messages if r["level"].name == "INFO"]
        assert any("max_value 1" in r["message"] for r in info)

    def test_decrement_refused_logs_info(self, log_messages):
        presenter = CounterPresenter(Counter(initial_value=0, min_value=0, max_value=1))
        presenter.decrement()
        info = [r for r in log_messages if r["level"].name == "INFO"]
        assert any("min_value 0" in r["message"] for r in info)


class TestNotifications:

    def test_subscribers_see_changes(self, presenter):
        on_value = MagicMock()
        on_status = MagicMock()
        presenter.display_value.subscribe(on_value)
        presenter.status_message.subscribe(on_status)

        presenter.increment()

        on_value.assert_called_once_with(1)
        on_status.assert_called_once_with("Incremented to 1")

    def test_failure_does_not_touch_value(self):
        presenter = CounterPresenter(Counter(initial_value=1, min_value=0, max_value=1))
        on_value = MagicMock()
        on_flag = MagicMock()
        presenter.display_value.subscribe(on_value)
        presenter.can_increment.subscribe(on_flag)

        presenter.increment()

        on_value.assert_not_called()
        on_flag.assert_not_called()
        assert presenter.status_message.get() == "Maximum value reached!"

    def test_property_changed_reports_names(self, presenter):
        changes = []
        presenter.property_changed.connect(lambda name, value: changes.append(name))

        presenter.increment()

        assert "display_value" in changes
        assert "status_message" in changes
