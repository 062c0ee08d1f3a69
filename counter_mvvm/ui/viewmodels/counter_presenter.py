"""
Counter ViewModel.

Presentation logic for the counter screen: mirrors the Counter's state
into observable fields and turns button presses into model calls.
"""
from typing import Optional
from loguru import logger

from counter_mvvm.model.counter import Counter
from counter_mvvm.ui.mvvm.viewmodel import BaseViewModel

READY_MESSAGE = "Ready"
MAX_REACHED_MESSAGE = "Maximum value reached!"
MIN_REACHED_MESSAGE = "Minimum value reached!"
RESET_MESSAGE = "Counter reset"


class CounterPresenter(BaseViewModel):
    """
    ViewModel owning a single Counter.

    Observable fields:
        display_value: Mirror of Counter.value.
        can_increment: True while the value is below max_value.
        can_decrement: True while the value is above min_value.
        status_message: Human-readable outcome of the last command.

    Commands:
        increment(), decrement(), reset()
    """

    def __init__(self, counter: Optional[Counter] = None):
        """
        Args:
            counter: Model instance to own. A default Counter() is created
                if omitted; the presenter must be its only user.
        """
        super().__init__()
        self._counter = counter if counter is not None else Counter()

        self.display_value = self.observable("display_value", self._counter.value)
        self.can_increment = self.observable("can_increment", self._counter.can_increment())
        self.can_decrement = self.observable("can_decrement", self._counter.can_decrement())
        self.status_message = self.observable("status_message", READY_MESSAGE)

    @property
    def min_value(self) -> int:
        return self._counter.min_value

    @property
    def max_value(self) -> int:
        return self._counter.max_value

    # --- Commands ---

    def increment(self) -> None:
        if self._counter.increment():
            self._refresh()
            self.status_message.set(f"Incremented to {self._counter.value}")
            logger.debug(f"Counter incremented to {self._counter.value}")
        else:
            self.status_message.set(MAX_REACHED_MESSAGE)
            logger.info(f"Increment refused at max_value {self._counter.max_value}")

    def decrement(self) -> None:
        if self._counter.decrement():
            self._refresh()
            self.status_message.set(f"Decremented to {self._counter.value}")
            logger.debug(f"Counter decremented to {self._counter.value}")
        else:
            self.status_message.set(MIN_REACHED_MESSAGE)
            logger.info(f"Decrement refused at min_value {self._counter.min_value}")

    def reset(self) -> None:
        self._counter.reset()
        self._refresh()
        self.status_message.set(RESET_MESSAGE)
        logger.debug("Counter reset")
        if not self._counter.in_bounds():
            logger.warning(
                f"Reset left {self._counter.value} outside "
                f"[{self._counter.min_value}, {self._counter.max_value}]"
            )

    def _refresh(self) -> None:
        """Re-derive value and button state from the model."""
        self.display_value.set(self._counter.value)
        self.can_increment.set(self._counter.can_increment())
        self.can_decrement.set(self._counter.can_decrement())
