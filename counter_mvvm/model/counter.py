"""
Bounded integer counter.

Pure business state: no knowledge of view models, views or Qt.
"""
DEFAULT_INITIAL_VALUE = 0
DEFAULT_MIN_VALUE = -100
DEFAULT_MAX_VALUE = 100


class Counter:
    """
    Integer value kept within fixed [min_value, max_value] bounds.

    increment()/decrement() report hitting a bound by returning False
    instead of raising.

    Args:
        initial_value: Starting value, must lie within the bounds.
        min_value: Lower bound (inclusive).
        max_value: Upper bound (inclusive).

    Raises:
        ValueError: If the bounds are inverted or initial_value is outside them.
    """

    def __init__(
        self,
        initial_value: int = DEFAULT_INITIAL_VALUE,
        min_value: int = DEFAULT_MIN_VALUE,
        max_value: int = DEFAULT_MAX_VALUE,
    ):
        if min_value > max_value:
            raise ValueError(f"min_value ({min_value}) exceeds max_value ({max_value})")
        if not min_value <= initial_value <= max_value:
            raise ValueError(f"initial_value ({initial_value}) outside [{min_value}, {max_value}]")

        self._value = initial_value
        self._min_value = min_value
        self._max_value = max_value

    @property
    def value(self) -> int:
        return self._value

    @property
    def min_value(self) -> int:
        return self._min_value

    @property
    def max_value(self) -> int:
        return self._max_value

    def increment(self) -> bool:
        """Add one if below max_value. Returns True if the value changed."""
        if self._value < self._max_value:
            self._value += 1
            return True
        return False

    def decrement(self) -> bool:
        """Subtract one if above min_value. Returns True if the value changed."""
        if self._value > self._min_value:
            self._value -= 1
            return True
        return False

    def reset(self) -> None:
        """
        Set the value back to 0.

        Always literal 0, not min_value or the initial value. With bounds
        that exclude 0 this leaves the counter outside its own range.
        """
        self._value = 0

    def can_increment(self) -> bool:
        return self._value < self._max_value

    def can_decrement(self) -> bool:
        return self._value > self._min_value

    def in_bounds(self) -> bool:
        return self._min_value <= self._value <= self._max_value

    def __repr__(self) -> str:
        return f"Counter(value={self._value}, min_value={self._min_value}, max_value={self._max_value})"
