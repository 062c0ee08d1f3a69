"""
MVVM ViewModel Infrastructure.

Provides a single base class for ViewModels with property change notification.
Fields are Observable instances; every change is also re-broadcast on the
generic property_changed signal as (property_name, new_value).
"""
from typing import Any, Dict, TypeVar

from counter_mvvm.core.events import Signal
from counter_mvvm.ui.mvvm.observable import Observable

T = TypeVar('T')


class BaseViewModel:
    """
    Base class for ViewModels.

    Example:
        class MyViewModel(BaseViewModel):
            def __init__(self):
                super().__init__()
                self.name = self.observable("name", "")
    """

    def __init__(self):
        self.property_changed = Signal(f"{type(self).__name__}.property_changed")
        self._observables: Dict[str, Observable] = {}

    def observable(self, name: str, initial: T) -> Observable[T]:
        """
        Create and register an Observable field.

        Args:
            name: Property name reported through property_changed.
            initial: Starting value.
        """
        if name in self._observables:
            raise ValueError(f"Observable '{name}' already registered on {type(self).__name__}")

        field: Observable[T] = Observable(initial, name=name)
        field.subscribe(lambda value, n=name: self.on_property_changed(n, value))
        self._observables[name] = field
        return field

    def get_observable(self, name: str) -> Observable:
        """Look up a registered Observable. Raises KeyError for unknown names."""
        return self._observables[name]

    @property
    def observable_names(self) -> list:
        return list(self._observables)

    def on_property_changed(self, property_name: str, value: Any) -> None:
        """
        Emit a property changed notification.

        Called automatically for fields created with observable().
        """
        self.property_changed.emit(property_name, value)
