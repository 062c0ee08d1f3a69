"""
Data Binding Utilities.

Connects Observable fields of a ViewModel to PySide6 widget properties.
Data flows one way only, ViewModel -> View; user actions travel back
through commands bound with bind_command().

Usage:
    from counter_mvvm.ui.mvvm.binding import bind, bind_command

    bind(vm.status_message, self.status_label, "text")
    bind(vm.can_increment, self.increment_button, "enabled")
    bind_command(vm, "increment", self.increment_button)
"""
from enum import Enum
from typing import Any, Callable, Optional
from PySide6.QtCore import QObject
from PySide6.QtWidgets import QAbstractButton, QLabel, QLineEdit, QProgressBar, QWidget

from counter_mvvm.ui.mvvm.observable import Observable


class BindingMode(Enum):
    """Binding direction modes."""
    ONE_WAY = "OneWay"           # Source -> Target, initial sync plus every change
    ONE_TIME = "OneTime"         # Initial sync only


# Widget property -> setter method name for common Qt widgets
_WIDGET_PROPERTY_MAP = {
    QLabel: {"text": "setText"},
    QLineEdit: {"text": "setText"},
    QAbstractButton: {"text": "setText", "checked": "setChecked"},
    QProgressBar: {"value": "setValue"},
    QWidget: {"enabled": "setEnabled", "visible": "setVisible", "toolTip": "setToolTip"},
}


def _get_widget_setter(widget: QObject, prop_name: str) -> Callable[[Any], None]:
    """
    Resolve the setter for a widget property.

    Raises:
        ValueError: If no setter can be found.
    """
    for wtype, props in _WIDGET_PROPERTY_MAP.items():
        if isinstance(widget, wtype) and prop_name in props:
            return getattr(widget, props[prop_name])

    # Fallback: Qt naming convention setFoo for property foo
    if prop_name:
        setter = getattr(widget, f"set{prop_name[0].upper()}{prop_name[1:]}", None)
        if callable(setter):
            return setter

    raise ValueError(f"Cannot bind to property '{prop_name}' of {type(widget).__name__}")


def bind(
    source: Observable,
    target: QObject,
    target_property: str,
    mode: BindingMode = BindingMode.ONE_WAY,
    converter: Optional[Callable[[Any], Any]] = None
) -> Callable[[], None]:
    """
    Bind an Observable to a widget property.

    Args:
        source: Observable field of a ViewModel.
        target: QWidget instance.
        target_property: Property name on the widget (e.g., "text").
        mode: ONE_WAY keeps the widget in sync; ONE_TIME copies once.
        converter: Optional function converting the source value for the widget.

    Returns:
        Disposer that detaches the binding.

    Example:
        bind(vm.display_value, self.value_label, "text", converter=str)
    """
    setter = _get_widget_setter(target, target_property)

    def update_target(value):
        if converter:
            value = converter(value)
        setter(value)

    # Initial sync
    update_target(source.get())

    if mode == BindingMode.ONE_TIME:
        return lambda: None

    return source.subscribe(update_target)


def bind_command(
    source: object,
    command_name: str,
    trigger: QObject,
    trigger_signal: str = "clicked"
) -> Callable[[], None]:
    """
    Bind a ViewModel command/method to a widget signal.

    Args:
        source: ViewModel instance.
        command_name: Zero-argument method name on the ViewModel.
        trigger: Widget that triggers the command (e.g., QPushButton).
        trigger_signal: Signal name on widget (default: "clicked").

    Returns:
        Disposer that disconnects the command.
    """
    command = getattr(source, command_name, None)
    if not callable(command):
        raise ValueError(f"Command '{command_name}' not found on {source}")

    signal = getattr(trigger, trigger_signal, None)
    if signal is None or not hasattr(signal, "connect"):
        raise ValueError(f"Signal '{trigger_signal}' not found on {trigger}")

    # clicked(bool) passes the checked state; commands take no arguments
    def invoke(*_args):
        command()

    signal.connect(invoke)

    connected = [True]

    def dispose() -> None:
        if connected[0]:
            connected[0] = False
            signal.disconnect(invoke)

    return dispose
