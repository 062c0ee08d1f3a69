from counter_mvvm.ui.views.counter_view import CounterView, CounterWindow

__all__ = ["CounterView", "CounterWindow"]
