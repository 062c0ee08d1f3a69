"""
MVVM Package - Observable fields and ViewModel base.

Provides:
- Observable: Toolkit-agnostic value with get/set/subscribe.
- BaseViewModel: Base ViewModel with generic property_changed signal.

Qt bindings live in counter_mvvm.ui.mvvm.binding and are imported
explicitly by views, so ViewModels never pull in PySide6.
"""
from counter_mvvm.ui.mvvm.observable import Observable
from counter_mvvm.ui.mvvm.viewmodel import BaseViewModel

__all__ = [
    "Observable",
    "BaseViewModel",
]
