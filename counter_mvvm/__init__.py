"""
Counter MVVM - Bounded counter demonstrating Model-View-ViewModel.

Model:      counter_mvvm.model.Counter
ViewModel:  counter_mvvm.ui.viewmodels.CounterPresenter
View:       counter_mvvm.ui.views.CounterWindow (PySide6)
"""
__version__ = "0.1.0"
