from counter_mvvm.ui.viewmodels.counter_presenter import CounterPresenter

__all__ = ["CounterPresenter"]
