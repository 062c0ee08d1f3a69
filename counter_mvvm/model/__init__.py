from counter_mvvm.model.counter import Counter

__all__ = ["Counter"]
