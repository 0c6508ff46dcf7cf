from .state_store import COUNTER_KEY, StateStore

__all__ = ["COUNTER_KEY", "StateStore"]
