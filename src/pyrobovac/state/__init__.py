"""State layer.

Declarations, the store interface and the write policy used to persist
device status into a home-automation state tree.
"""

from pyrobovac.state.declaration import StateDeclaration
from pyrobovac.state.events import StateValue, StateWrite
from pyrobovac.state.store import InMemoryStateStore, StateStore

__all__ = [
    "InMemoryStateStore",
    "StateDeclaration",
    "StateStore",
    "StateValue",
    "StateWrite",
]
