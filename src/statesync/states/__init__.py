from statesync.states.json_file import JsonFileState
from statesync.states.memory import InMemoryState

__all__ = ["InMemoryState", "JsonFileState"]
