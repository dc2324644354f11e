from enum import Enum, auto


class AgentState(Enum):
    """The two phases a wanderer cycles through."""
    IDLE = auto()
    MOVING = auto()
