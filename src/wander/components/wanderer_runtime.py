from dataclasses import dataclass
from typing import Tuple

from wander.components.agent_state import AgentState


@dataclass(slots=True)
class WandererRuntime:
    """Mutable wander state owned by a single controller.

    ``remaining_time`` may dip below zero for the duration of one update before
    the expiry check flips the state. ``direction`` is only meaningful while
    the state is ``MOVING``.
    """

    state: AgentState = AgentState.IDLE
    remaining_time: float = 0.0
    direction: Tuple[float, float] = (0.0, 0.0)

    @property
    def is_moving(self) -> bool:
        return self.state is AgentState.MOVING
