from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep bound methods of unreferenced systems connected.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"  # payload: dt=float


# ============================================================================
# WANDERERS
# ============================================================================
EVENT_WANDERER_SPAWNED = "wanderer_spawned"                  # payload: entity=int, position=(x,y,z)
EVENT_WANDER_STATE_CHANGED = "wander_state_changed"          # payload: entity=int, previous_state=AgentState, new_state=AgentState, duration=float, direction=(dx,dy)
EVENT_WANDERER_DESPAWN_REQUEST = "wanderer_despawn_request"  # payload: entity=int
EVENT_WANDERER_DESPAWNED = "wanderer_despawned"              # payload: entity=int
