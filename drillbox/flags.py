"""Status bit flags and named run states."""

from enum import IntEnum, IntFlag


class StatusFlag(IntFlag):
    """Bits of a system status byte."""

    POWER = 1 << 0
    ERROR = 1 << 1
    NETWORK = 1 << 2


class State(IntEnum):
    """Run states with human-readable descriptions."""

    IDLE = 0
    RUNNING = 1
    STOPPED = 2

    def description(self):
        """Return the sentence describing this state."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    State.IDLE: "System is waiting",
    State.RUNNING: "Process in progress",
    State.STOPPED: "User halted execution",
}