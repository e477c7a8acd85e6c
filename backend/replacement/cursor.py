from .models import SimulationResult, SimulationStep


class TimelineCursor:
    """Read-only position over a result's steps, used by step/play/rewind controls."""

    def __init__(self, result: SimulationResult, index: int = 0):
        self.result = result
        self._index = 0
        self.jump_to(index)

    def __len__(self) -> int:
        return len(self.result.steps)

    @property
    def index(self) -> int:
        return self._index

    @property
    def last_index(self) -> int:
        return len(self.result.steps) - 1

    @property
    def at_start(self) -> bool:
        return self._index == 0

    @property
    def at_end(self) -> bool:
        return self._index >= self.last_index

    def current(self) -> SimulationStep:
        return self.result.steps[self._index]

    def step_forward(self) -> bool:
        if self.at_end:
            return False
        self._index += 1
        return True

    def step_backward(self) -> bool:
        if self.at_start:
            return False
        self._index -= 1
        return True

    def jump_to(self, index: int) -> None:
        self._index = max(0, min(self.last_index, int(index)))

    def jump_to_start(self) -> None:
        self._index = 0

    def jump_to_end(self) -> None:
        self._index = self.last_index

    def reset(self) -> None:
        self.jump_to_start()
