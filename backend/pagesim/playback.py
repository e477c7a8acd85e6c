from typing import Any

from replacement import TimelineCursor

SPEED_MS = {
    "SLOW": 1000,
    "NORMAL": 500,
    "FAST": 200,
}


def normalize_speed(value: Any, default: str = "NORMAL") -> str:
    speed = str(value or default).strip().upper()
    if speed not in SPEED_MS:
        return default
    return speed


class Player:
    """Auto-play driver. The caller owns the clock and calls tick() from its loop."""

    def __init__(self, cursor: TimelineCursor, speed: Any = "NORMAL"):
        self.cursor = cursor
        self.speed = normalize_speed(speed)
        self.playing = False
        self.last_ms = 0

    @property
    def interval_ms(self) -> int:
        return SPEED_MS[self.speed]

    def set_speed(self, speed: Any) -> None:
        self.speed = normalize_speed(speed, self.speed)

    def play(self, now_ms: int = 0) -> None:
        if self.cursor.at_end:
            self.cursor.jump_to_start()
        self.playing = not self.cursor.at_end
        self.last_ms = int(now_ms)

    def pause(self) -> None:
        self.playing = False

    def toggle(self, now_ms: int = 0) -> None:
        if self.playing:
            self.pause()
        else:
            self.play(now_ms)

    def advance(self) -> bool:
        if not self.playing:
            return False
        moved = self.cursor.step_forward()
        if self.cursor.at_end:
            self.playing = False
        return moved

    def tick(self, now_ms: int) -> bool:
        if not self.playing:
            return False
        if now_ms - self.last_ms < self.interval_ms:
            return False
        self.last_ms = int(now_ms)
        return self.advance()
