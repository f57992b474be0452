class Timers:
    """Delay and sound timer, both counting down to zero at 60 Hz."""

    def __init__(self) -> None:
        self.delay = 0
        self.sound = 0

    def tick(self) -> None:
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1

    def sound_active(self) -> bool:
        return self.sound > 0
