from intcode.common.conf import HEADINGS, TURN_LEFT, TURN_RIGHT


class Navigator:
    x: int
    y: int
    heading: int  # Index into HEADINGS

    def __init__(self):
        self.x = 0
        self.y = 0
        self.heading = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def turn(self, direction: int):
        if direction == TURN_LEFT:
            self.heading = (self.heading - 1) % len(HEADINGS)
        elif direction == TURN_RIGHT:
            self.heading = (self.heading + 1) % len(HEADINGS)
        else:
            raise UserWarning(f'Unknown turn direction {direction}')

    def advance(self):
        dx, dy = HEADINGS[self.heading]
        self.x += dx
        self.y += dy
