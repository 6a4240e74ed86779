import asyncio
import logging as lg
from collections import deque
from typing import TypeAlias

from intcode.common.conf import BLACK, GLYPHS
from intcode.robot.navigator import Navigator
from intcode.runtime.cpu import Consumer


Coords: TypeAlias = tuple[int, int]


class PanelMap:
    ''' Grid simulator driven by the color/turn pairs of a computer '''

    panels: dict[Coords, int]
    navigator: Navigator
    input: deque[int]
    input_closed: bool
    end: bool
    output_computer: Consumer | None

    def __init__(self):
        self.panels = {}
        self.navigator = Navigator()
        self.input = deque()
        self.input_closed = False
        self.end = False
        self.output_computer = None

    def color(self, coords: Coords) -> int:
        return self.panels.get(coords, BLACK)

    def painted_count(self) -> int:
        return len(self.panels)

    def send(self, value: int):
        if self.output_computer is not None:
            self.output_computer.input.append(value)

    def paint_panel(self):
        self.panels[self.navigator.position] = self.input.popleft()

    def move_navigator(self):
        self.navigator.turn(self.input.popleft())
        self.navigator.advance()
        self.send(self.color(self.navigator.position))

    async def execute(self):
        if len(self.input) >= 2:
            self.paint_panel()
            self.move_navigator()
        elif self.input_closed:
            self.end = True
        else:
            await asyncio.sleep(0)

    async def run(self, start_color: int = BLACK):
        self.send(start_color)

        while not self.end:
            await self.execute()

        lg.info(f'Painting finished, {self.painted_count()} panels painted')

    def display(self) -> list[str]:
        if not self.panels:
            return []

        xs = [x for x, _ in self.panels]
        ys = [y for _, y in self.panels]

        rows = [
            ''.join(GLYPHS[self.color((x, y))] for x in range(min(xs), max(xs) + 1))
            for y in range(min(ys), max(ys) + 1)
        ]

        for row in rows:
            lg.debug(row)

        return rows
