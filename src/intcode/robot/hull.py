import asyncio
from typing import Sequence

import intcode.runtime.cpu as cpu
from intcode.common.conf import BLACK
from intcode.robot.panels import PanelMap


async def paint(program: Sequence[int], start_color: int = BLACK) -> PanelMap:
    brain = cpu.Computer('brain')
    panel_map = PanelMap()

    brain.output_computer = panel_map
    panel_map.output_computer = brain

    settings = cpu.RunSettings().update(logging=False, loop=True)

    # The computer resets its input on start, so it must be scheduled before the map
    await asyncio.gather(
        brain.run(program, settings=settings),
        panel_map.run(start_color)
    )

    return panel_map


def paint_sync(program: Sequence[int], start_color: int = BLACK) -> PanelMap:
    return asyncio.run(paint(program, start_color))
