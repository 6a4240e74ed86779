import asyncio
import logging as lg
from typing import Sequence

import intcode.runtime.cpu as cpu


def execute(
    program: Sequence[int],
    initial_input: Sequence[int] | None = None,
    settings: cpu.RunSettings | None = None,
    name: str = ''
) -> list[int]:
    proc = cpu.Computer(name)

    try:
        return asyncio.run(proc.run(program, initial_input, settings))

    except cpu.Fault as e:
        lg.error(f'Execution halted on fault: {e}')
        proc.debug_dump()
        raise
