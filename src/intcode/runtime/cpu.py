import asyncio
import logging as lg
from collections import deque
from typing import NamedTuple, Protocol, Sequence


import intcode.common.ops as ops
from intcode.common.conf import INPUT_PROMPT
from intcode.runtime.memory import Memory


class Fault(Exception):
    pass


class Consumer(Protocol):
    input: deque[int]
    input_closed: bool


class Opcode(NamedTuple):
    op: int
    mode1: int = ops.POSITION
    mode2: int = ops.POSITION
    mode3: int = ops.POSITION


class RunSettings:
    logging: bool
    loop: bool

    def __init__(self):
        self.logging = True
        self.loop = False

    def update(
        self,
        logging: bool | None = None,
        loop: bool | None = None
    ):
        if logging is not None:
            self.logging = logging

        if loop is not None:
            self.loop = loop

        return self


def read_input(prompt: str) -> int:
    return int(input(prompt))


def decode(value: int) -> Opcode:
    if value < 0:
        raise Fault(f'Negative instruction word {value}')

    modes = [(value // 10 ** (i + 1)) % 10 for i in range(1, 4)]

    for mode in modes:
        if mode not in ops.MODES:
            raise Fault(f'Unknown addressing mode {mode} in {value}')

    return Opcode(value % 100, *modes)


class Computer():
    name: str
    memory: Memory
    pointer: int        # Instruction pointer
    relative_base: int  # Base for relative mode
    input: deque[int]
    output: list[int]
    end: bool           # Halt flag
    loop: bool          # Suspend on empty input instead of prompting
    logging: bool       # Print produced values
    input_closed: bool  # Set by the upstream when it halts
    output_computer: Consumer | None

    def __init__(self, name: str = ''):
        self.name = name
        self.memory = Memory()
        self.pointer = 0
        self.relative_base = 0
        self.input = deque()
        self.output = []
        self.end = False
        self.loop = False
        self.logging = True
        self.input_closed = False
        self.output_computer = None

    # - Helpers - #

    def debug_dump(self):
        lg.debug(f'{self.name or "computer"} IP:{self.pointer} RB:{self.relative_base} IN:{list(self.input)}')

    def opcode(self) -> Opcode:
        return decode(self.memory.read(self.pointer))

    def next(self, length: int):
        self.pointer += length

    def get_address(self, slot: int, mode: int = ops.POSITION) -> int:
        param = self.memory.read(self.pointer + slot)

        if mode == ops.POSITION:
            return param

        if mode == ops.RELATIVE:
            return param + self.relative_base

        raise Fault(f'No address for mode {mode} at {self.pointer}')

    def get_value(self, slot: int, mode: int = ops.POSITION) -> int:
        if mode == ops.IMMEDIATE:
            return self.memory.read(self.pointer + slot)

        return self.memory.read(self.get_address(slot, mode))

    def compare(self, holds: bool, mode3: int):
        self.memory.write(self.get_address(3, mode3), 1 if holds else 0)

    def jump_if(self, holds: bool, mode2: int, op: int) -> int:
        if holds:
            self.pointer = self.get_value(2, mode2)
            return ops.JUMPED

        return ops.LENGTHS[op]

    # - Operations - #

    def add_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        a = self.get_value(1, mode1)
        b = self.get_value(2, mode2)
        self.memory.write(self.get_address(3, mode3), a + b)
        return ops.LENGTHS[ops.ADD]

    def multiply_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        a = self.get_value(1, mode1)
        b = self.get_value(2, mode2)
        self.memory.write(self.get_address(3, mode3), a * b)
        return ops.LENGTHS[ops.MUL]

    async def input_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int | None:
        if self.input:
            value = self.input.popleft()
        elif self.loop:
            return None
        else:
            value = await asyncio.to_thread(read_input, INPUT_PROMPT)

        self.memory.write(self.get_address(1, mode1), value)
        return ops.LENGTHS[ops.INP]

    def output_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        value = self.get_value(1, mode1)
        self.output.append(value)

        if self.logging:
            print(value)

        if self.output_computer is not None:
            self.output_computer.input.append(value)

        return ops.LENGTHS[ops.OUT]

    def jump_true_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        return self.jump_if(self.get_value(1, mode1) != 0, mode2, ops.JPT)

    def jump_false_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        return self.jump_if(self.get_value(1, mode1) == 0, mode2, ops.JPF)

    def less_than_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        self.compare(self.get_value(1, mode1) < self.get_value(2, mode2), mode3)
        return ops.LENGTHS[ops.LTN]

    def equal_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        self.compare(self.get_value(1, mode1) == self.get_value(2, mode2), mode3)
        return ops.LENGTHS[ops.EQL]

    def adjust_relative_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        self.relative_base += self.get_value(1, mode1)
        return ops.LENGTHS[ops.ARB]

    def end_op(self, mode1: int = 0, mode2: int = 0, mode3: int = 0) -> int:
        self.end = True
        return ops.LENGTHS[ops.HLT]

    HANDLERS = {
        ops.ADD: add_op,
        ops.MUL: multiply_op,
        ops.INP: input_op,
        ops.OUT: output_op,
        ops.JPT: jump_true_op,
        ops.JPF: jump_false_op,
        ops.LTN: less_than_op,
        ops.EQL: equal_op,
        ops.ARB: adjust_relative_op,
        ops.HLT: end_op
    }

    # -- Implementation -- #

    async def execute(self):
        code = self.opcode()

        if code.op not in self.HANDLERS:
            raise Fault(f'Unknown opcode {code.op} at {self.pointer} in {self.name or "computer"}')

        if lg.getLogger().isEnabledFor(lg.DEBUG):
            self.debug_dump()

        handler = self.HANDLERS[code.op]
        length = handler(self, code.mode1, code.mode2, code.mode3)

        if asyncio.iscoroutine(length):
            length = await length

        if length is None:
            # Starved in loop mode: retry the same instruction on the next turn
            await asyncio.sleep(0)
            return

        self.next(length)

    def reset(self, program: Sequence[int], initial_input: Sequence[int] | None):
        self.memory.load(program)
        self.pointer = 0
        self.relative_base = 0
        self.input.clear()
        self.input.extend(initial_input or [])
        self.output = []
        self.end = False
        self.input_closed = False

    async def run(
        self,
        program: Sequence[int],
        initial_input: Sequence[int] | None = None,
        settings: RunSettings | None = None
    ) -> list[int]:
        if settings is None:
            settings = RunSettings()

        self.reset(program, initial_input)
        self.logging = settings.logging
        self.loop = settings.loop

        lg.info(f'Running {self.name or "computer"} ({len(program)} cells, loop={self.loop})')

        while not self.end:
            await self.execute()

        lg.info(f'{self.name or "computer"} halted with {len(self.output)} outputs')

        if self.output_computer is not None:
            self.output_computer.input_closed = True

        return self.output
