from typing import Sequence


class MemoryViolation(Exception):
    pass


class Memory():
    ''' Sparse, zero-filled integer store '''

    cells: dict[int, int]
    size: int  # Highest touched index + 1

    def __init__(self, program: Sequence[int] = ()):
        self.load(program)

    def __len__(self) -> int:
        return self.size

    def check(self, index: int):
        if index < 0:
            raise MemoryViolation(f'Negative address {index}')

    def touch(self, index: int):
        if index >= self.size:
            self.size = index + 1

    def load(self, program: Sequence[int]):
        self.cells = dict(enumerate(program))
        self.size = len(program)

    def dump(self) -> list[int]:
        return [self.cells.get(i, 0) for i in range(self.size)]

    def read(self, index: int) -> int:
        self.check(index)
        self.touch(index)
        return self.cells.setdefault(index, 0)

    def write(self, index: int, value: int):
        self.check(index)
        self.touch(index)
        self.cells[index] = value
