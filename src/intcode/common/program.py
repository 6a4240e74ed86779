''' Program text grammar '''

from typing import Sequence

import pyparsing as pp


class ProgramSyntaxError(ValueError):
    pass


integer = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
separator = pp.Suppress(',')

program = integer + pp.ZeroOrMore(separator + integer) + pp.Optional(separator) + pp.StringEnd()


def parse_program(text: str) -> list[int]:
    try:
        return list(program.parse_string(text))

    except pp.ParseException as e:
        raise ProgramSyntaxError(f'Malformed program at line {e.lineno}, column {e.col}') from e


def format_program(code: Sequence[int]) -> str:
    return ','.join(str(v) for v in code)
