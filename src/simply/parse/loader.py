import sys
import logging as lg
from pathlib import Path
from typing import Iterable

import click

from simply.parse.grammar import InvalidSyntax, parse_instruction
from simply.parse.instructions import Instruction, Program


EXIT_OK = 0
EXIT_SYNTAX_ERROR = 1


def parse_lines(lines: Iterable[str]) -> Program:
    ''' Parses a whole program, stopping at the first invalid line '''

    instructions: list[Instruction] = []

    for line_no, line in enumerate(lines, start=1):
        try:
            instructions.append(parse_instruction(line))
        except InvalidSyntax as e:
            e.line_no = line_no
            raise

    return tuple(instructions)


def load_file(filepath: str | Path) -> Program:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading {filepath}')
    program = parse_lines(filepath.read_text(encoding='utf-8').splitlines())
    lg.debug(f'Loaded {len(program)} instructions from {filepath.name}')
    return program


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(verbose: bool, source: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)

    try:
        program = load_file(source)
    except InvalidSyntax as e:
        lg.error(f'Syntax error in {source.name}, {e}')
        sys.exit(EXIT_SYNTAX_ERROR)

    click.echo(f'{source}: {len(program)} instructions')
    sys.exit(EXIT_OK)


if __name__ == '__main__':
    check()
