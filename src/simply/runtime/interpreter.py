import sys
from pathlib import Path
import logging as lg

import click

from simply.common.conf import RunSettings
from simply.parse.grammar import InvalidSyntax
from simply.parse.loader import load_file
import simply.runtime.machine as machine


EXIT_HALT = 0
EXIT_SYNTAX_ERROR = 1
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def interpret(settings: RunSettings, source: Path) -> int:
    program = load_file(source)
    lg.info(f'Running {source.name} ({len(program)} instructions)')
    steps = machine.execute(program, trace=settings.trace)
    lg.info(f'Execution halted after {steps} steps')
    return steps


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--trace', is_flag=True, help='Logs every executed instruction')
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def run(ctx: click.Context, source: Path, **params):
    ctx.ensure_object(RunSettings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose or ctx.obj.trace else lg.INFO)

    try:
        interpret(ctx.obj, source)
        sys.exit(EXIT_HALT)

    except InvalidSyntax as e:
        lg.error(f'Syntax error in {source.name}, {e}')
        sys.exit(EXIT_SYNTAX_ERROR)

    except machine.ExecutionError as e:
        lg.error(f'Failed to execute {source.name}, {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)


if __name__ == '__main__':
    run()
