import sys
import logging as lg
from typing import Iterable, TextIO

from simply.common.conf import FIRST_LINE, FALLBACK_GLYPH, wrap_int32
import simply.parse.instructions as i


class ExecutionError(Exception):
    line_no: int | None                 # Line of the failing instruction
    instruction: i.Instruction | None

    def __init__(self, *args):
        super().__init__(*args)
        self.line_no = None
        self.instruction = None

    def describe(self) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        if self.line_no is None:
            return self.describe()

        return f'line {self.line_no} ({self.instruction}): {self.describe()}'


class UninitializedRegister(ExecutionError):
    def __init__(self, register: str):
        super().__init__(register)
        self.register = register

    def describe(self) -> str:
        return f"register '{self.register}' is uninitialized"


class NegativeExecutionPointer(ExecutionError):
    def __init__(self, target: int):
        super().__init__(target)
        self.target = target

    def describe(self) -> str:
        return f'jump target {self.target} is before the first line'


def to_glyph(value: int) -> str:
    if 0 <= value <= 0x10FFFF and not 0xD800 <= value <= 0xDFFF:
        return chr(value)

    return FALLBACK_GLYPH


class Machine:
    program: i.Program
    registers: dict[str, int]
    ep: int         # Execution pointer, 0-based
    steps: int      # Executed instructions

    def __init__(
        self,
        program: Iterable[i.Instruction],
        output: TextIO | None = None,
        trace: bool = False
    ):
        self.program = tuple(program)
        self.output = output if output is not None else sys.stdout
        self.trace = trace

        self.registers = {}
        self.ep = 0
        self.steps = 0

    # - Helpers - #

    def debug_dump(self):
        state = [f'EP:{self.ep}', f'STEPS:{self.steps}']
        state.extend([f'{k}:{v}' for k, v in self.registers.items()])
        lg.debug(' '.join(state))

    def read(self, register: str) -> int:
        try:
            return self.registers[register]
        except KeyError:
            raise UninitializedRegister(register) from None

    def write(self, register: str, value: int):
        self.registers[register] = wrap_int32(value)

    def advance(self):
        self.ep += 1

    def jump(self, register: str):
        target = self.read(register)

        if target < FIRST_LINE:
            raise NegativeExecutionPointer(target)

        self.ep = target - FIRST_LINE

    def branch(self, taken: bool, register: str):
        if taken:
            self.jump(register)
        else:
            self.advance()

    def halted(self) -> bool:
        return not 0 <= self.ep < len(self.program)

    # - Operations - #

    def set(self, instr: i.Set):
        self.write(instr.register, instr.value)
        self.advance()

    def cpy(self, instr: i.Cpy):
        self.write(instr.second, self.read(instr.first))
        self.advance()

    def add(self, instr: i.Add):
        a = self.read(instr.first)
        b = self.read(instr.second)
        self.write(instr.second, b + a)
        self.advance()

    def sub(self, instr: i.Sub):
        a = self.read(instr.first)
        b = self.read(instr.second)
        self.write(instr.second, b - a)
        self.advance()

    def out(self, instr: i.Out):
        print(self.read(instr.register), file=self.output)
        self.advance()

    def chr(self, instr: i.Chr):
        glyph = to_glyph(self.read(instr.register))
        print(glyph, end='', file=self.output, flush=True)
        self.advance()

    def jmp(self, instr: i.Jmp):
        self.jump(instr.register)

    def jwz(self, instr: i.Jwz):
        self.branch(self.read(instr.first) == 0, instr.second)

    def jnz(self, instr: i.Jnz):
        self.branch(self.read(instr.first) != 0, instr.second)

    def jwn(self, instr: i.Jwn):
        self.branch(self.read(instr.first) < 0, instr.second)

    def jwp(self, instr: i.Jwp):
        self.branch(self.read(instr.first) > 0, instr.second)

    # Comparisons overwrite an existing register, they never create one
    def gth(self, instr: i.Gth):
        a = self.read(instr.first)
        b = self.read(instr.second)
        self.write(instr.second, 1 if a > b else -1)
        self.advance()

    def lth(self, instr: i.Lth):
        a = self.read(instr.first)
        b = self.read(instr.second)
        self.write(instr.second, 1 if a < b else -1)
        self.advance()

    HANDLERS = {
        i.Set: set,
        i.Cpy: cpy,
        i.Add: add,
        i.Sub: sub,
        i.Out: out,
        i.Chr: chr,
        i.Jmp: jmp,
        i.Jwz: jwz,
        i.Jnz: jnz,
        i.Jwn: jwn,
        i.Jwp: jwp,
        i.Gth: gth,
        i.Lth: lth
    }

    # -- Implementation -- #

    def exec_next(self):
        instr = self.program[self.ep]

        if self.trace:
            lg.debug(f'{self.ep + FIRST_LINE}: {instr}')

        try:
            self.HANDLERS[type(instr)](self, instr)
        except ExecutionError as e:
            e.line_no = self.ep + FIRST_LINE
            e.instruction = instr
            raise

        self.steps += 1

        if self.trace:
            self.debug_dump()

    def run(self) -> int:
        while not self.halted():
            self.exec_next()

        return self.steps


def execute(
    program: Iterable[i.Instruction],
    output: TextIO | None = None,
    trace: bool = False
) -> int:
    return Machine(program, output, trace).run()
