''' Instruction model '''

from dataclasses import dataclass
from typing import ClassVar, Dict, TypeAlias

import simply.common.ops as ops


@dataclass(frozen=True)
class OneRegister:
    OPCODE: ClassVar[str]
    register: str

    def __str__(self) -> str:
        return f'{self.OPCODE} {self.register}'


@dataclass(frozen=True)
class RegisterValue:
    OPCODE: ClassVar[str]
    register: str
    value: int

    def __str__(self) -> str:
        return f'{self.OPCODE} {self.register} {self.value}'


@dataclass(frozen=True)
class TwoRegisters:
    OPCODE: ClassVar[str]
    first: str
    second: str

    def __str__(self) -> str:
        return f'{self.OPCODE} {self.first} {self.second}'


@dataclass(frozen=True)
class Out(OneRegister):
    OPCODE = ops.OUT


@dataclass(frozen=True)
class Jmp(OneRegister):
    OPCODE = ops.JMP


@dataclass(frozen=True)
class Chr(OneRegister):
    OPCODE = ops.CHR


@dataclass(frozen=True)
class Set(RegisterValue):
    OPCODE = ops.SET


@dataclass(frozen=True)
class Cpy(TwoRegisters):
    OPCODE = ops.CPY


@dataclass(frozen=True)
class Add(TwoRegisters):
    OPCODE = ops.ADD


@dataclass(frozen=True)
class Sub(TwoRegisters):
    OPCODE = ops.SUB


@dataclass(frozen=True)
class Jwz(TwoRegisters):
    OPCODE = ops.JWZ


@dataclass(frozen=True)
class Jnz(TwoRegisters):
    OPCODE = ops.JNZ


@dataclass(frozen=True)
class Jwn(TwoRegisters):
    OPCODE = ops.JWN


@dataclass(frozen=True)
class Jwp(TwoRegisters):
    OPCODE = ops.JWP


@dataclass(frozen=True)
class Gth(TwoRegisters):
    OPCODE = ops.GTH


@dataclass(frozen=True)
class Lth(TwoRegisters):
    OPCODE = ops.LTH


Instruction: TypeAlias = Out | Jmp | Chr | Set | Cpy | Add | Sub \
    | Jwz | Jnz | Jwn | Jwp | Gth | Lth

Program: TypeAlias = tuple[Instruction, ...]

# Opcode keyword -> instruction class
INSTRUCTIONS: Dict[str, type] = {
    cls.OPCODE: cls for cls in (
        Out, Jmp, Chr,
        Set,
        Cpy, Add, Sub, Jwz, Jnz, Jwn, Jwp, Gth, Lth
    )
}
