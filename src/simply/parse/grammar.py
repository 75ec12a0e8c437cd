''' Register and instruction grammar '''

import pyparsing as pp

import simply.common.ops as ops
from simply.common.conf import INT32_MIN, INT32_MAX
import simply.parse.instructions as i


class InvalidSyntax(Exception):
    line: str
    reason: str
    column: int | None
    line_no: int | None    # Set by the loader

    def __init__(self, line: str, reason: str, column: int | None = None):
        super().__init__(line, reason)
        self.line = line
        self.reason = reason
        self.column = column
        self.line_no = None

    def __str__(self) -> str:
        where = 'line' if self.line_no is None else f'line {self.line_no}'

        if self.column is not None:
            where += f', column {self.column}'

        return f"{where}: {self.reason}: '{self.line}'"


register = pp.Word(pp.alphas, pp.alphanums + '_').set_name('register')

value = pp.Regex('[+-]?[0-9]+').set_name('value')
value.set_parse_action(lambda r: int(r[0]))
value.add_condition(
    lambda r: INT32_MIN <= r[0] <= INT32_MAX,
    message='integer literal out of 32-bit range',
    fatal=True
)


def g_keywords(opcodes: tuple[str, ...]):
    return pp.MatchFirst([pp.Keyword(op) for op in opcodes]).set_name('keyword')


def g_form(*operands: pp.ParserElement):
    return pp.And(list(operands) + [pp.StringEnd()]).set_parse_action(
        lambda r: i.INSTRUCTIONS[r[0]](*r[1:])
    )


# Instruction forms, tried in this order
one_register = g_form(g_keywords(ops.ONE_REGISTER), register)
register_value = g_form(g_keywords(ops.REGISTER_VALUE), register, value)
two_registers = g_form(g_keywords(ops.TWO_REGISTERS), register, register)

instruction = (one_register | register_value | two_registers).set_name('instruction')

_register_prefix = register.copy().leave_whitespace()


def split_register(text: str) -> tuple[str, str]:
    ''' Longest register name prefix of text and the unconsumed rest '''

    try:
        name = _register_prefix.parse_string(text)[0]
    except pp.ParseBaseException as e:
        raise InvalidSyntax(text, 'expected register name', column=e.col) from e

    return name, text[len(name):]


def is_register(text: str) -> bool:
    try:
        _, rest = split_register(text)
    except InvalidSyntax:
        return False

    return rest == ''


def parse_instruction(line: str) -> i.Instruction:
    try:
        return instruction.parse_string(line)[0]
    except pp.ParseBaseException as e:
        raise InvalidSyntax(line, e.msg, column=e.col) from e
