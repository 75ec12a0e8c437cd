import pytest

import simply.common.ops as ops
import simply.parse.instructions as i
from simply.parse.grammar import InvalidSyntax, parse_instruction
from simply.runtime.machine import Machine


@pytest.mark.parametrize('line,expected', [
    ('set x 5', i.Set('x', 5)),
    ('set x -5', i.Set('x', -5)),
    ('set x +5', i.Set('x', 5)),
    ('out alpha', i.Out('alpha')),
    ('jmp target', i.Jmp('target')),
    ('chr c', i.Chr('c')),
    ('cpy a b', i.Cpy('a', 'b')),
    ('add a b', i.Add('a', 'b')),
    ('sub a b', i.Sub('a', 'b')),
    ('jwz a b', i.Jwz('a', 'b')),
    ('jnz a b', i.Jnz('a', 'b')),
    ('jwn a b', i.Jwn('a', 'b')),
    ('jwp a b', i.Jwp('a', 'b')),
    ('gth a b', i.Gth('a', 'b')),
    ('lth a b', i.Lth('a', 'b')),
])
def test_instructions(line, expected):
    assert parse_instruction(line) == expected


@pytest.mark.parametrize('line,expected', [
    ('set    x\t\t-5', i.Set('x', -5)),
    ('  out x  ', i.Out('x')),
    ('\tadd\ta\tb\t', i.Add('a', 'b')),
    ('cpy bear_nap   r0ck_and_r0ll', i.Cpy('bear_nap', 'r0ck_and_r0ll')),
])
def test_whitespace(line, expected):
    assert parse_instruction(line) == expected


def test_case_sensitive():
    assert parse_instruction('cpy X x') == i.Cpy('X', 'x')


@pytest.mark.parametrize('line', [
    '',
    'out',
    'out x y',
    'outx',
    'set x',
    'set x five',
    'set x 12abc',
    'set x 5 6',
    'set 5 x',
    'cpy a',
    'cpy a b c',
    'add a 5',
    'jmp 5',
    'mul a b',
    'OUT x',
    'out _x',
    'out 1x',
    'set_x 5',
])
def test_invalid(line):
    with pytest.raises(InvalidSyntax) as e:
        parse_instruction(line)

    assert e.value.line == line


def test_literal_range():
    assert parse_instruction('set x 2147483647') == i.Set('x', 2147483647)
    assert parse_instruction('set x -2147483648') == i.Set('x', -2147483648)

    for literal in ['2147483648', '-2147483649', '99999999999999999999']:
        with pytest.raises(InvalidSyntax) as e:
            parse_instruction(f'set x {literal}')

        assert '32-bit' in e.value.reason


def test_canonical_text():
    assert str(parse_instruction('  jwz   a   b ')) == 'jwz a b'
    assert str(parse_instruction('set x\t+7')) == 'set x 7'
    assert str(parse_instruction('chr c')) == 'chr c'


def test_instructions_are_immutable():
    instr = parse_instruction('set x 1')

    with pytest.raises(AttributeError):
        instr.value = 2  # type: ignore


def test_opcode_tables_agree():
    assert sorted(ops.ALL) == sorted(i.INSTRUCTIONS)
    assert len(ops.ALL) == len(set(ops.ALL))
    assert set(Machine.HANDLERS) == set(i.INSTRUCTIONS.values())

    samples = [(op, f'{op} a') for op in ops.ONE_REGISTER]
    samples += [(op, f'{op} a 1') for op in ops.REGISTER_VALUE]
    samples += [(op, f'{op} a b') for op in ops.TWO_REGISTERS]

    for op, line in samples:
        instr = parse_instruction(line)
        assert type(instr) is i.INSTRUCTIONS[op]
        assert instr.OPCODE == op
