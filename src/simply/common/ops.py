# One register
OUT = 'out'  # print R1
JMP = 'jmp'  # goto line R1
CHR = 'chr'  # print char(R1)

# One register, one value
SET = 'set'  # V1 -> R1

# Two registers
CPY = 'cpy'  # R1 -> R2
ADD = 'add'  # R2 + R1 -> R2
SUB = 'sub'  # R2 - R1 -> R2
JWZ = 'jwz'  # if R1 .eq 0 goto line R2
JNZ = 'jnz'  # if R1 .ne 0 goto line R2
JWN = 'jwn'  # if R1 .lt 0 goto line R2
JWP = 'jwp'  # if R1 .gt 0 goto line R2
GTH = 'gth'  # R1 .gt R2 -> R2 (1 / -1)
LTH = 'lth'  # R1 .lt R2 -> R2 (1 / -1)

ONE_REGISTER = (OUT, JMP, CHR)
REGISTER_VALUE = (SET,)
TWO_REGISTERS = (CPY, ADD, SUB, JWZ, JNZ, JWN, JWP, GTH, LTH)

ALL = ONE_REGISTER + REGISTER_VALUE + TWO_REGISTERS
