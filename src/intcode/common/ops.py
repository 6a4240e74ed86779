# Basic
ADD = 1     # P1 + P2 -> [P3]
MUL = 2     # P1 * P2 -> [P3]
INP = 3     # input -> [P1]
OUT = 4     # P1 -> output
JPT = 5     # if P1 .ne 0 jmp P2
JPF = 6     # if P1 .eq 0 jmp P2
LTN = 7     # P1 .lt P2 -> [P3]
EQL = 8     # P1 .eq P2 -> [P3]
ARB = 9     # RB + P1 -> RB
HLT = 99

# Addressing modes
POSITION = 0
IMMEDIATE = 1
RELATIVE = 2

MODES = (POSITION, IMMEDIATE, RELATIVE)

# Instruction lengths, opcode included
LENGTHS = {
    ADD: 4,
    MUL: 4,
    INP: 2,
    OUT: 2,
    JPT: 3,
    JPF: 3,
    LTN: 4,
    EQL: 4,
    ARB: 2,
    HLT: 1
}

# Returned by jumps that already moved the pointer
JUMPED = 0
