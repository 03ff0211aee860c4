# The total amount of memory to allocate for the emulator
MAX_MEMORY = 4096

# Where the font glyphs are loaded. Each glyph is 5 bytes long, so the glyph
# for digit d lives at FONT_START + d * 5.
FONT_START = 0x000
FONT_GLYPH_SIZE = 5

# Where the program counter should originally point. Everything below this
# address is reserved for the interpreter and the font set.
PROGRAM_COUNTER_START = 0x200

# The largest value the index register may hold (12-bit address space)
INDEX_LIMIT = 0xFFF

# Masks used to pull the fields out of an instruction word:
#
#    Bits:  15-12     11-8      7-4       3-0
#             M         X        Y         N
#                               KK        KK
#                      NNN      NNN       NNN
OPCODE_MASK = 0xF000
X_MASK = 0x0F00
Y_MASK = 0x00F0
N_MASK = 0x000F
KK_MASK = 0x00FF
NNN_MASK = 0x0FFF

BYTE_MASK = 0xFF

# The canonical hexadecimal font set, 0 through F
FONT_SET = (
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
)
