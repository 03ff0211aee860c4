from collections import namedtuple

from chip8_addresses import OPCODE_MASK, X_MASK, Y_MASK, N_MASK, KK_MASK, NNN_MASK


class Instruction(namedtuple('Instruction', 'word m x y n kk nnn')):
    """
    A decoded Chip 8 instruction word. The fields are taken from the word
    as follows:

       Bits:  15-12     11-8      7-4       3-0
                m         x        y         n
                                  kk        kk
                         nnn      nnn       nnn
    """
    __slots__ = ()

    def mnemonic(self):
        """
        Returns the assembly form of the instruction, or '???' if the word
        is not a valid Chip 8 instruction.
        """
        m, x, y, n, kk, nnn = self.m, self.x, self.y, self.n, self.kk, self.nnn
        if self.word == 0x00E0:
            return 'CLS'
        if self.word == 0x00EE:
            return 'RET'
        if m == 0x1:
            return 'JUMP {:03X}'.format(nnn)
        if m == 0x2:
            return 'CALL {:03X}'.format(nnn)
        if m == 0x3:
            return 'SKE V{:X}, {:02X}'.format(x, kk)
        if m == 0x4:
            return 'SKNE V{:X}, {:02X}'.format(x, kk)
        if m == 0x5 and n == 0:
            return 'SKE V{:X}, V{:X}'.format(x, y)
        if m == 0x6:
            return 'LOAD V{:X}, {:02X}'.format(x, kk)
        if m == 0x7:
            return 'ADD V{:X}, {:02X}'.format(x, kk)
        if m == 0x8 and n in LOGICAL_MNEMONICS:
            return '{} V{:X}, V{:X}'.format(LOGICAL_MNEMONICS[n], x, y)
        if m == 0x9 and n == 0:
            return 'SKNE V{:X}, V{:X}'.format(x, y)
        if m == 0xA:
            return 'LOAD I, {:03X}'.format(nnn)
        if m == 0xB:
            return 'JUMP [V0] + {:03X}'.format(nnn)
        if m == 0xC:
            return 'RAND V{:X}, {:02X}'.format(x, kk)
        if m == 0xD:
            return 'DRAW V{:X}, V{:X}, {:X}'.format(x, y, n)
        if m == 0xE and kk == 0x9E:
            return 'SKPR V{:X}'.format(x)
        if m == 0xE and kk == 0xA1:
            return 'SKUP V{:X}'.format(x)
        if m == 0xF and kk in MISC_MNEMONICS:
            return MISC_MNEMONICS[kk].format(x)
        return '???'


LOGICAL_MNEMONICS = {
    0x0: 'LOAD',
    0x1: 'OR',
    0x2: 'AND',
    0x3: 'XOR',
    0x4: 'ADD',
    0x5: 'SUB',
    0x6: 'SHR',
    0x7: 'SUBN',
    0xE: 'SHL',
}

MISC_MNEMONICS = {
    0x07: 'LOAD V{:X}, DELAY',
    0x0A: 'KEYD V{:X}',
    0x15: 'LOAD DELAY, V{:X}',
    0x18: 'LOAD SOUND, V{:X}',
    0x1E: 'ADD I, V{:X}',
    0x29: 'LOAD I, FONT V{:X}',
    0x33: 'BCD V{:X}',
    0x55: 'STOR [I], V0-V{:X}',
    0x65: 'LOAD V0-V{:X}, [I]',
}


def decode_instruction(word):
    """
    Split a 16-bit instruction word into its fields.

    :param word: the instruction word
    :return: the decoded Instruction
    """
    return Instruction(
        word=word,
        m=(word & OPCODE_MASK) >> 12,
        x=(word & X_MASK) >> 8,
        y=(word & Y_MASK) >> 4,
        n=word & N_MASK,
        kk=word & KK_MASK,
        nnn=word & NNN_MASK,
    )
