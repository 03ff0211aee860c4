from chip8_addresses import (
    MAX_MEMORY, FONT_START, FONT_SET, PROGRAM_COUNTER_START, BYTE_MASK
)
from chip8_exception import MemoryOverflowException, RomTooLargeException


class Memory(object):
    """
    The 4K of byte addressable memory of the Chip 8. The layout is:

        0x000 - 0x04F   hexadecimal font glyphs (16 x 5 bytes)
        0x050 - 0x1FF   reserved for the interpreter
        0x200 - 0xFFF   program and scratch space

    Every access is checked against the size of memory. Reading or writing
    outside of it raises a MemoryOverflowException instead of wrapping.
    """
    def __init__(self, size=MAX_MEMORY):
        self.memory_size = size
        self.memory_bytes = bytearray(size)

    def __len__(self):
        return self.memory_size

    def check_address(self, address, length=1):
        """
        Make sure that the range [address, address + length) lies inside of
        memory.

        :param address: the first address of the range
        :param length: the number of bytes in the range
        """
        if address < 0 or address + length > self.memory_size:
            raise MemoryOverflowException(address)

    def read_byte(self, address):
        self.check_address(address)
        return self.memory_bytes[address]

    def write_byte(self, address, value):
        self.check_address(address)
        self.memory_bytes[address] = value & BYTE_MASK

    def read_word(self, address):
        """
        Read a big-endian 16-bit word. Both bytes must be in memory.

        :param address: the address of the most significant byte
        :return: the 16-bit word
        """
        self.check_address(address, 2)
        return (self.memory_bytes[address] << 8) | self.memory_bytes[address + 1]

    def read_range(self, address, length):
        """
        Returns a copy of the bytes in [address, address + length).
        """
        self.check_address(address, length)
        return bytes(self.memory_bytes[address:address + length])

    def write_range(self, address, data):
        """
        Writes the data starting at address. The whole range is validated
        first, so a failing write leaves memory untouched.

        :param address: the address to start writing at
        :param data: an iterable of byte values
        """
        data = bytes(value & BYTE_MASK for value in data)
        self.check_address(address, len(data))
        self.memory_bytes[address:address + len(data)] = data

    def load_font(self):
        self.write_range(FONT_START, FONT_SET)

    def load_program(self, program, offset=PROGRAM_COUNTER_START):
        """
        Load the program bytes verbatim into memory.

        :param program: the raw Chip 8 bytecode
        :param offset: the location in memory at which to load the program
        """
        available = self.memory_size - offset
        if len(program) > available:
            raise RomTooLargeException(len(program), available)
        self.write_range(offset, program)

    def clear(self):
        self.memory_bytes = bytearray(self.memory_size)
