class Chip8Exception(Exception):
    """
    The base class for every error raised by the emulator core. None of
    these are recovered from inside the core: the caller decides whether
    to halt, reset or report.
    """


class UnknownOpCodeException(Chip8Exception):
    """
    A class to raise unknown op code exceptions.
    """
    def __init__(self, op_code):
        Chip8Exception.__init__(self, "Unknown op-code: {:04X}".format(op_code))
        self.op_code = op_code


class MemoryOverflowException(Chip8Exception):
    """
    Raised when the program counter or a computed address falls outside
    of the addressable memory.
    """
    def __init__(self, address):
        Chip8Exception.__init__(self, "Memory overflow at address: {:X}".format(address))
        self.address = address


class StackOverflowException(Chip8Exception):
    """
    Raised when a subroutine call is made with the call stack already full.
    """
    def __init__(self, depth):
        Chip8Exception.__init__(self, "Stack overflow: depth {} exceeded".format(depth))
        self.depth = depth


class StackUnderflowException(Chip8Exception):
    """
    Raised when returning from a subroutine with an empty call stack.
    """
    def __init__(self):
        Chip8Exception.__init__(self, "Stack underflow: return with empty stack")


class RomTooLargeException(Chip8Exception):
    """
    Raised when a program does not fit between the program start address
    and the top of memory.
    """
    def __init__(self, size, available):
        Chip8Exception.__init__(
            self, "ROM too large: {} bytes, {} available".format(size, available))
        self.size = size
        self.available = available


class RomReadException(Chip8Exception):
    """
    Raised by the loader when a ROM file is missing or cannot be read.
    """
    def __init__(self, path, reason):
        Chip8Exception.__init__(self, "Could not read ROM {}: {}".format(path, reason))
        self.path = path
