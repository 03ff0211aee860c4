from chip8_exception import StackOverflowException, StackUnderflowException

# The number of nested subroutine calls the Chip 8 supports
MAX_STACK_DEPTH = 16


class CallStack(object):
    """
    The return address stack used by the CALL (2nnn) and RET (00EE)
    instructions. The stack has a fixed number of slots and a stack pointer
    that counts the slots in use.
    """
    def __init__(self, capacity=MAX_STACK_DEPTH):
        self.stack_capacity = capacity
        self.stack_slots = [0] * capacity
        self.stack_pointer = 0

    def __len__(self):
        return self.stack_pointer

    def __iter__(self):
        return iter(self.stack_slots[:self.stack_pointer])

    @property
    def depth(self):
        return self.stack_pointer

    def push(self, address):
        """
        Store a return address. The stack is left untouched when full.

        :param address: the return address to save
        """
        if self.stack_pointer >= self.stack_capacity:
            raise StackOverflowException(self.stack_capacity)
        self.stack_slots[self.stack_pointer] = address
        self.stack_pointer += 1

    def pop(self):
        """
        Remove and return the most recently pushed address.
        """
        if self.stack_pointer == 0:
            raise StackUnderflowException()
        self.stack_pointer -= 1
        return self.stack_slots[self.stack_pointer]

    def peek(self):
        if self.stack_pointer == 0:
            raise StackUnderflowException()
        return self.stack_slots[self.stack_pointer - 1]

    def clear(self):
        self.stack_slots = [0] * self.stack_capacity
        self.stack_pointer = 0
