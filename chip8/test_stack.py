import pytest

from chip8_exception import StackOverflowException, StackUnderflowException
from chip8_stack import CallStack, MAX_STACK_DEPTH


class TestCallStack:

    def test_push_pop_order(self):
        stack = CallStack()
        stack.push(0x202)
        stack.push(0x304)
        assert stack.peek() == 0x304
        assert stack.pop() == 0x304
        assert stack.pop() == 0x202
        assert len(stack) == 0

    def test_overflow_keeps_contents(self):
        stack = CallStack()
        for address in range(MAX_STACK_DEPTH):
            stack.push(0x200 + address * 2)
        before = list(stack)
        with pytest.raises(StackOverflowException):
            stack.push(0x800)
        assert list(stack) == before
        assert stack.depth == MAX_STACK_DEPTH

    def test_underflow(self):
        stack = CallStack()
        with pytest.raises(StackUnderflowException):
            stack.pop()
        with pytest.raises(StackUnderflowException):
            stack.peek()

    def test_clear(self):
        stack = CallStack()
        stack.push(0x300)
        stack.clear()
        assert len(stack) == 0
        assert list(stack) == []
