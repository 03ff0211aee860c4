import pytest

from chip8_addresses import FONT_SET, PROGRAM_COUNTER_START
from chip8_exception import MemoryOverflowException, RomTooLargeException
from chip8_memory import Memory


class TestMemory:

    def test_starts_zeroed(self):
        memory = Memory()
        assert len(memory) == 4096
        assert memory.read_range(0, 4096) == bytes(4096)

    def test_byte_access(self):
        memory = Memory()
        memory.write_byte(0x123, 0xAB)
        assert memory.read_byte(0x123) == 0xAB

    def test_write_byte_truncates_value(self):
        memory = Memory()
        memory.write_byte(0x10, 0x1FF)
        assert memory.read_byte(0x10) == 0xFF

    def test_word_is_big_endian(self):
        memory = Memory()
        memory.write_range(0x200, (0x12, 0x34))
        assert memory.read_word(0x200) == 0x1234

    @pytest.mark.parametrize('address', [-1, 4096, 5000])
    def test_byte_out_of_range(self, address):
        memory = Memory()
        with pytest.raises(MemoryOverflowException):
            memory.read_byte(address)
        with pytest.raises(MemoryOverflowException):
            memory.write_byte(address, 1)

    def test_word_straddling_top_of_memory(self):
        memory = Memory()
        with pytest.raises(MemoryOverflowException) as raised:
            memory.read_word(0xFFF)
        assert raised.value.address == 0xFFF

    def test_range_write_is_all_or_nothing(self):
        memory = Memory()
        with pytest.raises(MemoryOverflowException):
            memory.write_range(0xFFE, (1, 2, 3))
        assert memory.read_range(0xFFE, 2) == b'\x00\x00'

    def test_empty_range_at_top(self):
        memory = Memory()
        assert memory.read_range(4096, 0) == b''

    def test_load_font(self):
        memory = Memory()
        memory.load_font()
        assert memory.read_range(0, 80) == bytes(FONT_SET)

    def test_load_program(self):
        memory = Memory()
        memory.load_program(b'\x60\x05\x70\x03')
        assert memory.read_range(PROGRAM_COUNTER_START, 4) == b'\x60\x05\x70\x03'

    def test_program_too_large_writes_nothing(self):
        memory = Memory()
        with pytest.raises(RomTooLargeException) as raised:
            memory.load_program(b'\x01' * 3585)
        assert raised.value.available == 3584
        assert memory.read_byte(PROGRAM_COUNTER_START) == 0

    def test_clear(self):
        memory = Memory()
        memory.write_byte(0x300, 9)
        memory.clear()
        assert memory.read_byte(0x300) == 0
