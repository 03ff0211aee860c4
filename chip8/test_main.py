import pytest

from chip8_exception import RomReadException
from chip8_main import read_rom_file, parse_arguments


class TestReadRom:

    def test_reads_bytes(self, tmp_path):
        rom = tmp_path / 'test.ch8'
        rom.write_bytes(b'\x60\x05\x70\x03')
        assert read_rom_file(str(rom)) == b'\x60\x05\x70\x03'

    def test_missing_file(self, tmp_path):
        with pytest.raises(RomReadException) as raised:
            read_rom_file(str(tmp_path / 'missing.ch8'))
        assert raised.value.path.endswith('missing.ch8')


class TestArguments:

    def test_defaults(self):
        args = parse_arguments(['game.ch8'])
        assert args.rom == 'game.ch8'
        assert args.scale == 10
        assert args.op_delay == 1
        assert not args.verbose
        assert args.seed is None
        assert not args.realtime_timers

    def test_options(self):
        args = parse_arguments(['-s', '5', '-d', '3', '-v', '--seed', '42',
                                '--realtime-timers', 'game.ch8'])
        assert args.scale == 5
        assert args.op_delay == 3
        assert args.verbose
        assert args.seed == 42
        assert args.realtime_timers
