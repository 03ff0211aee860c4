import pygame
import pytest

from chip8_keyboard import translate_key
from chip8_keypad import Keypad


class TestKeypad:

    def test_starts_released(self):
        keypad = Keypad()
        assert not any(keypad.is_pressed(key) for key in range(16))
        assert keypad.first_pressed() is None

    def test_set_and_release(self):
        keypad = Keypad()
        keypad.set_key(0xB, True)
        assert keypad.is_pressed(0xB)
        keypad.set_key(0xB, False)
        assert not keypad.is_pressed(0xB)

    def test_first_pressed_is_lowest(self):
        keypad = Keypad()
        keypad.set_key(0xE, True)
        keypad.set_key(0x2, True)
        assert keypad.first_pressed() == 0x2

    def test_release_all(self):
        keypad = Keypad()
        keypad.set_key(0x1, True)
        keypad.release_all()
        assert keypad.first_pressed() is None

    @pytest.mark.parametrize('key', [-1, 16, 0x20])
    def test_bad_index(self, key):
        with pytest.raises(ValueError):
            Keypad().set_key(key, True)
        with pytest.raises(ValueError):
            Keypad().is_pressed(key)


class TestKeyboardTranslation:

    def test_mapped_keys(self):
        assert translate_key(pygame.K_KP0) == 0x0
        assert translate_key(pygame.K_KP9) == 0x9
        assert translate_key(pygame.K_f) == 0xF

    def test_unmapped_key(self):
        assert translate_key(pygame.K_SPACE) is None
