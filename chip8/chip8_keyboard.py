import pygame

# Sets which keys on the keyboard map to the Chip 8 keys
KEY_MAPPINGS = {
    pygame.K_KP0: 0x0,
    pygame.K_KP1: 0x1,
    pygame.K_KP2: 0x2,
    pygame.K_KP3: 0x3,
    pygame.K_KP4: 0x4,
    pygame.K_KP5: 0x5,
    pygame.K_KP6: 0x6,
    pygame.K_KP7: 0x7,
    pygame.K_KP8: 0x8,
    pygame.K_KP9: 0x9,
    pygame.K_a: 0xA,
    pygame.K_b: 0xB,
    pygame.K_c: 0xC,
    pygame.K_d: 0xD,
    pygame.K_e: 0xE,
    pygame.K_f: 0xF,
}


def translate_key(host_key):
    """
    Returns the Chip 8 key for a pygame key code, or None if the key is not
    part of the keypad.

    :param host_key: the pygame key code
    """
    return KEY_MAPPINGS.get(host_key)
