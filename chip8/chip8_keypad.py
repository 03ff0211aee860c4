# The number of keys on the Chip 8 hex keypad
NUM_KEYS = 0x10


class Keypad(object):
    """
    The latch holding the state of the 16 Chip 8 keys. The driver writes it
    from keyboard events; the keyboard instructions only read it.
    """
    def __init__(self):
        self.key_states = [False] * NUM_KEYS

    def set_key(self, key_index, pressed):
        if not 0 <= key_index < NUM_KEYS:
            raise ValueError("key index out of range: {}".format(key_index))
        self.key_states[key_index] = bool(pressed)

    def is_pressed(self, key_index):
        if not 0 <= key_index < NUM_KEYS:
            raise ValueError("key index out of range: {}".format(key_index))
        return self.key_states[key_index]

    def first_pressed(self):
        """
        Returns the lowest numbered key that is down, or None.
        """
        for key_index, pressed in enumerate(self.key_states):
            if pressed:
                return key_index
        return None

    def release_all(self):
        self.key_states = [False] * NUM_KEYS
