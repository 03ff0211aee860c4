# The size of the Chip 8 display in pixels
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

# The number of pixels in one sprite row (one byte)
SPRITE_WIDTH = 8

PIXEL_OFF = 0
PIXEL_ON = 1


class FrameBuffer(object):
    """
    The Chip 8 display memory. The original Chip 8 screen was 64 x 32 with
    2 colors, stored here as 0 (off) and 1 (on). The buffer is only changed
    by the clear and draw instructions; a renderer polls take_changed_flag()
    to find out when it needs to repaint.
    """
    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
        self.screen_width = width
        self.screen_height = height
        self.pixels = [[PIXEL_OFF] * width for _ in range(height)]
        self.changed = False

    def pixel_at(self, row, col):
        """
        Returns whether the pixel at the specified location is on.

        :param row: the y coordinate to check
        :param col: the x coordinate to check
        :return: True if the pixel is on
        """
        if not (0 <= row < self.screen_height and 0 <= col < self.screen_width):
            raise IndexError("pixel ({}, {}) is off the screen".format(row, col))
        return self.pixels[row][col] == PIXEL_ON

    def take_changed_flag(self):
        """
        Returns whether the buffer changed since the last call, and resets
        the flag.
        """
        changed = self.changed
        self.changed = False
        return changed

    def clear(self, mark_changed=True):
        """
        Turns off all the pixels on the screen.

        :param mark_changed: whether a renderer should be told to repaint
        """
        self.pixels = [[PIXEL_OFF] * self.screen_width for _ in range(self.screen_height)]
        self.changed = mark_changed

    def draw_sprite(self, x_pos, y_pos, sprite_rows):
        """
        XOR a sprite onto the screen. Each byte of sprite_rows is one row of
        8 pixels, with bit 7 the leftmost pixel. For example, the 7 rows:

                       bit 7 6 5 4 3 2 1 0

           byte 0          0 1 1 1 1 1 0 0
           byte 1          0 1 0 0 0 0 0 0
           byte 2          0 1 0 0 0 0 0 0
           byte 3          0 1 1 1 1 1 0 0
           byte 4          0 1 0 0 0 0 0 0
           byte 5          0 1 0 0 0 0 0 0
           byte 6          0 1 1 1 1 1 0 0

        draw an 'E'. Columns wrap around the width and rows wrap around the
        height, each on its own, so a sprite hanging off the right edge
        reappears on the left of the same row.

        :param x_pos: the X position of the sprite
        :param y_pos: the Y position of the sprite
        :param sprite_rows: the bytes making up the sprite
        :return: True if a lit pixel was turned off
        """
        collision = False
        for y_index, row_byte in enumerate(sprite_rows):
            y_coord = (y_pos + y_index) % self.screen_height
            pixel_row = self.pixels[y_coord]

            for x_index in range(SPRITE_WIDTH):
                if not (row_byte >> (SPRITE_WIDTH - 1 - x_index)) & 0x1:
                    continue

                x_coord = (x_pos + x_index) % self.screen_width
                if pixel_row[x_coord] == PIXEL_ON:
                    collision = True
                pixel_row[x_coord] ^= PIXEL_ON

        self.changed = True
        return collision

    def rows(self):
        """
        Yields every row of the screen as a tuple of pixel values, top first.
        """
        for pixel_row in self.pixels:
            yield tuple(pixel_row)
