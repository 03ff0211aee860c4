import pytest

from chip8_framebuffer import FrameBuffer, SCREEN_WIDTH, SCREEN_HEIGHT


def lit_pixels(framebuffer):
    return {(row, col)
            for row, pixel_row in enumerate(framebuffer.rows())
            for col, pixel in enumerate(pixel_row) if pixel}


class TestFrameBuffer:

    def test_starts_dark_and_unchanged(self):
        framebuffer = FrameBuffer()
        assert lit_pixels(framebuffer) == set()
        assert not framebuffer.take_changed_flag()

    def test_changed_flag_is_read_and_clear(self):
        framebuffer = FrameBuffer()
        framebuffer.clear()
        assert framebuffer.take_changed_flag()
        assert not framebuffer.take_changed_flag()

    def test_bit_seven_is_leftmost(self):
        framebuffer = FrameBuffer()
        framebuffer.draw_sprite(0, 0, b'\x81')
        assert lit_pixels(framebuffer) == {(0, 0), (0, 7)}

    def test_xor_and_collision(self):
        framebuffer = FrameBuffer()
        assert not framebuffer.draw_sprite(3, 4, b'\xC0')
        assert framebuffer.draw_sprite(4, 4, b'\x80')
        assert lit_pixels(framebuffer) == {(4, 3)}

    def test_no_collision_on_dark_pixels(self):
        framebuffer = FrameBuffer()
        framebuffer.draw_sprite(0, 0, b'\x80')
        assert not framebuffer.draw_sprite(1, 0, b'\x80')

    def test_wraps_rows_and_columns_independently(self):
        framebuffer = FrameBuffer()
        framebuffer.draw_sprite(SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1, b'\xC0\xC0')
        assert lit_pixels(framebuffer) == {
            (SCREEN_HEIGHT - 1, SCREEN_WIDTH - 1), (SCREEN_HEIGHT - 1, 0),
            (0, SCREEN_WIDTH - 1), (0, 0),
        }

    def test_coordinates_beyond_screen_wrap(self):
        framebuffer = FrameBuffer()
        framebuffer.draw_sprite(SCREEN_WIDTH + 2, SCREEN_HEIGHT + 1, b'\x80')
        assert lit_pixels(framebuffer) == {(1, 2)}

    def test_empty_sprite_marks_changed(self):
        framebuffer = FrameBuffer()
        assert not framebuffer.draw_sprite(0, 0, b'')
        assert framebuffer.take_changed_flag()

    def test_clear(self):
        framebuffer = FrameBuffer()
        framebuffer.draw_sprite(10, 10, b'\xFF\xFF')
        framebuffer.clear()
        assert lit_pixels(framebuffer) == set()
        assert framebuffer.take_changed_flag()

    def test_clear_without_marking_changed(self):
        framebuffer = FrameBuffer()
        framebuffer.draw_sprite(10, 10, b'\xFF')
        framebuffer.take_changed_flag()
        framebuffer.clear(mark_changed=False)
        assert lit_pixels(framebuffer) == set()
        assert not framebuffer.take_changed_flag()

    @pytest.mark.parametrize('row,col', [(-1, 0), (0, -1), (32, 0), (0, 64)])
    def test_pixel_at_bounds(self, row, col):
        framebuffer = FrameBuffer()
        with pytest.raises(IndexError):
            framebuffer.pixel_at(row, col)
