from pygame import display, HWSURFACE, DOUBLEBUF, Color, draw

from chip8_framebuffer import SCREEN_WIDTH, SCREEN_HEIGHT

SCREEN_NAME = 'CHIP8 Emulator'

# The depth of the screen is the number of bits used to represent the color
# of a pixel.
SCREEN_DEPTH = 8

# The colors of the pixels to draw. The Chip 8 supports two colors: 0 (off)
# and 1 (on). The format of the colors is in RGBA format.
PIXEL_COLORS = {
    0: Color(0, 0, 0, 255),
    1: Color(250, 250, 250, 255)
}


class Screen(object):
    """
    Paints a Chip 8 frame buffer onto a pygame window. Each Chip 8 pixel
    becomes a square of ratio x ratio window pixels, since the original
    resolution of 64 x 32 is quite small.
    """
    def __init__(self, ratio, screen_height=SCREEN_HEIGHT, screen_width=SCREEN_WIDTH):
        """
        :param ratio: the scaling factor to apply to the screen
        :param screen_height: the height of the screen in Chip 8 pixels
        :param screen_width: the width of the screen in Chip 8 pixels
        """
        self.screen_height = screen_height
        self.screen_width = screen_width
        self.scaling_ratio = ratio
        self.screen_surface = None

    def init_display(self):
        """
        Attempts to initialize a screen with the specified height and width.
        The screen will by default be of depth SCREEN_DEPTH, and will be
        double-buffered in hardware (if possible).
        """
        display.init()
        self.screen_surface = display.set_mode(
            ((self.screen_width * self.scaling_ratio),
             (self.screen_height * self.scaling_ratio)),
            HWSURFACE | DOUBLEBUF,
            SCREEN_DEPTH)
        display.set_caption(SCREEN_NAME)
        self.screen_surface.fill(PIXEL_COLORS[0])
        display.flip()

    def draw_screen_pixel(self, x_axis_position, y_axis_position, pixel_color):
        """
        Draw one Chip 8 pixel into the back buffer. The coordinate system
        starts with (0, 0) being in the top left of the screen.

        :param x_axis_position: the x coordinate to place the pixel
        :param y_axis_position: the y coordinate to place the pixel
        :param pixel_color: the color of the pixel to draw
        """
        draw.rect(self.screen_surface,
                  PIXEL_COLORS[pixel_color],
                  (x_axis_position * self.scaling_ratio,
                   y_axis_position * self.scaling_ratio,
                   self.scaling_ratio, self.scaling_ratio))

    def render(self, framebuffer):
        """
        Paint every pixel of the frame buffer and flip it to the display.

        :param framebuffer: the FrameBuffer to show
        """
        for y_axis_position, pixel_row in enumerate(framebuffer.rows()):
            for x_axis_position, pixel_color in enumerate(pixel_row):
                self.draw_screen_pixel(x_axis_position, y_axis_position, pixel_color)
        self.update_screen()

    @staticmethod
    def update_screen():
        """
        Updates the display by swapping the back buffer and screen buffer.
        According to the pygame documentation, the flip should wait for a
        vertical retrace when both HWSURFACE and DOUBLEBUF are set on the
        surface.
        """
        display.flip()

    @staticmethod
    def close_display():
        display.quit()
