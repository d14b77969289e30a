BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREY = (50, 50, 50)
LIGHT_GREY = (90, 90, 90)
DARK_GREY = (28, 30, 34)
RED = (224, 50, 50)
GREEN = (114, 204, 114)
YELLOW = (240, 200, 80)
ORANGE = (255, 133, 85)
GOLD = (212, 175, 55)
BLUE = (93, 182, 229)

# Names usable in `~COLOR_<NAME>~` text markup
MARKUP_COLORS = {
    "BLACK": BLACK,
    "WHITE": WHITE,
    "GREY": GREY,
    "RED": RED,
    "GREEN": GREEN,
    "YELLOW": YELLOW,
    "ORANGE": ORANGE,
    "GOLD": GOLD,
    "BLUE": BLUE,
}
