INPUT_PROMPT = 'input: '

BLACK = 0
WHITE = 1

GLYPHS = {
    BLACK: '.',
    WHITE: '█'
}

TURN_LEFT = 0
TURN_RIGHT = 1

# Clockwise from up; rows grow downwards
HEADINGS = [
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 0)
]
