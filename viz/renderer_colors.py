# viz/renderer_colors.py
# (r, g, b) palette
BG = (15, 15, 15)
SNAKE = (0, 204, 0)
HEAD = (60, 230, 90)
