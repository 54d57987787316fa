DEFAULT_CELL_COUNT_X = 6
DEFAULT_CELL_COUNT_Y = 4

# Zoom degree above which the grid counts as shown
VISIBLE_THRESHOLD = 0.001

# Width of a cell label in the text renderer
TEXT_CELL_WIDTH = 12
