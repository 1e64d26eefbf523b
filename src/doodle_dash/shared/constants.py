"""
常量定义

Constants shared by the client, the canvas and the quality check.
"""

# 窗口配置
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Doodle Dash"
FPS = 60

# 游戏配置
GAME_DURATION = 60  # seconds
TICK_MS = 1000
IDLE_PROMPT = "Ready to draw?"

# 颜色定义 (RGB)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (128, 128, 128)
LIGHT_GRAY = (200, 200, 200)
PRIMARY = (59, 130, 246)
DESTRUCTIVE = (220, 38, 38)
SUCCESS = (34, 197, 94)

BACKGROUND_COLOR = WHITE

# 画笔配置
COLORS = [
    BLACK,
    (239, 68, 68),  # red
    (249, 115, 22),  # orange
    (234, 179, 8),  # yellow
    (132, 204, 22),  # lime
    (34, 197, 94),  # green
    (20, 184, 166),  # teal
    (6, 182, 212),  # cyan
    (59, 130, 246),  # blue
    (139, 92, 246),  # violet
    (236, 72, 153),  # pink
]
MIN_LINE_WIDTH = 1
MAX_LINE_WIDTH = 20
DEFAULT_LINE_WIDTH = 5

# Canvas aspect ratio (16:9)
CANVAS_ASPECT = (16, 9)

# 导出配置
DEFAULT_DOWNLOAD_NAME = "doodle"
PNG_MIME = "image/png"

# AI 配置
DEFAULT_MODEL = "gpt-4o"

# 界面文案
TITLE_TEXT = "Doodle Dash"
TAGLINE_TEXT = "Unleash your creativity in a timed drawing challenge. Ready to sketch?"
START_TEXT = "Start Drawing"
PROMPT_LABEL = "Your prompt is..."
LOADING_TITLE = "Checking your masterpiece..."
LOADING_TEXT = "Our AI art critic is examining your work. Please wait a moment."
SCRIBBLE_TITLE = "Needs a bit more work"
GREAT_TITLE = "Great Doodle!"
TRY_AGAIN_TEXT = "Try Again"
ERROR_TITLE = "Error"
ERROR_TEXT = "Could not check doodle quality. Please try again."
TOAST_DURATION = 4.0  # seconds
