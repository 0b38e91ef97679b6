# --- Board ---
LANES = 3
ROWS = 18

# --- Timing ---
TICK_MS = 180  # game speed
FPS = 60

# --- Window ---
SCREEN_WIDTH, SCREEN_HEIGHT = 640, 720

# --- Colors ---
COLOR_GRASS = (15, 120, 25)
COLOR_ROAD = (50, 50, 50)
COLOR_ROAD_BORDER = (255, 255, 0)
COLOR_LANE_LINE = (255, 255, 255)
COLOR_PLAYER = (0, 255, 0)
COLOR_OBSTACLE = (255, 0, 0)
COLOR_UI_TEXT = (255, 255, 255)
COLOR_MSG_TEXT = (255, 255, 0)

# --- Assets ---
PLAYER_IMAGE = "player_car.png"
ENEMY_IMAGE = "enemy_car.png"
