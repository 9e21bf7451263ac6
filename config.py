# config.py

import os

# -- Field --
WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
GAME_OBJECT_SIZE = 150
TARGET_FPS = 60
FRAME_TIME = 1.0 / TARGET_FPS
DEBUG_INTERVAL = 60  # frames between debug lines

# -- Sensor --
DEAD_ZONE = 400.0
MIN_TOTAL_WEIGHT = 2000.0
POLL_TIMEOUT_MS = 100
POLL_TIMEOUT_THRESHOLD = 100
COB_SCALE_GENERAL = 0.00015
COB_SCALE_DODGE = 0.00025
INACTIVITY_TIMEOUT_SECONDS = 15.0

# -- Motion --
SPRING_CONSTANT = 10.0
DAMPING_FACTOR = 5.0
TRAIL_LENGTH = 60

# -- Menus --
MENU_SELECT_TIME_REQUIRED = 1.5
SELECT_LEFT_THRESHOLD = -200.0
SELECT_RIGHT_THRESHOLD = 200.0
SELECT_CENTER_RADIUS = 150.0
TRANSITION_DURATION = 1.5
TRANSITION_SHAKE_MAX = 20.0
WIN_ANIMATION_DURATION = 2.5

# -- Balance Hold --
BH_HOLD_TIME_REQUIRED = 1.5
BH_GRACE_ZONE_RADIUS = 200
BH_HOLD_RADIUS = 100
BH_TARGET_PULSE_SPEED = 8.0
BH_GOALS = {'easy': 10, 'medium': 15, 'hard': 25}
BH_TARGET_SPEEDS = {'easy': 0.0, 'medium': 25.0, 'hard': 50.0}

# -- Coin Collector --
CC_GOALS = {'easy': 15, 'medium': 20, 'hard': 30}
COIN_SAFE_MARGIN = 300
COIN_RADIUS = 150
COIN_PICKUP_FACTOR = 1.2
COIN_SPAWN_MIN_DIST_PLAYER = 250
CC_COIN_TIMER = 10.0

# -- Dodge --
MAX_DODGE_BLOCKS = 10
BLOCK_WIDTH = 50
BLOCK_HEIGHT = 100
BLOCK_INITIAL_SPEED = 300.0
BLOCK_SPEED_INCREMENT = 50.0
BLOCK_SPAWN_INTERVAL = 2.0
BLOCK_SPAWN_INTERVAL_DECAY = 0.01
BLOCK_SPAWN_INTERVAL_MIN = 0.5

# -- Confetti --
NUM_CONFETTI = 150
CONFETTI_LIFETIME = 2.0
CONFETTI_GRAVITY = 200.0
CONFETTI_SPREAD = 300.0

# -- Players --
PLAYER_PROFILES = [
    {"name": "Player 1"},
    {"name": "Player 2"},
    {"name": "Player 3"},
]

# -- Paths --
DATA_DIR = os.environ.get('BOARDPOWER_DATA_DIR', '.')
ASSET_DIR = os.environ.get('BOARDPOWER_ASSET_DIR', 'assets')
BOARD_DEVICE = os.environ.get('BOARDPOWER_DEVICE')
BOARD_DEVICE_NAME = "Nintendo Wii Remote Balance Board"
