# --- Display ---
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
FPS = 60

# --- World / Physics (per-frame units) ---
GRAVITY_BASE = 0.5          # added to vy every frame (px/frame^2)
JUMP_FORCE = -12.0          # vy impulse on jump (px/frame)
PLAYER_SPEED = 5.0          # instantaneous horizontal speed (px/frame)
PLATFORM_FALL_SPEED = 5.0   # sink rate of a triggered falling platform
CHAOS_FLIP_CHANCE = 0.01    # per-frame enemy reversal probability when chaos > 0

# --- Player ---
PLAYER_W = 32
PLAYER_H = 32
PLAYER_START_X = 100.0
PLAYER_START_Y = 500.0

# --- Enemies ---
ENEMY_W = 32
ENEMY_H = 32

# --- Session ---
LIVES_START = 3
LEVEL_COUNT = 5
SCORE_PER_LEVEL = 100       # completing level N scores N * SCORE_PER_LEVEL
SEED_DEFAULT = 12345

# --- Effects ---
LANDING_SHAKE = 5.0
DEATH_SHAKE = 10.0
SHAKE_DECAY = 0.5
PARTICLE_LIFE = 30          # frames
JUMP_PARTICLES = 5
DEATH_PARTICLES = 10
PARTICLE_SPREAD_X = 10.0    # spawn x jitter (+/- px)
PARTICLE_MAX_VX = 2.0
PARTICLE_MAX_UP = 4.0

# --- Sound cues: (frequency Hz, duration s) ---
SOUND_JUMP = (440.0, 0.1)
SOUND_DEATH = (220.0, 0.3)
SOUND_LEVEL_COMPLETE = (880.0, 0.5)
SOUND_VOLUME = 0.1
SAMPLE_RATE = 22050

# --- Colors (RGB) ---
COLOR_BG = (0, 0, 0)
COLOR_FG = (255, 255, 255)
COLOR_PLAT = (0, 255, 0)
COLOR_PLAT_FALLING = (0, 150, 0)
COLOR_ENEMY = (255, 0, 0)
COLOR_PORTAL = (255, 255, 0)
COLOR_PLAYER = (0, 0, 255)
COLOR_PARTICLE = (255, 255, 255)
COLOR_PANEL = (20, 24, 40)
COLOR_PANEL_EDGE = (90, 130, 180)
