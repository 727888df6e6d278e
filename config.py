# === Global configuration & tuning ===
# Logical play area; everything in the simulation uses these units.
WIDTH, HEIGHT = 320, 200
# Window is the logical surface scaled up by this factor
SCALE = 2
FPS = 60

# CGA palette
BLACK = (0, 0, 0)
CYAN = (85, 255, 255)
MAGENTA = (255, 85, 255)
WHITE = (255, 255, 255)
BG = BLACK

# Sprite characters -> palette colors ('.' is transparent)
SPRITE_PALETTE = {
    'C': CYAN,
    'M': MAGENTA,
    'W': WHITE,
    'B': BLACK,
}
SPRITE_SIZE = 16

# Physics & player tuning (tuned for ~60 Hz)
GRAVITY = 0.5
PLAYER_SPEED = 3
PLAYER_JUMP_V = -10
PLAYER_W, PLAYER_H = 16, 16

# Melee attack
ATTACK_DURATION = 15
ATTACK_COOLDOWN = 30
ATTACK_HITBOX_W, ATTACK_HITBOX_H = 16, 16

# Damage response
INVULNERABLE_FRAMES = 60
IFRAME_BLINK_INTERVAL = 5
HURT_BOUNCE_VY = -5
HURT_KNOCKBACK_VX = 4

# Falling below this y counts as a fall-death
FALL_LIMIT_Y = HEIGHT
RESPAWN_POINT = (20, 20)

# Enemies
ENEMY_W, ENEMY_H = 16, 16
ENEMY_PATROL_SPEED = 1

# Session rules
START_LIVES = 3
START_LEVEL = 1
KILL_SCORE = 50
LEVEL_SCORE = 100

# === Procedural level layout ===
FLOOR_Y = 184
FLOOR_H = 16
TIER_COUNT = 3
TIER_SPACING = 50
TIER_MAX_PLATFORMS = 2
PLATFORM_H = 8
PLATFORM_MIN_W = 40
PLATFORM_W_RANGE = 60
ENEMY_SPAWN_CHANCE = 0.6

EXIT_MIN_X = 20
EXIT_X_RANGE = 280
EXIT_Y = 20
EXIT_PLATFORM_OFFSET_X = -20
EXIT_PLATFORM_W = 50
DOOR_W, DOOR_H = 16, 32

PLAYER_SPAWN = (10, 160)

FLOOR_ENEMY_MIN_X = 100
FLOOR_ENEMY_X_RANGE = 200

# Default key bindings (pygame key names, see pygame.key.key_code)
KEY_BINDINGS = {
    'left': ('left', 'a'),
    'right': ('right', 'd'),
    'jump': ('up', 'w'),
    'attack': ('space',),
}

# Runtime (JSON) configuration
RUNTIME_CONFIG_PATH = "config/game_config.json"
