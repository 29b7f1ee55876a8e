# =============================================================================
# WORLD GRID - 10x10 overworld, player starts in the middle
# =============================================================================
GRID_WIDTH = 10
GRID_HEIGHT = 10
START_X = 5
START_Y = 5
SHOP_X = 0
SHOP_Y = 0
GRASS_DENSITY = 0.3  # tile is grass when the draw lands above 0.7

# =============================================================================
# ENCOUNTERS
# =============================================================================
ENCOUNTER_RATE = 0.2
WILD_LEVELS = (3, 4, 5)

# =============================================================================
# CREATURE STAT FORMULAS
# =============================================================================
MIN_LEVEL = 1
HP_PER_LEVEL = 2
ATTACK_PER_LEVEL = 1.5
CREATURE_ID_LENGTH = 9

# =============================================================================
# BATTLE DAMAGE AND REWARDS
# =============================================================================
PLAYER_DAMAGE_BONUS = 10  # damage = rand(attack) + 10
WILD_DAMAGE_BONUS = 5  # damage = rand(attack) + 5

WIN_REWARD_BASE = 50  # 50..149
WIN_REWARD_SPREAD = 100
CAPTURE_REWARD_BASE = 25  # 25..74
CAPTURE_REWARD_SPREAD = 50

# Catch probability = (1 - hp/maxHp) * CATCH_HP_WEIGHT + CATCH_FLOOR
CATCH_FLOOR = 0.3
CATCH_HP_WEIGHT = 0.7

# =============================================================================
# PACING DELAYS (seconds) - cosmetic, driven by the session scheduler
# =============================================================================
WILD_TURN_DELAY = 1.5
CAPTURE_RESOLVE_DELAY = 1.0
WIN_RETURN_DELAY = 3.0
CAPTURE_RETURN_DELAY = 3.0
FLEE_RETURN_DELAY = 1.0
LOSS_RETURN_DELAY = 2.0

# =============================================================================
# PLAYER START STATE AND ITEMS
# =============================================================================
STARTER_LEVEL = 5
STARTING_MONEY = 1000
STARTING_POKEBALLS = 5
STARTING_POTIONS = 2
POTION_HEAL_AMOUNT = 20

# =============================================================================
# LOGGING
# =============================================================================
LOG_FILE_LIMIT = 20
