"""Value profile constants.

These numbers decide how strongly a creature is pulled toward or pushed away
from what it perceives. Threats dominate everything else so prey always flee
first; food outweighs mates so a hungry animal eats before courting.
"""

# =============================================================================
# STATE THRESHOLDS
# =============================================================================
# Below this health fraction a creature is hungry: food gains value and it
# will feed when it can.
HUNGER_THRESHOLD = 0.5

# =============================================================================
# WOLF (PREDATOR) VALUES
# =============================================================================
WOLF_RIVAL_VALUE = -5
WOLF_MATE_VALUE = 20  # Only while the wolf wants to reproduce
WOLF_FOOD_VALUE = 50  # Only while hungry

# =============================================================================
# RABBIT (PREY) VALUES
# =============================================================================
RABBIT_THREAT_VALUE = -50
RABBIT_RIVAL_VALUE = -5
RABBIT_MATE_VALUE = 10
RABBIT_FOOD_VALUE = 30  # Only while hungry

# =============================================================================
# TERRAIN
# =============================================================================
# Wolves follow marked ground at half the scent strength (integer division).
SCENT_DIVISOR = 2

# =============================================================================
# CREATURE TEMPLATES
# =============================================================================
WOLF_MAX_HEALTH = 100
RABBIT_MAX_HEALTH = 40
