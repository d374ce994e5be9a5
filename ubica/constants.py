"""Engine-wide numeric constants."""

PI = 3.14159265

SPRITE_SIZE = 64.0

WORLD_HEIGHT = 1080.0
WORLD_WIDTH = 1536.0

PARTICLE_RADIUS = 2.0
PARTICLE_SPEED = 5.0

BURSTING_BUBBLE_PARTICLES_COUNT = 100