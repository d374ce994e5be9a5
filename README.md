# ubica

ubica is a small 2D game engine toolkit built on pygame. It provides the
building blocks that a small arcade game needs. The game itself is yours to
write.

## Contents

- `ubica.sprite.Sprite`: a texture, a position and an optional source
  rectangle `(left, top, width, height)`. A negative width or height mirrors
  the region. `image()` returns the surface that is shown, and `draw(surface)`
  blits it.
- `ubica.drawable.Drawable`: an object that owns a sprite and registers
  itself when it is created. `Drawable.draw_all(surface)` draws every
  registered sprite, in creation order. `release()` removes an object from the
  registry. A `Drawable` can also be used as a context manager, which releases
  it on exit. If you build it from a surface, it keeps a copy of that surface.
  If you build it from a `Sprite`, it uses that sprite. If you build it from
  anything else, it has no sprite and is not registered.
- `ubica.animation.Animation`: cycles through frames laid out in a row of a
  sprite sheet. The arguments are `x`, `y`, `width`, `height`, `frames_count`,
  `animation_speed` (in frames per second) and `step` (the distance between
  frames). `tick(time, rotate)` advances the animation and returns its
  `Sprite`. When `rotate` is true, the frame is mirrored horizontally.
- `ubica.entities`:
  - `Direction` has the values `LEFT` and `RIGHT`.
  - `GameObject` is a `Drawable` with a `size` and a `position`.
  - `Pickable` is an abstract `GameObject` with a `picked` flag. Implement
    `on_picked()` and call `_common_picked()` from it.
  - `Character` is abstract. It has `health`, `speed`, `size`, `position`,
    `direction` (default `RIGHT`), `run_animation` and `health_bar`. It
    provides `take_damage(damage)` and `add_hp(health)`. Implement
    `update(time)`.
- `ubica.health_bar.HealthBar`: a border, a background and a fill whose
  width follows the health value. `update(health, pos)` resizes the fill. A
  non-static bar (`is_static=False`, with `parent_size`) also moves so that it
  stays above `pos`. `draw(surface)` renders the bar.
- `ubica.particles`:
  - `Particle` is a small circle that flies in a random direction and fades
    out over one second.
  - `ParticleSystem.instance()` returns the shared system. It provides
    `update(time)`, `draw(surface)` and `bursting_bubble(pos, texture)`. The
    bursting bubble spawns 100 particles, coloured with the texture's average
    colour.
- `ubica.timer.Timer`: a countdown that runs in a background thread.
  `start()` begins the countdown. `is_running` stays true until it elapses.
  `stop()` abandons the countdown and waits for the thread. Only whole seconds
  count: the fractional part of the time is dropped. A `Timer` can also be
  used as a context manager, which stops it on exit.
- `ubica.world.World`: the shared world. `World.get_world()` returns it.
  `init_world(background, border)` stores copies of both textures. It also
  creates `background_sprite` and lays `border_sprites` along all four edges of
  a 1536 × 1080 world.
- `ubica.helpers.average_texture_color(texture)`: the mean colour of the
  pixels that are not fully transparent. It raises `ValueError` if there are
  none.
- `ubica.constants`: world size, sprite size, particle radius and the burst
  particle count.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import pygame

from ubica.animation import Animation
from ubica.drawable import Drawable
from ubica.particles import ParticleSystem
from ubica.world import World

pygame.init()
screen = pygame.display.set_mode((1536, 1080))

sheet = pygame.image.load("hero.png").convert_alpha()
run = Animation(sheet, 0, 0, 64, 64, 6, 10.0, 64)

world = World.get_world()
world.init_world(pygame.image.load("bg.png"), pygame.image.load("wall.png"))

particles = ParticleSystem.instance()
clock = pygame.time.Clock()

running = True
while running:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False

    dt = clock.tick(60) / 1000.0
    particles.update(dt)

    world.background_sprite.draw(screen)
    for tile in world.border_sprites:
        tile.draw(screen)
    Drawable.draw_all(screen)
    run.tick(dt, rotate=False).draw(screen)
    particles.draw(screen)
    pygame.display.flip()

pygame.quit()
```

`World` and `ParticleSystem` are shared, single instances. Their `reset()`
class methods discard the current instance, for example between levels or
between tests.

## What it does not do

ubica is a library only. It has no command and no game loop of its own, and
it does not open a window. It does not handle input, sound, collisions or
saving. Those parts are left to the game that uses it.