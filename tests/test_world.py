import pygame
import pytest

from ubica.constants import SPRITE_SIZE, WORLD_HEIGHT, WORLD_WIDTH
from ubica.world import World


@pytest.fixture(autouse=True)
def fresh_world():
    World.reset()
    yield
    World.reset()


@pytest.fixture
def textures():
    background = pygame.Surface((32, 16))
    background.fill((0, 0, 255))
    border = pygame.Surface((8, 8))
    border.fill((255, 0, 0))
    return background, border


def test_get_world_is_shared(textures):
    first = World.get_world()
    first.init_world(*textures)
    second = World.get_world()
    assert len(second.border_sprites) == 84
    assert second.background_sprite is first.background_sprite


def test_reset_creates_new_world():
    first = World.get_world()
    World.reset()
    assert World.get_world() is not first
    assert World.get_world() is World.get_world()


def test_uninitialised_world_is_empty():
    world = World.get_world()
    assert world.border_sprites == []
    assert world.background_sprite is None


def test_border_tile_count(textures):
    world = World.get_world()
    world.init_world(*textures)
    assert len(world.border_sprites) == 84


def test_border_tiles_lie_on_edges(textures):
    world = World.get_world()
    world.init_world(*textures)
    for sprite in world.border_sprites:
        x, y = sprite.position
        assert x in (0.0, WORLD_WIDTH) or y in (0.0, WORLD_HEIGHT)


def test_border_tiles_are_on_grid(textures):
    world = World.get_world()
    world.init_world(*textures)
    for sprite in world.border_sprites:
        x, y = sprite.position
        assert x == WORLD_WIDTH or x % SPRITE_SIZE == 0
        assert y == WORLD_HEIGHT or y % SPRITE_SIZE == 0


def test_border_reaches_far_corner(textures):
    world = World.get_world()
    world.init_world(*textures)
    positions = {sprite.position for sprite in world.border_sprites}
    assert (0.0, 0.0) in positions
    assert (0.0, WORLD_HEIGHT) in positions
    assert (WORLD_WIDTH, 0.0) in positions
    assert max(x for x, _ in positions) == WORLD_WIDTH
    assert max(y for _, y in positions) == WORLD_HEIGHT


def test_border_sprites_use_border_texture(textures):
    world = World.get_world()
    world.init_world(*textures)
    colors = {sprite.texture.get_at((0, 0))[:3] for sprite in world.border_sprites}
    assert colors == {(255, 0, 0)}


def test_background_sprite_is_a_copy(textures):
    background, border = textures
    world = World.get_world()
    world.init_world(background, border)
    background.fill((0, 255, 0))
    image = world.background_sprite.image()
    assert image.get_size() == (32, 16)
    assert image.get_at((0, 0))[:3] == (0, 0, 255)


def test_second_init_appends_tiles(textures):
    world = World.get_world()
    world.init_world(*textures)
    once = len(world.border_sprites)
    world.init_world(*textures)
    assert len(world.border_sprites) == 2 * once