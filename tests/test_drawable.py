import pygame

from ubica.drawable import Drawable
from ubica.sprite import Sprite


def _red_texture():
    surface = pygame.Surface((2, 2))
    surface.fill(pygame.Color("red"))
    return surface


def _blank_target():
    target = pygame.Surface((4, 4))
    target.fill((0, 0, 0))
    return target


def test_registered_drawable_is_drawn():
    with Drawable(_red_texture()):
        target = _blank_target()
        Drawable.draw_all(target)
    assert target.get_at((0, 0)) == pygame.Color("red")
    assert target.get_at((3, 3)) == pygame.Color(0, 0, 0)


def test_released_drawable_is_not_drawn():
    drawable = Drawable(_red_texture())
    drawable.release()
    target = _blank_target()
    Drawable.draw_all(target)
    assert target.get_at((0, 0)) == pygame.Color(0, 0, 0)


def test_release_twice_is_harmless():
    drawable = Drawable(_red_texture())
    drawable.release()
    drawable.release()
    target = _blank_target()
    Drawable.draw_all(target)
    assert target.get_at((0, 0)) == pygame.Color(0, 0, 0)


def test_texture_is_copied():
    texture = _red_texture()
    with Drawable(texture) as drawable:
        texture.fill(pygame.Color("blue"))
        assert drawable.texture.get_at((0, 0)) == pygame.Color("red")


def test_drawable_from_sprite_uses_it():
    sprite = Sprite(_red_texture(), position=(2.0, 2.0))
    with Drawable(sprite) as drawable:
        assert drawable.sprite is sprite
        target = _blank_target()
        Drawable.draw_all(target)
    assert target.get_at((2, 2)) == pygame.Color("red")
    assert target.get_at((0, 0)) == pygame.Color(0, 0, 0)


def test_non_sprite_source_has_no_sprite_and_is_not_drawn():
    with Drawable(object()) as drawable:
        target = _blank_target()
        Drawable.draw_all(target)
        assert drawable.has_sprite is False
        assert drawable.sprite is None
    assert target.get_at((0, 0)) == pygame.Color(0, 0, 0)


def test_default_drawable_has_empty_texture():
    with Drawable() as drawable:
        assert drawable.texture.get_size() == (0, 0)
        assert drawable.has_sprite is True