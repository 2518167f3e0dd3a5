import pytest

from dungeoncrawl.sprite import AnimatedSprite, Sprite
from dungeoncrawl.vec import Vec


def frames(count):
    return [Sprite(texture_id=i) for i in range(count)]


def test_default_sprite_has_no_texture():
    sprite = Sprite()
    assert sprite.texture_id == -1
    assert sprite.angle == 0.0
    assert not sprite.flip


def test_copy_is_independent():
    sprite = Sprite(texture_id=2, shift=Vec(1, 1))
    duplicate = sprite.copy()
    duplicate.angle = 45
    duplicate.shift += Vec(3, 0)
    assert sprite.angle == 0.0
    assert sprite.shift == Vec(1, 1)
    assert duplicate.texture_id == sprite.texture_id


def test_restore_overwrites_in_place():
    sprite = Sprite(texture_id=1)
    saved = sprite.copy()
    alias = sprite
    sprite.angle = 90
    sprite.shift = Vec(4, 4)
    alias.restore(saved)
    assert sprite == saved


def test_update_cycles_through_frames():
    anim = AnimatedSprite(frames(3), 1)
    seen = [anim.current().texture_id]
    for _ in range(3):
        anim.update()
        seen.append(anim.current().texture_id)
    assert seen == [0, 1, 2, 0]


def test_ticks_per_frame_delays_first_advance():
    anim = AnimatedSprite(frames(3), 2)
    seen = []
    for _ in range(3):
        anim.update()
        seen.append(anim.current().texture_id)
    assert seen == [0, 1, 2]


def test_invisible_sprite_does_not_animate():
    anim = AnimatedSprite(frames(2), 1)
    anim.visible = False
    anim.update()
    assert anim.current().texture_id == 0


def test_starting_frame():
    anim = AnimatedSprite(frames(4), 1, starting_frame=2)
    assert anim.current().texture_id == 2


def test_flip_applies_to_all_frames():
    anim = AnimatedSprite(frames(3), 1)
    anim.flip(True)
    flags = []
    for _ in range(3):
        flags.append(anim.current().flip)
        anim.update()
    assert flags == [True, True, True]


def test_current_returns_a_copy():
    anim = AnimatedSprite(frames(1), 1)
    anim.current().angle = 10
    assert anim.current().angle == 0.0


def test_number_of_frames_and_default():
    assert AnimatedSprite(frames(5), 1).number_of_frames() == 5
    default = AnimatedSprite()
    assert default.number_of_frames() == 1
    assert default.current() == Sprite()


def test_empty_frames_rejected():
    with pytest.raises(ValueError):
        AnimatedSprite([], 1)