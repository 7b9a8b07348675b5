from cantina.character import Player, Pose, Side, sprite_paths
from cantina.constants import NB_TICKET, START_X, START_Y, Key


def test_luke_sprites_follow_source_order():
    paths = sprite_paths(Side.LIGHT)
    assert paths[Pose.DOWN] == "sprites/Luke/luke2.png"
    assert paths[Pose.DOWN_STEP1] == "sprites/Luke/luke1.png"
    assert len(paths) == len(Pose)


def test_vader_sprites_cover_every_pose_once():
    paths = sprite_paths(Side.DARK)
    assert set(paths) == set(Pose)
    assert len(set(paths.values())) == len(Pose)
    assert paths[Pose.DOWN] == "sprites/Vador/Vador1.png"


def test_reset_restores_start():
    player = Player(name="han", x=1, y=2, ticket=0, score=9, direction=Pose.UP, state=1)
    player.reset()
    assert (player.x, player.y) == (START_X, START_Y)
    assert player.ticket == NB_TICKET
    assert player.score == 0
    assert player.direction is Pose.DOWN
    assert player.image is Pose.DOWN
    assert player.state == 0


def test_animate_alternates_steps():
    player = Player()
    player.animate({Key.LEFT})
    assert player.image is Pose.LEFT_STEP1
    player.animate({Key.LEFT})
    assert player.image is Pose.LEFT_STEP2
    player.animate({Key.LEFT})
    assert player.image is Pose.LEFT_STEP1


def test_animate_up_takes_priority():
    player = Player()
    player.animate({Key.UP, Key.DOWN})
    assert player.image is Pose.UP_STEP1


def test_animate_without_direction_keeps_frame():
    player = Player()
    player.animate({Key.ENTER})
    assert player.image is Pose.DOWN
    assert player.state == 0