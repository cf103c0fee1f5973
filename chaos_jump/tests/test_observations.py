# chaos_jump/tests/test_observations.py
import numpy as np

from chaos_jump.env.observations import build_observation, OBS_LOW, OBS_HIGH, OBS_SIZE
from chaos_jump.game.level import Platform
from chaos_jump.game.player import InputState
from chaos_jump.game.session import GameSession


def _in_bounds(obs: np.ndarray) -> bool:
    return bool(np.all(obs >= OBS_LOW) and np.all(obs <= OBS_HIGH))


def test_shape_dtype_and_range():
    s = GameSession(seed=3)
    obs = build_observation(s)
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    assert _in_bounds(obs)

    # level / lives / chaos / gravity block
    assert obs[11] == np.float32(1 / 5)
    assert obs[12] == np.float32(1.0)
    assert obs[13] == np.float32(0.0)
    assert obs[14] == np.float32(0.5)


def test_floor_and_ground_flags():
    s = GameSession(seed=3)
    for _ in range(20):
        s.update(InputState())
    obs = build_observation(s)
    assert obs[4] == 1.0, "standing on the first step"
    assert obs[9] == 0.0, "feet touch the floor"
    assert obs[10] == 0.0

    s.level.platforms = [Platform(0, 100, 50, 10)]
    obs = build_observation(s)
    assert obs[9] == 1.0, "no-floor sentinel"


def test_portal_direction():
    s = GameSession(seed=3)
    obs = build_observation(s)
    # player starts bottom-left, portal sits up and to the right
    assert obs[7] > 0.0 and obs[8] < 0.0


def test_clipping_keeps_extremes_in_bounds():
    s = GameSession(seed=3)
    s.player.x, s.player.y = -500.0, 5000.0
    s.player.vy = 99.0
    s.shake.pulse(50.0)
    obs = build_observation(s)
    assert _in_bounds(obs)
    assert obs[0] == 0.0 and obs[1] == 1.0 and obs[3] == 1.0 and obs[15] == 1.0


def main():
    test_shape_dtype_and_range()
    test_floor_and_ground_flags()
    test_portal_direction()
    test_clipping_keeps_extremes_in_bounds()
    print("✓ observation checks passed")


if __name__ == "__main__":
    main()
