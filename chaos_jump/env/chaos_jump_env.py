# chaos_jump/env/chaos_jump_env.py
from __future__ import annotations
from typing import Optional, Dict, Any, Tuple
import numpy as np
import gymnasium as gym
import pygame

from chaos_jump.game.config import CANVAS_WIDTH, CANVAS_HEIGHT, FPS
from chaos_jump.game.audio import RecordingAudio
from chaos_jump.game.player import InputState
from chaos_jump.game.render import draw_frame
from chaos_jump.game.session import GameSession, Mode
from chaos_jump.env.observations import build_observation, OBS_LOW, OBS_HIGH

# Discrete action -> (left, right, jump)
ACTIONS: Tuple[Tuple[bool, bool, bool], ...] = (
    (False, False, False),  # 0 idle
    (True, False, False),   # 1 left
    (False, True, False),   # 2 right
    (False, False, True),   # 3 jump
    (True, False, True),    # 4 left + jump
    (False, True, True),    # 5 right + jump
)


class ChaosJumpEnv(gym.Env):
    """
    Chaos Jump Gymnasium environment (vector observations).
    - Simulation at 60 frames/s, per-frame physics.
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Observation: shape (16,), float32 (see observations.build_observation).
    - Reward: score gained minus 1 per life lost.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 auto_advance: bool = True):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.auto_advance = auto_advance

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.Discrete(len(ACTIONS))
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        self.session: Optional[GameSession] = None
        self.audio: Optional[RecordingAudio] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # Seeding policy: an explicit seed goes straight to the session; otherwise
        # draw one from np_random so unseeded resets still follow the env's stream.
        if seed is not None:
            session_seed = int(seed)
        else:
            session_seed = int(self.np_random.integers(0, 2**31 - 1))
        start_level = int((options or {}).get("level", 1))

        self.audio = RecordingAudio()
        self.session = GameSession(seed=session_seed, audio=self.audio, start_level=start_level)
        self.timestep = 0
        self.current_seed = session_seed

        obs = self._get_obs()
        info = self._info()
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.session is not None, "call reset() before step()"
        s = self.session

        left, right, jump = ACTIONS[int(action)]
        inputs = InputState(left=left, right=right, jump=jump)
        score_before, lives_before = s.score, s.lives
        levels_cleared = 0

        for _ in range(self.frame_skip):
            s.update(inputs)
            if s.mode is Mode.LEVEL_COMPLETE:
                levels_cleared += 1
                if self.auto_advance:
                    s.advance_level()
                break
            if s.mode is Mode.GAME_OVER:
                break

        reward = float(s.score - score_before) - float(lives_before - s.lives)

        self.timestep += 1
        terminated = s.mode is Mode.GAME_OVER or s.mode is Mode.LEVEL_COMPLETE
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        obs = self._get_obs()
        info = self._info()
        info["levels_cleared"] = levels_cleared

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        return build_observation(self.session)

    def _info(self) -> Dict[str, Any]:
        assert self.session is not None
        info = self.session.hud_state()
        info.update({
            "seed": self.current_seed,
            "timestep": self.timestep,
            "frame": self.session.frame,
            "sounds": len(self.audio.cues) if self.audio is not None else 0,
        })
        return info

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.session is None:
            return None

        if self.render_mode == "human":
            if self.screen is None:
                pygame.init()
                self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
                pygame.display.set_caption("Chaos Jump — Gym Env")
                self.clock = pygame.time.Clock()
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            draw_frame(self.screen, self.session)
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata["render_fps"])
            return None

        # rgb_array: off-screen surface, no window
        if self.screen is None:
            self.screen = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
        draw_frame(self.screen, self.session)
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None and self.render_mode == "human":
            pygame.display.quit()
            pygame.quit()
        self.screen = None
        self.clock = None
