# chaos_jump/game/session.py
from __future__ import annotations
import logging
import random
from enum import Enum
from typing import Any, Dict, Optional
from .config import (
    CANVAS_HEIGHT, LIVES_START, LEVEL_COUNT, SCORE_PER_LEVEL,
    LANDING_SHAKE, DEATH_SHAKE, JUMP_PARTICLES, DEATH_PARTICLES,
    SOUND_JUMP, SOUND_DEATH, SOUND_LEVEL_COMPLETE
)
from .audio import NullAudio
from .effects import ParticleSystem, ScreenShake
from .geometry import collides
from .level import Level, build_level
from .player import InputState, Player

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "gameOver"
    LEVEL_COMPLETE = "levelComplete"


class GameSession:
    """
    All mutable game state plus the per-frame update. One writer: only `update`
    and the lifecycle triggers (`restart`, `advance_level`) mutate it; renderers
    and the HUD just read.

    Randomness (level-4/5 platform velocities, chaos reversals, particle spray)
    comes from `self.rng`, seeded at construction. `seed=None` draws a seed, kept
    in `self.seed` so a run can be reproduced.
    """

    def __init__(self, seed: Optional[int] = None, audio=None, start_level: int = 1):
        if not 1 <= start_level <= LEVEL_COUNT:
            raise ValueError(f"start_level must be in 1..{LEVEL_COUNT}, got {start_level}")
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.audio = audio if audio is not None else NullAudio()

        self.inputs = InputState()
        self.player = Player()
        self.particles = ParticleSystem()
        self.shake = ScreenShake()

        self.current_level = start_level
        self.lives = LIVES_START
        self.score = 0
        self.mode = Mode.PLAYING
        self.final_score: Optional[int] = None
        self.won = False
        self.frame = 0
        self.level: Level = build_level(start_level, self.rng)

    # -------------------- Per-frame update --------------------

    def update(self, inputs: Optional[InputState] = None):
        """Advance one frame. No-op unless PLAYING. Step order matters."""
        if self.mode is not Mode.PLAYING:
            return
        if inputs is None:
            inputs = self.inputs
        self.frame += 1
        player = self.player
        level = self.level

        # 1) input
        if player.apply_input(inputs):
            self.audio.play_sound(*SOUND_JUMP)
            self.particles.spawn(*player.feet, JUMP_PARTICLES, self.rng)

        # 2) gravity + integration
        player.update_physics(level.gravity)

        # 3) platforms
        self._resolve_platforms()

        # 4) enemies; at most one life lost per frame however many touch the player
        life_lost = self._update_enemies()

        # 5) portal
        if self.mode is Mode.PLAYING and not life_lost and collides(player, level.portal):
            self.complete_level()

        # 6) fell off the bottom
        if self.mode is Mode.PLAYING and not life_lost and player.y > CANVAS_HEIGHT:
            self.lose_life()

        # 7) effects keep running on the frame that ended play
        self.particles.update()
        self.shake.decay()

    def _resolve_platforms(self):
        player = self.player
        player.on_ground = False
        for platform in self.level.platforms:
            platform.drift()
            if collides(player, platform) and player.can_land_on(platform.y):
                player.land_on(platform.y)
                self.shake.pulse(LANDING_SHAKE)
                platform.trigger_fall()
            platform.sink()

    def _update_enemies(self) -> bool:
        life_lost = False
        for enemy in self.level.enemies:
            enemy.patrol(self.level.chaos, self.rng)
            if (not life_lost and self.mode is Mode.PLAYING
                    and collides(self.player, enemy)):
                self.lose_life()
                life_lost = True
        return life_lost

    # -------------------- Transitions --------------------

    def lose_life(self):
        """Spend a life. Game over at zero, otherwise back to the start point."""
        if self.mode is not Mode.PLAYING:
            return
        self.lives -= 1
        self.shake.pulse(DEATH_SHAKE)
        self.audio.play_sound(*SOUND_DEATH)
        self.particles.spawn(*self.player.feet, DEATH_PARTICLES, self.rng)
        logger.info("life lost on level %d, %d left", self.current_level, self.lives)
        if self.lives <= 0:
            self.lives = 0
            self._game_over(won=False)
        else:
            self.player.reset()

    def complete_level(self):
        if self.mode is not Mode.PLAYING:
            return
        self.mode = Mode.LEVEL_COMPLETE
        self.score += SCORE_PER_LEVEL * self.current_level
        self.audio.play_sound(*SOUND_LEVEL_COMPLETE)
        logger.info("level %d complete, score %d", self.current_level, self.score)

    def _game_over(self, won: bool):
        self.mode = Mode.GAME_OVER
        self.final_score = self.score
        self.won = won
        logger.info("game over (%s), final score %d", "won" if won else "lost", self.score)

    # -------------------- Lifecycle triggers --------------------

    def advance_level(self) -> bool:
        """
        "Next level" trigger. Only honoured in LEVEL_COMPLETE; returns False (and
        changes nothing) otherwise. Advancing past the last level is the win path.
        """
        if self.mode is not Mode.LEVEL_COMPLETE:
            logger.warning("advance_level ignored in mode %s", self.mode.value)
            return False
        if self.current_level >= LEVEL_COUNT:
            self._game_over(won=True)
            return True
        self.current_level += 1
        self._load_level()
        self.mode = Mode.PLAYING
        return True

    def restart(self):
        """Back to level 1 with full lives and zero score. Allowed in any mode."""
        self.current_level = 1
        self.lives = LIVES_START
        self.score = 0
        self.final_score = None
        self.won = False
        self.particles.clear()
        self.shake = ScreenShake()
        self._load_level()
        self.mode = Mode.PLAYING
        logger.info("session restarted (seed %s)", self.seed)

    def _load_level(self):
        """Fresh platforms/enemies from the template; player back to the start."""
        self.level = build_level(self.current_level, self.rng)
        self.player.reset()

    # -------------------- Read-only views --------------------

    def hud_state(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "level": self.current_level,
            "level_name": self.level.name,
            "lives": self.lives,
            "score": self.score,
            "final_score": self.final_score,
            "won": self.won,
        }
