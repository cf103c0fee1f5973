# chaos_jump/game/game.py
import sys, argparse, logging
import pygame
from pygame import K_ESCAPE, K_r, K_n, K_m, K_RETURN
from .config import CANVAS_WIDTH, CANVAS_HEIGHT, FPS, SEED_DEFAULT, LEVEL_COUNT, SAMPLE_RATE
from .audio import ToneAudio
from .player import InputState
from .render import draw_frame, draw_hud
from .session import GameSession, Mode

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Chaos Jump: five levels, three lives.")
    p.add_argument("--seed", type=int, default=None,
                   help="Session seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--level", type=int, default=1, choices=range(1, LEVEL_COUNT + 1),
                   help="Start level (1-5)")
    p.add_argument("--sound", action="store_true", help="Start unmuted (M toggles)")
    p.add_argument("--fps", type=int, default=FPS)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def handle_key(inputs: InputState, key: int, pressed: bool):
    """Mirror held keys into the input flags (read once per frame by the session)."""
    if key in LEFT_KEYS:
        inputs.left = pressed
    elif key in RIGHT_KEYS:
        inputs.right = pressed
    elif key in JUMP_KEYS:
        inputs.jump = pressed


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    # Resolve seed: None -> SEED_DEFAULT; -1 -> random
    if args.seed is None:
        seed = SEED_DEFAULT
    elif args.seed == -1:
        seed = None
    else:
        seed = args.seed

    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    pygame.display.set_caption("Chaos Jump")
    screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    audio = ToneAudio(muted=not args.sound)
    session = GameSession(seed=seed, audio=audio, start_level=args.level)
    print(f"seed={session.seed}  (replay with --seed {session.seed})")

    while True:
        clock.tick(args.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_m:
                    audio.toggle_mute()
                elif event.key == K_r and session.mode is Mode.GAME_OVER:
                    session.restart()
                elif event.key in (K_n, K_RETURN) and session.mode is Mode.LEVEL_COMPLETE:
                    session.advance_level()
                else:
                    handle_key(session.inputs, event.key, True)
            if event.type == pygame.KEYUP:
                handle_key(session.inputs, event.key, False)

        session.update()

        # --- Render ---
        draw_frame(screen, session)
        draw_hud(screen, session, font)
        pygame.display.flip()


if __name__ == "__main__":
    run()
