
import logging
import pygame, sys
from stacker_config import CONFIG, engine_config
from stacker_engine import GameEngine
from stacker_input import dispatch
from stacker_layout import compute_dims
from stacker_render import RenderAssets
from stacker_timer import TickScheduler

logger = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    engine = GameEngine(engine_config())
    ticker = TickScheduler(engine)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    dims = compute_dims(engine.config.columns, engine.config.rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Arcade Stacker")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    logger.info("Window %dx%d, cell %dpx", dims.total_w, dims.total_h, dims.cell)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                pygame.quit(); sys.exit()
            if dispatch(engine, e, render.restart_rect) == "restart":
                ticker.reset()

        ticker.update(dt)
        render.draw(screen, engine.snapshot())
        pygame.display.flip()


if __name__ == '__main__':
    main()
