from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pygame

from block_puzzle_quiz.game import GameConfig, GameEngine, Scheduler
from block_puzzle_quiz.quiz import QuizService
from .controls import KEY_TO_INDEX, translate_event
from .renderer import PygameRenderer


LOGGER = logging.getLogger(__name__)


def draw_quiz(surface: pygame.Surface, quiz: QuizService, font: pygame.font.Font) -> None:
    prompt = quiz.prompt
    if prompt is None:
        return
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 180))
    surface.blit(shade, (0, 0))
    lines: List[str] = [prompt.question.prompt, ""]
    lines += [f"{i + 1}. {option}" for i, option in enumerate(prompt.options)]
    lines += ["", "Answer with the number keys"]
    y = surface.get_height() // 3
    for text in lines:
        img = font.render(text, True, (240, 240, 240))
        surface.blit(img, img.get_rect(center=(surface.get_width() // 2, y)))
        y += 26


def draw_game_over(surface: pygame.Surface, font: pygame.font.Font) -> None:
    over = font.render("Game Over - Press R to restart", True, (255, 100, 100))
    surface.blit(over, over.get_rect(center=(surface.get_width() // 2, 20)))


def run(config: Optional[GameConfig] = None, use_quiz: bool = True) -> None:
    config = config if config is not None else GameConfig()
    pygame.init()
    try:
        quiz = QuizService() if use_quiz else None
        engine = GameEngine(config, quiz=quiz, scheduler=Scheduler())

        # The engine may grow the surface so the largest piece fits its slot
        screen = pygame.display.set_mode((engine.layout.width, engine.layout.height))
        pygame.display.set_caption("Block Puzzle Quiz")
        font = pygame.font.SysFont(None, 24)
        score_font = pygame.font.SysFont(None, 48)
        renderer = PygameRenderer(screen, engine.layout, score_font)
        engine.renderer = renderer

        running = True
        clock = pygame.time.Clock()
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    if quiz is not None and quiz.blocking:
                        index = KEY_TO_INDEX.get(event.key)
                        if index is not None and index < len(quiz.prompt.options):
                            quiz.answer(index)
                        continue
                    if event.key == pygame.K_r and engine.game_over:
                        engine.restart()
                        continue
                action = translate_event(event)
                if action is not None:
                    engine.handle(action)

            engine.scheduler.advance(clock.tick(60))

            engine.redraw()
            if engine.selected is not None:
                row, col = engine.candidate_anchor()
                renderer.draw_ghost(engine.selected, row, col, engine.candidate_valid())
                renderer.draw_piece(engine.selected)
            if quiz is not None:
                draw_quiz(screen, quiz, font)
            if engine.game_over:
                draw_game_over(screen, font)
            pygame.display.flip()
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the block puzzle with quiz interruptions.")
    p.add_argument("--grid-size", type=int, default=8)
    p.add_argument("--pieces", type=int, default=3, help="Pieces offered per set")
    p.add_argument("--quiz-interval", type=int, default=8, help="Placements between quiz questions")
    p.add_argument("--no-quiz", dest="use_quiz", action="store_false")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG, INFO, WARNING).")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    config = GameConfig(
        grid_size=args.grid_size,
        pieces_per_set=args.pieces,
        quiz_interval=args.quiz_interval,
        random_seed=args.seed,
    )
    LOGGER.info("Starting %dx%d game", config.grid_size, config.grid_size)
    run(config, use_quiz=args.use_quiz)


if __name__ == "__main__":  # pragma: no cover
    main()
