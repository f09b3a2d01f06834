"""Lexer Playground — watch a TextFSM scanner react to every keystroke.

Exercises lexfsm and lexfsm-text.

Controls:
  Type       Feed characters to the scanner
  Enter      Feed a newline
  Backspace  Drop the last character and replay the rest
  F2         Write the scanner graph to lexer.dot
  Esc        Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from lexfsm import dump_graph

from game.scanner import Session
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.graph import draw_states
from ui.status import draw_input, draw_status_bar, draw_tokens

logger = logging.getLogger("lexer-playground")

DOT_PATH = "lexer.dot"


def save_graph(session: Session) -> None:
    with open(DOT_PATH, "w", encoding="utf-8") as fp:
        dump_graph(session.fsm, fp)
    logger.info("wrote %s", DOT_PATH)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Lexer Playground — lexfsm demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    session = Session()
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_BACKSPACE:
                    session.backspace()
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    session.type_char("\n")
                elif event.key == pygame.K_F2:
                    save_graph(session)
                elif event.unicode and event.unicode.isprintable():
                    session.type_char(event.unicode)

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_states(screen, session.fsm, font)
        draw_input(screen, font, session)
        draw_tokens(screen, font, session)
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
