"""State row: one box per possible state, current and previous highlighted."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ui.constants import (
    CURRENT_COLOR,
    GRAPH_Y,
    KIND_COLORS,
    LABEL_COLOR,
    NODE_BG,
    NODE_BORDER,
    NODE_GAP,
    NODE_H,
    NODE_W,
    PREVIOUS_COLOR,
    SCREEN_W,
    TEXT_DIM,
)

if TYPE_CHECKING:
    from lexfsm_text import TextFSM


def draw_states(surface: pygame.Surface, fsm: TextFSM, font: pygame.font.Font) -> None:
    """Draw every possible state as a box in registration order."""
    states = fsm.possible_states
    row_w = len(states) * NODE_W + (len(states) - 1) * NODE_GAP
    x = (SCREEN_W - row_w) // 2

    for state in states:
        rect = pygame.Rect(x, GRAPH_Y, NODE_W, NODE_H)
        name = fsm.state_name(state) or str(state)
        pygame.draw.rect(surface, NODE_BG, rect)

        if state == fsm.current_state:
            pygame.draw.rect(surface, CURRENT_COLOR, rect, 3)
        elif state == fsm.previous_state:
            pygame.draw.rect(surface, PREVIOUS_COLOR, rect, 2)
        else:
            pygame.draw.rect(surface, NODE_BORDER, rect, 1)

        label = font.render(name, True, KIND_COLORS.get(name, LABEL_COLOR))
        surface.blit(label, (rect.centerx - label.get_width() // 2, rect.y + 6))

        edge_count = len(fsm.edges_from(state))
        sub = font.render(f"{edge_count} edges", True, TEXT_DIM)
        surface.blit(sub, (rect.centerx - sub.get_width() // 2, rect.y + 24))

        x += NODE_W + NODE_GAP

    legend = font.render(
        f"global fallbacks: {len(fsm.global_edges)}", True, TEXT_DIM
    )
    surface.blit(legend, (16, GRAPH_Y + NODE_H + 12))
