"""HUD and winner banner rendering for the pygame client."""

from __future__ import annotations

import pygame


def _draw_heart(surface: pygame.Surface, center: tuple[int, int], size: int, color) -> None:
    cx, cy = center
    lobe = max(2, size // 4)
    pygame.draw.circle(surface, color, (cx - lobe, cy - lobe // 2), lobe)
    pygame.draw.circle(surface, color, (cx + lobe, cy - lobe // 2), lobe)
    pygame.draw.polygon(
        surface,
        color,
        [
            (cx - lobe * 2, cy - lobe // 4),
            (cx + lobe * 2, cy - lobe // 4),
            (cx, cy + lobe * 2),
        ],
    )


def draw_ui(app) -> None:
    surface = app.screen
    width = surface.get_width()
    panel_height = app.ui_height
    session = app.session

    pygame.draw.rect(surface, (10, 12, 20), pygame.Rect(0, 0, width, panel_height))
    pygame.draw.line(surface, (40, 44, 60), (0, panel_height - 1), (width, panel_height - 1))

    heart_color = pygame.Color(231, 76, 60)
    heart_size = 22
    padding = 20
    center_y = panel_height // 2

    for idx, name in enumerate(session.player_names):
        color = pygame.Color(*app.tank_colors[idx])
        label = app.font_regular.render(name, True, color)
        hearts = session.hearts[idx]
        hearts_width = hearts * (heart_size + 6)
        if idx == 0:
            label_rect = label.get_rect(midleft=(padding, center_y))
            start_x = label_rect.right + 16 + heart_size // 2
        else:
            label_rect = label.get_rect(midright=(width - padding, center_y))
            start_x = label_rect.left - 16 - hearts_width + heart_size // 2
        surface.blit(label, label_rect)
        for heart in range(hearts):
            _draw_heart(
                surface,
                (start_x + heart * (heart_size + 6), center_y),
                heart_size,
                heart_color,
            )

    if session.rounds_played:
        score = app.font_small.render(session.score_line(), True, pygame.Color(180, 188, 200))
        surface.blit(score, score.get_rect(center=(width // 2, center_y)))


def draw_winner_overlay(app) -> None:
    session = app.session
    if not session.banner_visible or session.winner_id is None:
        return
    surface = app.screen
    area = app.display.playfield_rect

    overlay = pygame.Surface(area.size, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 170))
    surface.blit(overlay, area.topleft)

    winner_color = pygame.Color(*app.tank_colors[session.winner_id - 1])
    title = app.font_large.render(session.message, True, winner_color)
    title_rect = title.get_rect(center=(area.centerx, area.centery - 30))
    shadow = app.font_large.render(session.message, True, pygame.Color("white"))
    surface.blit(shadow, title_rect.move(2, 2))
    surface.blit(title, title_rect)

    prompt = app.font_regular.render(
        "Press R to play again  -  Esc to quit", True, pygame.Color(220, 220, 220)
    )
    surface.blit(prompt, prompt.get_rect(center=(area.centerx, title_rect.bottom + 36)))


__all__ = ["draw_ui", "draw_winner_overlay"]
