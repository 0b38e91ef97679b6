import logging
import os

import pygame

from car_dodge.config import (
    COLOR_GRASS,
    COLOR_LANE_LINE,
    COLOR_MSG_TEXT,
    COLOR_OBSTACLE,
    COLOR_PLAYER,
    COLOR_ROAD,
    COLOR_ROAD_BORDER,
    COLOR_UI_TEXT,
    ENEMY_IMAGE,
    PLAYER_IMAGE,
)

logger = logging.getLogger(__name__)


def load_image(path):
    """Load an image, or return None so the caller can draw a plain shape instead."""
    try:
        img = pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as e:
        logger.warning("Could not load image %s (fallback to rectangle): %s", path, e)
        return None
    if pygame.display.get_surface() is not None:
        img = img.convert_alpha()
    return img


class Renderer:
    """Draws a GameState snapshot onto a pygame surface. Never touches the state itself."""

    def __init__(self, surface, player_image=None, enemy_image=None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.player_image = player_image
        self.enemy_image = enemy_image
        self.font_ui = pygame.font.Font(None, 28)
        self.font_msg = pygame.font.Font(None, 64)
        self.font_sub = pygame.font.Font(None, 32)

    @classmethod
    def from_assets(cls, surface, asset_dir):
        return cls(
            surface,
            player_image=load_image(os.path.join(asset_dir, PLAYER_IMAGE)),
            enemy_image=load_image(os.path.join(asset_dir, ENEMY_IMAGE)),
        )

    def _road_bounds(self, lanes):
        w = self.surface.get_width()
        lane_width = w // lanes
        road_x = lane_width // 4
        road_w = w - lane_width // 2
        return road_x, road_w

    def cell_rect(self, lanes, rows, lane, row):
        road_x, road_w = self._road_bounds(lanes)
        cell_w = road_w // lanes
        cell_h = self.surface.get_height() // rows
        return pygame.Rect(road_x + lane * cell_w, row * cell_h, cell_w, cell_h)

    def car_rect(self, lanes, rows, lane, row):
        cell = self.cell_rect(lanes, rows, lane, row)
        car_w = int(cell.width * 0.75)
        car_h = int(cell.height * 0.9)
        return pygame.Rect(
            cell.x + (cell.width - car_w) // 2,
            cell.y + (cell.height - car_h) // 2,
            car_w,
            car_h,
        )

    def draw(self, snapshot):
        self.surface.fill(COLOR_GRASS)
        self._render_road(snapshot.lanes)
        for lane, row in snapshot.obstacles:
            self._render_car(snapshot, lane, row, is_player=False)
        self._render_car(snapshot, snapshot.player_lane, snapshot.player_row, is_player=True)
        self._render_ui(snapshot)

    def _render_road(self, lanes):
        h = self.surface.get_height()
        road_x, road_w = self._road_bounds(lanes)
        pygame.draw.rect(self.surface, COLOR_ROAD, (road_x, 0, road_w, h))

        # Borders
        pygame.draw.line(self.surface, COLOR_ROAD_BORDER, (road_x, 0), (road_x, h), 4)
        pygame.draw.line(self.surface, COLOR_ROAD_BORDER, (road_x + road_w, 0), (road_x + road_w, h), 4)

        # Dashed lane lines
        for i in range(1, lanes):
            x = road_x + i * (road_w // lanes)
            for y in range(0, h, 40):
                pygame.draw.line(self.surface, COLOR_LANE_LINE, (x, y), (x, y + 20), 3)

    def _render_car(self, snapshot, lane, row, is_player):
        rect = self.car_rect(snapshot.lanes, snapshot.rows, lane, row)
        img = self.player_image if is_player else self.enemy_image
        if img is not None:
            self.surface.blit(pygame.transform.scale(img, rect.size), rect.topleft)
        else:
            color = COLOR_PLAYER if is_player else COLOR_OBSTACLE
            pygame.draw.rect(self.surface, color, rect, border_radius=7)

    def _render_ui(self, snapshot):
        w, h = self.surface.get_size()

        score_text = self.font_ui.render(f"Score: {snapshot.score}", True, COLOR_UI_TEXT)
        self.surface.blit(score_text, (25, 15))
        help_text = self.font_ui.render("<- -> move   ENTER restart", True, COLOR_UI_TEXT)
        self.surface.blit(help_text, (25, 40))

        if snapshot.game_over:
            msg_surf = self.font_msg.render("GAME OVER", True, COLOR_MSG_TEXT)
            self.surface.blit(msg_surf, msg_surf.get_rect(center=(w / 2, h / 2)))
            sub_surf = self.font_sub.render("Press ENTER to play again", True, COLOR_MSG_TEXT)
            self.surface.blit(sub_surf, sub_surf.get_rect(center=(w / 2, h / 2 + 45)))
