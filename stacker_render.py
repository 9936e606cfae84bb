
"""
Rendering helpers for the stacker cabinet.

- Pre-render the static background (cabinet, prize bars, grid, panel) once per Dims.
- Pre-render one lit cell sprite and blit it for every filled cell.
- Cache HUD text surfaces; re-render only when values change.
- Reads nothing but an engine Snapshot.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Optional
from stacker_layout import Dims
from stacker_engine import Snapshot, GameState

BG = (3, 4, 26)
CABINET = (10, 13, 48)
GRID = (30, 34, 80)
CELL_OFF = (14, 17, 52)
CELL_ON = (136, 136, 255)
CELL_CORE = (255, 255, 255)
MAJOR = (212, 175, 55)
MINOR = (168, 168, 168)
TEXT = (200, 210, 240)
DARK_TEXT = (30, 30, 30)
BUTTON = (255, 204, 0)


@dataclass
class HudCache:
    height: int = -1
    speed: int = -1
    state: Optional[GameState] = None
    title: Optional[pygame.Surface] = None
    height_s: Optional[pygame.Surface] = None
    speed_s: Optional[pygame.Surface] = None
    banner: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cell()
        self.hud = HudCache()
        self.restart_rect: Optional[pygame.Rect] = None

    # ---------- Static background (cabinet + grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        cab = pygame.Rect(d.board_x - 4, d.board_y - d.prize_h - 4, d.board_w + 8, d.board_h + 2*d.prize_h + 8)
        pygame.draw.rect(self.bg, CABINET, cab)
        pygame.draw.rect(self.bg, (34, 34, 34), cab, 3)
        # Prize bars
        for label, col, y in (("MAJOR PRIZE", MAJOR, d.board_y - d.prize_h),
                              ("MINOR PRIZE", MINOR, d.board_y + d.board_h)):
            bar = pygame.Rect(d.board_x, y, d.board_w, d.prize_h)
            pygame.draw.rect(self.bg, col, bar)
            txt = self.font.render(label, True, DARK_TEXT)
            self.bg.blit(txt, txt.get_rect(center=bar.center))
        # Empty cells + grid
        for r in range(d.rows):
            for c in range(d.cols):
                x, y = d.cell_xy(r, c)
                pygame.draw.rect(self.bg, CELL_OFF, (x+1, y+1, d.cell-2, d.cell-2))
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        pygame.draw.rect(self.bg, (255, 255, 255), (d.board_x, d.board_y, d.board_w, d.board_h), 2)
        # Panel frame
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21, 25, 53), panel_rect)
        pygame.draw.rect(self.bg, (50, 60, 100), panel_rect, 1)

    # ---------- Lit cell sprite ----------
    def _make_cell(self):
        c = self.dims.cell
        s = pygame.Surface((c-2, c-2))
        s.fill(CELL_ON)
        pygame.draw.circle(s, CELL_CORE, ((c-2)//2, (c-2)//2), max(2, (c-2)//3))
        self.cell_surf = s

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0, 0))

    def draw_cell(self, screen: pygame.Surface, row: int, col: int):
        x, y = self.dims.cell_xy(row, col)
        screen.blit(self.cell_surf, (x+1, y+1))

    # ---------- Whole frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        self.redraw_static(screen)
        for row, col in snap.filled_cells():
            self.draw_cell(screen, row, col)
        self.draw_panel_hud(screen, snap)
        if snap.state is GameState.PLAYING:
            self.restart_rect = None
        else:
            self.draw_game_over(screen, snap.state)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Arcade Stacker", True, (197, 202, 233))
        if snap.height != self.hud.height:
            self.hud.height = snap.height
            self.hud.height_s = f.render(f"Height: {snap.height}/{d.rows - 1}", True, TEXT)
        if snap.speed != self.hud.speed:
            self.hud.speed = snap.speed
            self.hud.speed_s = f.render(f"Speed: {snap.speed} ms", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.height_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.speed_s, (d.panel_x + 12, d.panel_y + 68))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("Enter Drop", True, (165, 175, 215)),
                f.render("R Restart", True, (165, 175, 215)),
                f.render("Esc Quit", True, (165, 175, 215)),
            ]
        y = d.panel_y + 110
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_game_over(self, screen: pygame.Surface, state: GameState):
        d = self.dims
        if state is not self.hud.state:
            self.hud.state = state
            msg = "YOU WIN!" if state is GameState.WON else "GAME OVER"
            self.hud.banner = self.big_font.render(msg, True, (255, 255, 255))
        cx = d.board_x + d.board_w // 2
        cy = d.board_y + int(d.board_h * 0.4)
        shade = pygame.Surface((d.board_w, 110), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        screen.blit(shade, (d.board_x, cy - 40))
        screen.blit(self.hud.banner, self.hud.banner.get_rect(center=(cx, cy)))
        label = self.font.render("RESTART (R)", True, (0, 0, 0))
        btn = label.get_rect(center=(cx, cy + 42)).inflate(20, 10)
        pygame.draw.rect(screen, BUTTON, btn, border_radius=6)
        screen.blit(label, label.get_rect(center=btn.center))
        self.restart_rect = btn
