from typing import Dict, List, Optional

import pygame

from queen_checkers.engine.board import Board, EMPTY_LABEL
from queen_checkers.engine.game import Game, Instruction
from queen_checkers.engine.move import Pos
from queen_checkers.engine.piece import BLUE, RED


PIECE_COLORS: Dict[str, tuple] = {
    BLUE: ((20, 40, 120), (60, 110, 220)),
    RED: ((120, 20, 20), (220, 60, 60)),
}


class PygameUI:
    """Pygame view over a Game.

    The view keeps its own grid of occupant labels and only changes it from the
    tile updates of the Instructions returned by the game.

    Sidebar:
      - active player, piece counts, rule variant and winner
      - Reset: restart the game
    """

    def __init__(self, game: Game, square_size: int = 80, margin: int = 20, sidebar_width: int = 240):
        self.game = game
        self.square_size = square_size
        self.margin = margin
        self.sidebar_width = sidebar_width

        self.labels: List[List[str]] = [[EMPTY_LABEL] * Board.SIZE for _ in range(Board.SIZE)]
        self.current_player = BLUE
        self.winner: Optional[str] = None
        self._sidebar_buttons: Optional[Dict[str, pygame.Rect]] = None
        self.apply(game.restart())

    def apply(self, instruction: Optional[Instruction]) -> None:
        if instruction is None:
            return
        for update in instruction.tile_updates:
            self.labels[update.row][update.col] = update.label
        self.current_player = instruction.active_player
        self.winner = instruction.winner

    def click(self, pos: Pos) -> None:
        self.apply(self.game.tile_clicked(*pos))

    def _mouse_to_board(self, mouse_pos: tuple) -> Optional[Pos]:
        mx, my = mouse_pos
        rel_x = mx - self.margin
        rel_y = my - self.margin
        if rel_x < 0 or rel_y < 0:
            return None
        col = rel_x // self.square_size
        row = rel_y // self.square_size
        if 0 <= row < Board.SIZE and 0 <= col < Board.SIZE:
            return (int(row), int(col))
        return None

    def _count(self, player: str) -> int:
        return sum(1 for row in self.labels for label in row if label.startswith(player))

    def run(self) -> None:
        try:
            pygame.init()
        except Exception as e:
            raise RuntimeError("Failed to initialize pygame") from e

        board_px = self.margin * 2 + self.square_size * Board.SIZE
        total_width = board_px + self.sidebar_width
        total_height = board_px

        screen = pygame.display.set_mode((total_width, total_height))
        pygame.display.set_caption("Queen Checkers")
        clock = pygame.time.Clock()
        font = pygame.font.SysFont(None, 20)
        large_font = pygame.font.SysFont(None, 26)

        running = True
        while running:
            clock.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.apply(self.game.restart())
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    mx, my = event.pos
                    if mx >= board_px:
                        self._handle_sidebar_click(mx - board_px, my)
                        continue
                    board_pos = self._mouse_to_board(event.pos)
                    if board_pos is not None:
                        self.click(board_pos)

            screen.fill((40, 40, 40))
            board_surface = screen.subsurface((0, 0, board_px, total_height))
            self._draw_board(board_surface)
            self._draw_highlights(board_surface)
            self._draw_pieces(board_surface)

            sidebar_rect = pygame.Rect(board_px, 0, self.sidebar_width, total_height)
            pygame.draw.rect(screen, (60, 60, 60), sidebar_rect)
            self._draw_sidebar(screen, sidebar_rect, font, large_font)

            pygame.display.flip()

        pygame.quit()

    def _draw_board(self, surface: pygame.Surface) -> None:
        light = (240, 217, 181)
        dark = (181, 136, 99)
        for r in range(Board.SIZE):
            for c in range(Board.SIZE):
                x = self.margin + c * self.square_size
                y = self.margin + r * self.square_size
                color = dark if Board.is_playable(r, c) else light
                pygame.draw.rect(surface, color, (x, y, self.square_size, self.square_size))

    def _draw_pieces(self, surface: pygame.Surface) -> None:
        for r in range(Board.SIZE):
            for c in range(Board.SIZE):
                label = self.labels[r][c]
                if label == EMPTY_LABEL:
                    continue
                owner, kind = label.split()
                cx = self.margin + c * self.square_size + self.square_size // 2
                cy = self.margin + r * self.square_size + self.square_size // 2
                self._draw_piece_at(surface, (cx, cy), owner, queen=kind == 'queen')

    def _draw_piece_at(self, surface: pygame.Surface, center: tuple, owner: str, queen: bool = False) -> None:
        cx, cy = center
        radius = int(self.square_size * 0.4)
        border_color, fill_color = PIECE_COLORS[owner]
        pygame.draw.circle(surface, border_color, (cx, cy), radius)
        pygame.draw.circle(surface, fill_color, (cx, cy), max(1, radius - 6))
        if queen:
            crown_color = (212, 175, 55)
            pygame.draw.circle(surface, crown_color, (cx, cy), radius // 3)

    def _draw_highlights(self, surface: pygame.Surface) -> None:
        pending = self.game.pending
        if pending is None:
            return
        r, c = pending.frm
        x = self.margin + c * self.square_size
        y = self.margin + r * self.square_size
        pygame.draw.rect(surface, (30, 144, 255), (x, y, self.square_size, self.square_size), width=4)
        # the picked-up piece is drawn hollow on its source square
        border_color, _ = PIECE_COLORS[pending.piece.owner]
        pygame.draw.circle(surface, border_color, (x + self.square_size // 2, y + self.square_size // 2),
                           int(self.square_size * 0.4), width=3)
        for tr, tc in pending.targets():
            cx = self.margin + tc * self.square_size + self.square_size // 2
            cy = self.margin + tr * self.square_size + self.square_size // 2
            pygame.draw.circle(surface, (34, 139, 34), (cx, cy), max(6, self.square_size // 8))

    def _handle_sidebar_click(self, rel_x: int, rel_y: int) -> None:
        """Handle clicks in the sidebar area. Coordinates are relative to the sidebar origin."""
        btns = self._sidebar_buttons
        if btns and btns['reset'].collidepoint((rel_x, rel_y)):
            self.apply(self.game.restart())

    def _draw_sidebar(self, screen: pygame.Surface, rect: pygame.Rect, font: pygame.font.Font, large_font: pygame.font.Font) -> None:
        x0 = rect.x + 8
        y = 8
        title = large_font.render("Game Info", True, (255, 255, 255))
        screen.blit(title, (x0, y))
        y += 32
        cp_text = font.render(f"Current: {self.current_player}", True, (255, 255, 255))
        screen.blit(cp_text, (x0, y))
        y += 24
        bc = font.render(f"Blue pieces: {self._count(BLUE)}", True, (255, 255, 255))
        rc = font.render(f"Red pieces: {self._count(RED)}", True, (255, 255, 255))
        screen.blit(bc, (x0, y)); y += 20
        screen.blit(rc, (x0, y)); y += 20
        vt = font.render(f"Rules: {self.game.rules.name}", True, (200, 200, 255))
        screen.blit(vt, (x0, y)); y += 28

        if self.winner is not None:
            win_text = large_font.render(f"Winner: {self.winner}", True, (255, 215, 0))
            screen.blit(win_text, (x0, y)); y += 32

        btn_w = self.sidebar_width - 16
        btn_h = 28
        reset_rect = pygame.Rect(x0, y, btn_w, btn_h)
        pygame.draw.rect(screen, (100, 80, 80), reset_rect)
        reset_text = font.render("Reset", True, (255, 255, 255))
        screen.blit(reset_text, (x0 + 8, y + 6))

        # cache button rects in sidebar-local coordinates for click handling
        self._sidebar_buttons = {
            'reset': pygame.Rect(reset_rect.x - rect.x, reset_rect.y - rect.y, reset_rect.w, reset_rect.h),
        }
