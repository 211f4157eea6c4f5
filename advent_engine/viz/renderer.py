import pygame
from typing import List, Tuple
from advent_engine.algo.wires import CrossedWires, combined_steps
from advent_engine.core.path import corners
from advent_engine.core.vec2d import Vec2d, ORIGIN


class WireRenderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WIRES = [(230, 110, 60), (60, 160, 230)]  # Orange, Blue
    COLOR_ORIGIN = (255, 255, 255)
    COLOR_CROSSING = (200, 200, 200)
    COLOR_CLOSEST = (255, 215, 0)  # Gold
    COLOR_FASTEST = (80, 220, 120)  # Green

    def __init__(self, puzzle: CrossedWires, width=1280, height=720, record=False, speed=200):
        self.puzzle = puzzle
        self.screen_width = width
        self.screen_height = height
        self.speed = speed

        if puzzle.part_two is None:
            puzzle.run_all()

        self.corners = [corners(vectors) for vectors in puzzle.vectors]
        self.total_steps = max(len(wire) for wire in puzzle.wires)
        self.revealed = 0

        # A crossing becomes visible once both wires have reached it
        self.crossings: List[Tuple[int, Vec2d]] = sorted(
            ((max(table[p] for table in puzzle.step_tables), p) for p in puzzle.intersections),
            key=lambda item: (item[0], item[1].x, item[1].y)
        )

        # World bounds (origin included)
        xs = [ORIGIN.x] + [p.x for wire in puzzle.wires for p in wire]
        ys = [ORIGIN.y] + [p.y for wire in puzzle.wires for p in wire]
        self.min_x, self.max_x = min(xs), max(xs)
        self.min_y, self.max_y = min(ys), max(ys)

        # Camera
        self.cell_size = 20.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        from advent_engine.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    @property
    def finished(self) -> bool:
        return self.revealed >= self.total_steps

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit both wires on screen with padding."""
        # Small windows get less padding so the drawable area stays positive
        padding = min(40, self.screen_width // 4, self.screen_height // 4)
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        span_w = self.max_x - self.min_x + 1
        span_h = self.max_y - self.min_y + 1

        self.cell_size = max(0.001, min(available_w / span_w, available_h / span_h))

        self.offset_x = (self.screen_width - span_w * self.cell_size) / 2
        self.offset_y = (self.screen_height - span_h * self.cell_size) / 2

    def world_to_screen(self, wx, wy):
        # World y points up, screen y points down
        half = self.cell_size / 2
        sx = (wx - self.min_x) * self.cell_size + self.offset_x + half
        sy = (self.max_y - wy) * self.cell_size + self.offset_y + half
        return sx, sy

    def screen_to_world(self, sx, sy):
        half = self.cell_size / 2
        wx = (sx - self.offset_x - half) / self.cell_size + self.min_x
        wy = self.max_y - (sy - self.offset_y - half) / self.cell_size
        return wx, wy

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Crossed Wires - {len(self.puzzle.intersections)} crossings")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx, wy = self.screen_to_world(mx, my)

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(0.001, min(100.0, self.cell_size))

                # Keep the world point under the mouse fixed
                half = self.cell_size / 2
                self.offset_x = mx - (wx - self.min_x) * self.cell_size - half
                self.offset_y = my - (self.max_y - wy) * self.cell_size - half

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def wire_polyline(self, index: int) -> List[Tuple[float, float]]:
        """Screen-space vertices of a wire, cut off at the current reveal step."""
        wire = self.puzzle.wires[index]
        points = []
        for step, corner in self.corners[index]:
            if step > self.revealed:
                break
            points.append(self.world_to_screen(corner.x, corner.y))

        # Partial segment up to the tip
        tip = min(self.revealed, len(wire))
        if tip > 0:
            points.append(self.world_to_screen(wire[tip - 1].x, wire[tip - 1].y))
        return points

    def draw_wires(self):
        self.surface.fill(self.COLOR_BG)

        for index, color in enumerate(self.COLOR_WIRES[:len(self.puzzle.wires)]):
            points = self.wire_polyline(index)
            if len(points) >= 2:
                pygame.draw.lines(self.surface, color, False, points, 1)

        ox, oy = self.world_to_screen(ORIGIN.x, ORIGIN.y)
        pygame.draw.rect(self.surface, self.COLOR_ORIGIN, (int(ox) - 3, int(oy) - 3, 7, 7))

        for reached_at, point in self.crossings:
            if reached_at > self.revealed:
                break
            sx, sy = self.world_to_screen(point.x, point.y)
            pygame.draw.circle(self.surface, self.COLOR_CROSSING, (int(sx), int(sy)), 3)

        # Answers on top, only once the wires have actually reached them
        for point, color in ((self.puzzle.closest, self.COLOR_CLOSEST), (self.puzzle.fastest, self.COLOR_FASTEST)):
            if point is None:
                continue
            if max(table[point] for table in self.puzzle.step_tables) <= self.revealed:
                sx, sy = self.world_to_screen(point.x, point.y)
                pygame.draw.circle(self.surface, color, (int(sx), int(sy)), 7, 2)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        shown = sum(1 for reached_at, _ in self.crossings if reached_at <= self.revealed)
        info = [
            f"FPS: {fps}",
            f"Steps: {min(self.revealed, self.total_steps):,} / {self.total_steps:,}",
            f"Crossings: {shown} / {len(self.crossings)}",
            f"Zoom: {self.cell_size:.3f}",
            "REC" if self.recorder.active else "",
        ]
        if self.finished:
            closest, fastest = self.puzzle.closest, self.puzzle.fastest
            info.append(f"Distance: {self.puzzle.part_one} at ({closest.x}, {closest.y})")
            info.append(f"Steps: {combined_steps(self.puzzle.step_tables, fastest)} at ({fastest.x}, {fastest.y})")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step(self):
        """One frame: input, reveal, draw, capture."""
        self.handle_input()

        if not self.finished:
            self.revealed = min(self.total_steps, self.revealed + self.speed)

        self.draw_wires()
        self.draw_hud()
        pygame.display.flip()

        if self.recorder.active:
            self.recorder.capture_frame(self.surface)
            # Recording ends with the reveal, no need to keep the window up
            if self.finished:
                self.running = False

        self.clock.tick(60)

    def run_loop(self):
        try:
            while self.running:
                self.step()
        finally:
            # Writer must be released even if a frame blows up
            self.recorder.stop()
            pygame.quit()

    def save_image(self, filepath: str):
        """Renders the fully revealed wires off-screen and writes them to an image file."""
        self.surface = pygame.Surface((self.screen_width, self.screen_height))
        self.fit_to_screen()
        self.revealed = self.total_steps
        self.draw_wires()
        pygame.image.save(self.surface, filepath)
