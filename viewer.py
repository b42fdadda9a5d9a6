#viewer.py

import pygame
import numpy as np
import constants as C
import logger as log

def static_colors(noise_map):
    """Grayscale colors for a static noise map. Returned as (width, height, 3) for surfarray."""
    levels = np.clip(noise_map, 0, C.STATIC_NOISE_LEVELS - 1).astype(np.uint8)
    colors = np.repeat(levels[..., np.newaxis], 3, axis=2)
    return np.transpose(colors, (1, 0, 2))

def perlin_grayscale_colors(noise_map):
    values = np.nan_to_num(np.clip(noise_map, 0.0, 1.0), nan=0.0)
    levels = (values * 255).astype(np.uint8)
    colors = np.repeat(levels[..., np.newaxis], 3, axis=2)
    return np.transpose(colors, (1, 0, 2))

def perlin_terrain_colors(noise_map):
    """Colors a Perlin map as banded terrain: water gradient, sand, grass, dirt, mountain."""
    values = np.nan_to_num(noise_map, nan=0.0)
    colors = np.zeros((*values.shape, 3), dtype=np.uint8)
    water_mask = values < C.TERRAIN_WATER_LEVEL
    sand_mask = (values >= C.TERRAIN_WATER_LEVEL) & (values < C.TERRAIN_SAND_LEVEL)
    grass_mask = (values >= C.TERRAIN_SAND_LEVEL) & (values < C.TERRAIN_GRASS_LEVEL)
    dirt_mask = (values >= C.TERRAIN_GRASS_LEVEL) & (values < C.TERRAIN_DIRT_LEVEL)
    mountain_mask = values >= C.TERRAIN_DIRT_LEVEL
    if np.any(water_mask):
        t = np.clip(values[water_mask] / C.TERRAIN_WATER_LEVEL, 0.0, 1.0)[..., np.newaxis]
        c1 = np.array(C.COLOR_DEEP_WATER)
        c2 = np.array(C.COLOR_SHALLOW_WATER)
        colors[water_mask] = (1 - t) * c1 + t * c2
    colors[sand_mask] = C.COLOR_SAND
    colors[grass_mask] = C.COLOR_GRASS
    colors[dirt_mask] = C.COLOR_DIRT
    colors[mountain_mask] = C.COLOR_MOUNTAIN
    return np.transpose(colors, (1, 0, 2))

class NoiseViewer:
    """Shows a static map and a Perlin map side by side in a pygame window."""
    def __init__(self, static_map, perlin_map):
        self.static_map = static_map
        self.perlin_map = perlin_map
        self.view_mode = C.VIEWER_VIEW_MODES[0]
        # Scaled surfaces keyed by view mode; the static map never changes mode.
        self.surface_cache = {}
        log.log(f"NoiseViewer initialized. Default view: {self.view_mode}")

    def map_size_pixels(self):
        height, width = self.perlin_map.shape
        return width * C.VIEWER_CELL_SIZE_PIXELS, height * C.VIEWER_CELL_SIZE_PIXELS

    def window_size(self):
        map_w, map_h = self.map_size_pixels()
        width = 2 * map_w + C.VIEWER_MAP_GAP_PIXELS + 2 * C.VIEWER_MARGIN_PIXELS
        height = map_h + C.VIEWER_LABEL_HEIGHT_PIXELS + 2 * C.VIEWER_MARGIN_PIXELS
        return width, height

    def _scaled_surface(self, color_array):
        surface = pygame.surfarray.make_surface(color_array)
        return pygame.transform.scale(surface, self.map_size_pixels())

    def get_static_surface(self):
        if "static" not in self.surface_cache:
            self.surface_cache["static"] = self._scaled_surface(static_colors(self.static_map))
        return self.surface_cache["static"]

    def get_perlin_surface(self):
        if self.view_mode not in self.surface_cache:
            if self.view_mode == "terrain":
                color_array = perlin_terrain_colors(self.perlin_map)
            else:
                color_array = perlin_grayscale_colors(self.perlin_map)
            self.surface_cache[self.view_mode] = self._scaled_surface(color_array)
        return self.surface_cache[self.view_mode]

    def toggle_view_mode(self):
        """Cycles the Perlin map between the grayscale and terrain palettes."""
        index = C.VIEWER_VIEW_MODES.index(self.view_mode)
        self.view_mode = C.VIEWER_VIEW_MODES[(index + 1) % len(C.VIEWER_VIEW_MODES)]
        log.log(f"Event: View switched to '{self.view_mode}'.")

    def draw(self, screen, font):
        screen.fill(C.COLOR_VOID)
        map_w, _ = self.map_size_pixels()
        left_x = C.VIEWER_MARGIN_PIXELS
        right_x = left_x + map_w + C.VIEWER_MAP_GAP_PIXELS
        maps_y = C.VIEWER_MARGIN_PIXELS + C.VIEWER_LABEL_HEIGHT_PIXELS

        static_label = font.render("Static", True, C.COLOR_WHITE)
        perlin_label = font.render(f"Perlin ({self.view_mode})", True, C.COLOR_WHITE)
        screen.blit(static_label, (left_x, C.VIEWER_MARGIN_PIXELS))
        screen.blit(perlin_label, (right_x, C.VIEWER_MARGIN_PIXELS))

        screen.blit(self.get_static_surface(), (left_x, maps_y))
        screen.blit(self.get_perlin_surface(), (right_x, maps_y))

    def run(self):
        log.log("Attempting to initialize Pygame...")
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.window_size())
            pygame.display.set_caption(C.VIEWER_CAPTION)
            font = pygame.font.Font(None, C.VIEWER_FONT_SIZE)
            clock = pygame.time.Clock()
            log.log("CONTROLS: [V] to cycle Views, [ESC] to quit.")

            running = True
            while running:
                clock.tick(C.CLOCK_TICK_RATE)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT: running = False
                    if event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE: running = False
                        if event.key == pygame.K_v: self.toggle_view_mode()
                self.draw(screen, font)
                pygame.display.flip()
        finally:
            log.log("Quitting Pygame...")
            pygame.quit()
