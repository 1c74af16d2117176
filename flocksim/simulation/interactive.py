"""
Interactive simulation with pygame GUI.
"""

import json
import math
import sys
from typing import Optional

import pygame

from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.integrator import ManualCommand
from .headless import HeadlessSimulation
from .population import assign_manual_control
from .tick import CreatureView


def command_from_keys(pressed) -> ManualCommand:
    """
    Map held keys to a manual steering command.

    Args:
        pressed: Key state indexable by pygame key constants, as returned
            by pygame.key.get_pressed()

    Returns:
        TURN_LEFT or TURN_RIGHT when exactly one direction is held,
        otherwise NONE
    """
    left = pressed[pygame.K_LEFT] or pressed[pygame.K_a]
    right = pressed[pygame.K_RIGHT] or pressed[pygame.K_d]
    if left and not right:
        return ManualCommand.TURN_LEFT
    if right and not left:
        return ManualCommand.TURN_RIGHT
    return ManualCommand.NONE


def triangle_points(view: CreatureView, forward: float, backward: float):
    """Vertices of a triangle centered on a creature and aimed along its heading."""
    x, y, angle = view.x, view.y, view.heading
    return [
        (x + forward * math.cos(angle), y + forward * math.sin(angle)),
        (x + backward * math.cos(angle + 2.094), y + backward * math.sin(angle + 2.094)),
        (x + backward * math.cos(angle + 4.189), y + backward * math.sin(angle + 4.189)),
    ]


class Simulation:
    """
    Interactive predator/prey simulation with pygame visualization.

    Draws completed-tick state only and feeds keyboard input to the
    manually controlled prey.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG
        self.engine = HeadlessSimulation(self.config)

        world = self.engine.world
        self.screen = pygame.display.set_mode((int(world.width), int(world.height)))
        pygame.display.set_caption("Predator/Prey Flocking")
        self.clock = pygame.time.Clock()

        self.running = True
        self.paused = False

    def update(self) -> None:
        """Advance one tick unless paused."""
        if self.paused:
            return
        self.engine.update(command_from_keys(pygame.key.get_pressed()))

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)

        state = self.engine.render_state()
        for view in state.prey:
            color = self.config.manualPreyColor if view.manual else self.config.preyColor
            pygame.draw.polygon(self.screen, color, triangle_points(view, 6, 3))
        for view in state.predators:
            pygame.draw.polygon(self.screen, self.config.predatorColor, triangle_points(view, 9, 5))

        self._draw_stats()
        pygame.display.flip()

    def _draw_stats(self) -> None:
        """Draw statistics overlay."""
        font = pygame.font.Font(None, 24)
        y_offset = 10

        stats_text = [
            f"Frame: {self.engine.frame_count}",
            f"Prey: {len(self.engine.flock)}",
            f"Eaten: {self.engine.stats['prey_eaten']}",
        ]
        if self.paused:
            stats_text.append("PAUSED")

        for text in stats_text:
            surface = font.render(text, True, (200, 200, 200))
            self.screen.blit(surface, (10, y_offset))
            y_offset += 25

    def save_score(self) -> None:
        """Save simulation score to JSON file."""
        results = self.engine.get_results()
        score_data = {
            "frame_count": self.engine.frame_count,
            "prey_count": len(self.engine.flock),
            "predator_count": len(self.engine.predators),
            "total_captures": results["total_captures"],
            "avg_polarization": results["avg_polarization"],
            "config": self.config.to_dict(),
        }

        try:
            with open(self.config.scoreOutputFile, 'w') as f:
                json.dump(score_data, f, indent=4)
            print(f"Score saved to {self.config.scoreOutputFile}")
        except OSError as e:
            print(f"Error saving score: {e}")

    def toggle_manual_control(self) -> None:
        """Hand manual control to the lowest-id prey, or release it."""
        flock = self.engine.flock
        if not flock:
            return
        if any(prey.manual_control for prey in flock):
            assign_manual_control(flock, None)
            print("Manual control: OFF")
        else:
            assign_manual_control(flock, min(prey.id for prey in flock))
            print("Manual control: ON")

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            self.update()
            self.draw()
            self.clock.tick(self.config.clamped().ticks_per_second)

        self.save_score()
        pygame.quit()
        sys.exit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_r:
            self.engine.reset()
            print("Population reset")
        elif key == pygame.K_m:
            self.toggle_manual_control()
        elif key == pygame.K_s:
            self.save_score()
