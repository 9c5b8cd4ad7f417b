"""Vertical motion with gravity and jumping."""

from dataclasses import dataclass


@dataclass
class Move:
    """Tracks vertical velocity of an object under gravity."""

    GRAVITY = 1500.0
    JUMP_SPEED = -800.0

    velocity_y: float = 0.0
    on_ground: bool = True

    def update(self, delta_time, position):
        """Advance the motion by ``delta_time`` seconds, changing ``position.y`` in place."""
        if self.on_ground:
            self.velocity_y = 0.0
            return
        self.velocity_y += self.GRAVITY * delta_time
        position.y += self.velocity_y * delta_time

    def start_jump(self):
        """Start a jump if standing on the ground."""
        if self.on_ground:
            self.on_ground = False
            self.velocity_y = self.JUMP_SPEED

    def reset_velocity_y(self):
        """Stop all vertical motion."""
        self.velocity_y = 0.0