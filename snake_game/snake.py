from collections import deque
from config import *
import pygame

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)


def is_valid_turn(current, new):
    """A turn is valid unless it points straight back along the current heading."""
    return (new[0], new[1]) != (-current[0], -current[1])


class Snake:
    """Snake on a tile grid with a buffered direction change."""

    def __init__(self, x, y, length=INITIAL_LENGTH, velocity=RIGHT):
        self.length = length
        self.reset(x, y, velocity)

    def reset(self, x, y, velocity=RIGHT):
        """Put the head on (x, y) and forget the body history."""
        self.x = x
        self.y = y
        self.velocity_x, self.velocity_y = velocity
        self.next_velocity_x, self.next_velocity_y = velocity
        self.body = deque()

    @property
    def head(self):
        return (self.x, self.y)

    @property
    def velocity(self):
        return (self.velocity_x, self.velocity_y)

    @property
    def next_velocity(self):
        return (self.next_velocity_x, self.next_velocity_y)

    def request_direction(self, direction):
        """Buffer a direction for the next tick; reversals are rejected."""
        if not is_valid_turn(self.velocity, direction):
            return False
        self.next_velocity_x, self.next_velocity_y = direction
        return True

    def apply_pending_direction(self):
        """Start of tick: take over the buffered direction."""
        if is_valid_turn(self.velocity, self.next_velocity):
            self.velocity_x, self.velocity_y = self.next_velocity
        else:
            self.next_velocity_x, self.next_velocity_y = self.velocity

    def advance(self, tile_size):
        """Move the head one tile along the current velocity."""
        self.x += tile_size * self.velocity_x
        self.y += tile_size * self.velocity_y

    def record_position(self):
        """Append the head to the body history, keeping at most `length` entries."""
        self.body.append(self.head)
        while len(self.body) > self.length:
            self.body.popleft()

    def grow(self, amount=1):
        self.length += amount

    def hits_body(self):
        return self.head in self.body

    def occupies(self, position):
        """Check if a position is covered by the head or any body segment."""
        return position == self.head or position in self.body

    def draw(self, screen, origin, tile_size, draw_head=True):
        """Draw body segments, then the head on top."""
        ox, oy = origin
        radius = tile_size // 2
        for x, y in self.body:
            pygame.draw.circle(screen, BODY_COLOR, (ox + x + radius, oy + y + radius), radius)
        if draw_head:
            pygame.draw.circle(screen, HEAD_COLOR, (ox + self.x + radius, oy + self.y + radius), radius)
