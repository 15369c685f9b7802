"""
Starfield backdrop.

Stars drift towards the viewer and wrap back to the far plane once they pass
the near one. Positions are kept in numpy arrays so the whole field updates
in a couple of vector operations.
"""

import numpy as np

from .game.snake import wrap

PROJECTION_SCALE = 1.75
MAX_FRAME_DELTA = 0.65


class Starfield:
    """Parallax star field projected onto a width x height screen"""

    def __init__(self, count=100, speed=2.0, znear=1.0, zfar=10.0, width=500, height=500, rng=None):
        self.width = width
        self.height = height
        self.speed = speed
        self.znear = znear
        self.zfar = zfar
        if self.zfar <= self.znear:
            self.zfar = self.znear + 1
        self.rng = rng if rng is not None else np.random.default_rng()
        self.count = count
        self._previous_ms = 0
        self.scatter()

    def scatter(self):
        """Place every star at a fresh random position"""
        self.x = self.rng.uniform(-1.5 * self.width, 1.5 * self.width, self.count)
        self.y = self.rng.uniform(-1.5 * self.height, 1.5 * self.height, self.count)
        self.z = self.rng.uniform(self.znear, self.zfar, self.count)

    def set_speed(self, speed):
        self.speed = speed

    def set_znear(self, near):
        self.znear = abs(near) + 0.001
        if self.znear >= self.zfar:
            self.zfar = self.znear + 1
        self.scatter()

    def set_zfar(self, far):
        self.zfar = abs(far)
        if self.zfar < self.znear:
            self.zfar = self.znear + 1
        self.scatter()

    def set_star_count(self, count):
        self.count = max(0, int(count))
        self.scatter()

    def update(self, now_ms):
        """Move stars by the time elapsed since the previous update"""
        delta = (now_ms - self._previous_ms) / 1000.0
        self._previous_ms = now_ms
        # Skip the first frame and long stalls such as a hidden window
        if delta >= MAX_FRAME_DELTA or delta == 0:
            return
        self.z = wrap(self.z - self.speed * delta, self.znear, self.zfar)

    def project(self):
        """Screen positions and brightness of every star

        Returns:
            (xs, ys, alphas) arrays, alpha 1.0 at the near plane
        """
        xs = self.width / 2 + (self.x / self.z) * PROJECTION_SCALE
        ys = self.height / 2 + (self.y / self.z) * PROJECTION_SCALE
        alphas = 1.0 - (self.z - self.znear) / (self.zfar - self.znear)
        return xs, ys, alphas
