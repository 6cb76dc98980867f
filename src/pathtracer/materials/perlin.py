# materials/perlin.py
import math

import numpy as np

from pathtracer.core.utils import get_rng
from pathtracer.core.vector import Vector3

POINT_COUNT = 256


class Perlin:
    """
    Gradient noise over 3D space.

    Random unit gradients sit on the integer lattice; noise() blends the
    eight surrounding gradients with Hermite-smoothed trilinear weights.
    """
    def __init__(self):
        rng = get_rng()
        gradients = rng.uniform(-1.0, 1.0, (POINT_COUNT, 3))
        gradients /= np.linalg.norm(gradients, axis=1, keepdims=True)
        # Plain lists: scalar indexing is far faster than on numpy arrays.
        self.ranvec = [Vector3(*map(float, g)) for g in gradients]
        self.perm_x = rng.permutation(POINT_COUNT).tolist()
        self.perm_y = rng.permutation(POINT_COUNT).tolist()
        self.perm_z = rng.permutation(POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in (0, 1):
            for dj in (0, 1):
                for dk in (0, 1):
                    gradient = self.ranvec[
                        self.perm_x[(i + di) & 255]
                        ^ self.perm_y[(j + dj) & 255]
                        ^ self.perm_z[(k + dk) & 255]
                    ]
                    weight_v = Vector3(u - di, v - dj, w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * gradient.dot(weight_v))
        return accum

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of depth octaves of noise, each at half the weight and twice the frequency."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
