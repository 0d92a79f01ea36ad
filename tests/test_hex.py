import math
import unittest

from core.config import HEX_RADIUS, HEX_HEIGHT
from core.hex.utils import (
    axial_to_cube, cube_round, cube_to_axial, get_neighbors, hex_distance,
    hex_round, hex_spiral, hex_to_world, world_to_hex,
)


class TestHexUtils(unittest.TestCase):
    def test_hex_distance(self):
        # Test distance between same hex
        self.assertEqual(hex_distance((0, 0), (0, 0)), 0)
        # Test distance between adjacent hexes
        self.assertEqual(hex_distance((0, 0), (1, 0)), 1)
        self.assertEqual(hex_distance((0, 0), (0, 1)), 1)
        self.assertEqual(hex_distance((0, 0), (-1, 0)), 1)
        self.assertEqual(hex_distance((0, 0), (0, -1)), 1)
        self.assertEqual(hex_distance((0, 0), (1, -1)), 1)
        # (1, 1) is two steps away on an axial grid
        self.assertEqual(hex_distance((0, 0), (1, 1)), 2)
        self.assertEqual(hex_distance((0, 0), (2, 1)), 3)

    def test_hex_distance_ignores_height(self):
        self.assertEqual(hex_distance((0, 0, 0), (0, 0, 5)), 0)
        self.assertEqual(hex_distance((0, 0, 3), (2, -1, -2)), 2)

    def test_get_neighbors(self):
        # Neighbors of (0,0)
        expected = {(1, 0), (0, 1), (-1, 1), (-1, 0), (0, -1), (1, -1)}
        self.assertEqual(set(get_neighbors(0, 0)), expected)
        # Test another hex
        expected = {(2, 1), (1, 2), (0, 2), (0, 1), (1, 0), (2, 0)}
        self.assertEqual(set(get_neighbors(1, 1)), expected)
        for n in get_neighbors(3, -2):
            self.assertEqual(hex_distance((3, -2), n), 1)

    def test_hex_spiral(self):
        self.assertEqual(list(hex_spiral(0, 0, 0)), [(0, 0)])
        self.assertEqual(len(list(hex_spiral(0, 0, 2))), 19)
        self.assertTrue(all(hex_distance((4, 4), c) <= 3 for c in hex_spiral(4, 4, 3)))

    def test_axial_cube_conversion(self):
        self.assertEqual(axial_to_cube(2, -5, 1), (2, 3, -5, 1))
        self.assertEqual(cube_to_axial(2, 3, -5, 1), (2, -5, 1))
        x, y, z, _ = axial_to_cube(-4, 7, 0)
        self.assertEqual(x + y + z, 0)

    def test_hex_to_world(self):
        origin = hex_to_world(0, 0, 0)
        self.assertEqual((origin.x, origin.y, origin.z), (0, 0, 0))

        p = hex_to_world(0, 1, 2)
        self.assertAlmostEqual(p.x, HEX_RADIUS * 1.5)
        self.assertAlmostEqual(p.y, HEX_HEIGHT * 2)
        self.assertAlmostEqual(p.z, HEX_RADIUS * math.sqrt(3) * 0.5)

        # Neighboring centers are sqrt(3) radii apart
        for q, r in get_neighbors(0, 0):
            self.assertAlmostEqual((hex_to_world(q, r, 0) - origin).length(), HEX_RADIUS * math.sqrt(3))

    def test_world_round_trip(self):
        for q in range(-6, 7):
            for r in range(-6, 7):
                for h in (-3, 0, 1, 4):
                    self.assertEqual(world_to_hex(hex_to_world(q, r, h)), (q, r, h))

    def test_world_to_hex_near_center(self):
        center = hex_to_world(2, -1, 0)
        # Anything well inside the hex maps back to it
        self.assertEqual(world_to_hex((center.x + 0.5, center.y + 0.1, center.z - 0.5)), (2, -1, 0))
        self.assertEqual(world_to_hex((0.9, 0.0, -0.9)), (0, 0, 0))

    def test_cube_round_lattice_points_exact(self):
        for x, y, z in [(0, 0, 0), (3, -1, -2), (-5, 5, 0), (1, 1, -2)]:
            self.assertEqual(cube_round(float(x), float(y), float(z)), (x, y, z))

    def test_cube_round_invariant(self):
        steps = [i / 7 for i in range(-21, 22)]
        for fx in steps:
            for fz in steps:
                rx, ry, rz = cube_round(fx, -fx - fz, fz)
                self.assertEqual(rx + ry + rz, 0)

    def test_cube_round_largest_error_is_rebuilt(self):
        # x is off by 0.4, the most, so it gets rebuilt from y and z
        self.assertEqual(cube_round(0.4, 0.3, -0.7), (1, 0, -1))

    def test_cube_round_tie_breaks(self):
        # x and y tie: strict comparison skips x and rebuilds y
        self.assertEqual(cube_round(0.5, 0.5, -1.0), (0, 1, -1))
        # y and z tie: falls through to rebuilding z
        self.assertEqual(cube_round(-1.0, 0.5, 0.5), (-1, 0, 1))
        # x and z tie above y: z is rebuilt
        self.assertEqual(cube_round(0.5, -1.0, 0.5), (0, -1, 1))

    def test_hex_round(self):
        self.assertEqual(hex_round(0.2, -0.1, 0.4), (0, 0, 0))
        self.assertEqual(hex_round(1.1, 0.8, 2.6), (1, 1, 3))


if __name__ == '__main__':
    unittest.main()
