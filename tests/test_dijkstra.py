import unittest

import numpy as np

from mazegrid import (
    Coordinate,
    Distances,
    Grid,
    InconsistentDistancesError,
    NoPathError,
    OutOfBoundsError,
    SidewinderGenerator,
    UnreachableError,
    longest_path,
)
from mazegrid.generators import binary_tree


def corridor(length: int) -> Grid:
    grid = Grid(1, length)
    row = grid.rows()[0]
    for west, east in zip(row, row[1:]):
        grid.link_bidi(west, east)
    return grid


class DistanceFieldTests(unittest.TestCase):
    def test_origin_is_zero(self) -> None:
        grid = corridor(4)
        distances = Distances.build(grid, Coordinate(0, 0))
        self.assertEqual(distances.origin, Coordinate(0, 0))
        self.assertEqual(distances[Coordinate(0, 0)], 0)

    def test_corridor_distances_count_hops(self) -> None:
        grid = corridor(5)
        distances = Distances.build(grid, Coordinate(2, 0))
        self.assertEqual(
            [distances[coords] for coords in grid.rows()[0]],
            [2, 1, 0, 1, 2],
        )
        self.assertEqual(distances.max_distance, 2)

    def test_unreachable_cells_have_no_entry(self) -> None:
        grid = Grid(1, 3)
        grid.link_bidi(Coordinate(0, 0), Coordinate(1, 0))
        distances = Distances.build(grid, Coordinate(0, 0))
        self.assertNotIn(Coordinate(2, 0), distances)
        self.assertIsNone(distances.get(Coordinate(2, 0)))
        self.assertEqual(len(distances), 2)

    def test_lone_origin(self) -> None:
        distances = Distances.build(Grid(1, 1), Coordinate(0, 0))
        self.assertEqual(distances.max_distance, 0)
        self.assertEqual(distances.farthest(), (Coordinate(0, 0), 0))

    def test_field_must_contain_its_origin_at_zero(self) -> None:
        with self.assertRaises(ValueError):
            Distances(Coordinate(0, 0), {})
        with self.assertRaises(ValueError):
            Distances(Coordinate(0, 0), {Coordinate(0, 0): 3})
        self.assertEqual(Distances(Coordinate(1, 0), {Coordinate(1, 0): 0}).max_distance, 0)

    def test_out_of_bounds_origin_fails(self) -> None:
        with self.assertRaises(OutOfBoundsError):
            Distances.build(Grid(2, 2), Coordinate(3, 3))

    def test_each_distance_is_one_more_than_its_closest_neighbor(self) -> None:
        grid = SidewinderGenerator(seed=11).generate(9, 7)
        origin = Coordinate(3, 4)
        distances = Distances.build(grid, origin)
        for coords, distance in distances.items():
            if coords == origin:
                continue
            closest = min(distances[linked] for linked in grid.links(coords) if linked in distances)
            self.assertEqual(distance, closest + 1)

    def test_field_is_a_snapshot(self) -> None:
        grid = Grid(1, 2)
        distances = Distances.build(grid, Coordinate(0, 0))
        grid.link_bidi(Coordinate(0, 0), Coordinate(1, 0))
        self.assertNotIn(Coordinate(1, 0), distances)

    def test_to_array(self) -> None:
        grid = Grid(2, 2)
        grid.link_bidi(Coordinate(0, 0), Coordinate(1, 0))
        grid.link_bidi(Coordinate(1, 0), Coordinate(1, 1))
        field = Distances.build(grid, Coordinate(0, 0)).to_array(grid.height, grid.width)
        np.testing.assert_array_equal(field, np.array([[0, 1], [-1, 2]]))

    def test_farthest(self) -> None:
        grid = corridor(6)
        self.assertEqual(Distances.build(grid, Coordinate(1, 0)).farthest(), (Coordinate(5, 0), 4))


class ShortestPathTests(unittest.TestCase):
    def test_path_to_origin_is_the_origin(self) -> None:
        grid = corridor(3)
        distances = Distances.build(grid, Coordinate(1, 0))
        self.assertEqual(distances.shortest_path_to(grid, Coordinate(1, 0)), [Coordinate(1, 0)])

    def test_path_runs_from_origin_to_destination(self) -> None:
        grid = corridor(4)
        distances = Distances.build(grid, Coordinate(0, 0))
        self.assertEqual(
            distances.shortest_path_to(grid, Coordinate(3, 0)),
            [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0), Coordinate(3, 0)],
        )

    def test_unreachable_destination_fails(self) -> None:
        grid = Grid(1, 2)
        distances = Distances.build(grid, Coordinate(0, 0))
        with self.assertRaises(UnreachableError):
            distances.shortest_path_to(grid, Coordinate(1, 0))
        with self.assertRaises(NoPathError):
            distances.shortest_path_to(grid, Coordinate(7, 7))

    def test_stale_field_is_reported(self) -> None:
        distances = Distances.build(corridor(3), Coordinate(0, 0))
        changed = Grid(1, 3)
        changed.link_bidi(Coordinate(2, 0), Coordinate(1, 0))
        with self.assertRaises(InconsistentDistancesError):
            distances.shortest_path_to(changed, Coordinate(2, 0))

    def test_ties_go_to_the_first_link(self) -> None:
        # A 2x2 loop: both neighbors of the far corner sit at distance 1.
        grid = Grid(2, 2)
        grid.link_bidi(Coordinate(0, 0), Coordinate(1, 0))
        grid.link_bidi(Coordinate(0, 0), Coordinate(0, 1))
        grid.link_bidi(Coordinate(1, 1), Coordinate(0, 1))
        grid.link_bidi(Coordinate(1, 1), Coordinate(1, 0))
        distances = Distances.build(grid, Coordinate(0, 0))
        path = distances.shortest_path_to(grid, Coordinate(1, 1))
        self.assertEqual(path, [Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 1)])

    def test_sidewinder_maze_end_to_end(self) -> None:
        grid = SidewinderGenerator(seed=2024).generate(10, 10)
        origin = Coordinate(0, 0)
        destination = Coordinate(9, 9)
        distances = Distances.build(grid, origin)
        path = distances.shortest_path_to(grid, destination)
        self.assertEqual(path[0], origin)
        self.assertEqual(path[-1], destination)
        self.assertEqual(len(path), distances[destination] + 1)
        for current, following in zip(path, path[1:]):
            self.assertIn(following, grid.links(current))
            self.assertIn(current, grid.links(following))

    def test_every_cell_of_a_binary_tree_maze_is_solvable(self) -> None:
        grid = binary_tree.apply_to(Grid(6, 6), seed=3)
        distances = Distances.build(grid, Coordinate(5, 5))
        for coords in grid:
            path = distances.shortest_path_to(grid, coords)
            self.assertEqual(len(path), distances[coords] + 1)
            self.assertEqual(path[-1], coords)


class LongestPathTests(unittest.TestCase):
    def test_corridor_longest_path_spans_it(self) -> None:
        path = longest_path(corridor(5), Coordinate(2, 0))
        self.assertEqual({path[0], path[-1]}, {Coordinate(0, 0), Coordinate(4, 0)})
        self.assertEqual(len(path), 5)

    def test_ends_are_mutually_farthest(self) -> None:
        grid = SidewinderGenerator(seed=8).generate(8, 8)
        path = longest_path(grid)
        from_start = Distances.build(grid, path[0])
        from_end = Distances.build(grid, path[-1])
        self.assertEqual(from_start.max_distance, len(path) - 1)
        self.assertEqual(from_end.max_distance, len(path) - 1)


if __name__ == "__main__":
    unittest.main()
