from hex_pathing import IMPASSABLE, Unreachable, build_grid, find_path, path_cost

width, length = 10, 10
start = (0, 0)
goal = (6, 4)  # keep within demo bounds

blocked = {(1, 0), (1, 1), (2, 2), (3, 2)}
swamp = {(4, 3), (5, 3)}


def terrain(x: int, z: int):
    if (x, z) in blocked:
        return IMPASSABLE
    return 4.0 if (x, z) in swamp else 1.0


if __name__ == "__main__":
    grid = build_grid(width, length, terrain)
    result = find_path(grid, start, goal)
    if isinstance(result, Unreachable):
        print("unreachable")
    else:
        print("path:", result)
        print("cost:", path_cost(grid, result))
