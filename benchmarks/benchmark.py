import random

from pyinstrument import Profiler

from geotypes import Coordinate, Line
from geotypes.spatial import LineSpatialObject


def random_coords(n, seed=42):
    rnd = random.Random(seed)
    return [Coordinate(rnd.uniform(-1e3, 1e3), rnd.uniform(-1e3, 1e3)) for _ in range(n)]


def benchmark_primitives():
    N = 200_000
    coords = random_coords(N)
    print(f"Generated {len(coords)} coordinates")

    profiler = Profiler()
    profiler.start()

    acc = 0.0
    for a, b, c in zip(coords, coords[1:], coords[2:]):
        acc += a.dot(b)
        acc += a.cross_prod(b, c)

    lines = [Line(a, b) for a, b in zip(coords[::2], coords[1::2])]
    query = Coordinate(0.0, 0.0)
    for line in lines:
        obj = LineSpatialObject(line)
        obj.mbr()
        acc += obj.distance2(query)
    print(f"Computation finished ({acc:.6g}).")

    profiler.stop()
    profiler.print()

    with open("primitives_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_primitives()
