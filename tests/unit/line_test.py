from pytest import mark, raises

from geotypes import Coordinate, Line


def test_new():
    line = Line.new(Coordinate(0.0, 0.0), Coordinate(1.0, 2.0))
    assert line.start == Coordinate(0.0, 0.0)
    assert line.end == Coordinate(1.0, 2.0)


@mark.parametrize(
    "start, end",
    [
        ((0, 0), (1, 2)),
        ((-1.5, 3.0), (2.5, -7.25)),
        ((4, 4), (4, 4)),
    ],
)
def test_endpoints_stored_verbatim(start, end):
    s, e = Coordinate(*start), Coordinate(*end)
    line = Line(s, e)
    assert line.start == s
    assert line.end == e
    assert line.points() == (s, e)


def test_degenerate_line_is_valid():
    p = Coordinate(2, 3)
    line = Line.new(p, p)
    assert line.start == line.end == p
    assert line.delta() == Coordinate(0, 0)


def test_direction_matters():
    a, b = Coordinate(0, 0), Coordinate(1, 1)
    assert Line(a, b) != Line(b, a)
    assert Line(a, b) == Line(Coordinate(0, 0), Coordinate(1, 1))


def test_from_points():
    assert Line.from_points((0, 0), [1, 2]) == Line(Coordinate(0, 0), Coordinate(1, 2))
    with raises(ValueError):
        Line.from_points((0, 0), (1, 2, 3))


def test_deltas_and_determinant():
    line = Line(Coordinate(1, 2), Coordinate(4, 6))
    assert line.dx() == 3
    assert line.dy() == 4
    assert line.delta() == Coordinate(3, 4)
    assert line.determinant() == 1 * 6 - 2 * 4


def test_immutable():
    line = Line(Coordinate(0, 0), Coordinate(1, 1))
    with raises(AttributeError):
        line.start = Coordinate(5, 5)  # type: ignore[misc]
