from .bounding_rect import Rect, bounding_rect
from .euclidean_distance import euclidean_distance, point_distance

__all__ = [
    "Rect",
    "bounding_rect",
    "euclidean_distance",
    "point_distance",
]
