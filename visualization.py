import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, s=4)
    else:
        ax.scatter(x, y, s=4)


def plot_hull(points: list[Point], hull: list[Point], area: float | None = None, ax: Axes | None = None) -> Axes:
    """
    Draw the point set, the hull polygon and its vertices.
    Degenerate hulls (one or two vertices) are drawn as a point or a segment.
    """
    if ax is None:
        ax = plt.gca()

    plot_points(points, ax)

    xs = [p.x for p in hull]
    ys = [p.y for p in hull]
    if len(hull) >= 3:
        ax.add_patch(Polygon(list(zip(xs, ys)), closed=True, fill=True, alpha=0.2, ec='r', fc='r'))
    elif len(hull) == 2:
        ax.plot(xs, ys, c='r')
    ax.scatter(xs, ys, c='r', s=12)

    for i, p in enumerate(hull):
        ax.annotate(str(i), (p.x, p.y), textcoords='offset points', xytext=(3, 3), fontsize=8)

    title = f'Convex hull: {len(hull)} of {len(points)} points'
    if area is not None:
        title += f', area = {area:g}'
    ax.set_title(title)
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)
    return ax


def save_hull_plot(filename: str, points: list[Point], hull: list[Point], area: float | None = None):
    fig = Figure(figsize=(8, 8))
    ax = fig.add_subplot(111)
    plot_hull(points, hull, area, ax=ax)
    fig.tight_layout()
    fig.savefig(filename)
