import argparse
import sys
import time

from convex_hull import GrahamScan
from geometry import polygon_area
from logger import get_logger, set_level
from points_io import DISTRIBUTIONS, generate_random_points, hull_report, read_points

log = get_logger(__name__)

DEFAULT_INPUT = 'polygon.txt'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='convex-hull',
        description='Build the convex hull of integer points and compute its area.',
    )
    parser.add_argument(
        'input', nargs='?', default=DEFAULT_INPUT,
        help=f'file with the number of points followed by x y pairs (default: {DEFAULT_INPUT})',
    )
    parser.add_argument('--random', type=int, metavar='N', help='generate N random points instead of reading a file')
    parser.add_argument('--distribution', choices=DISTRIBUTIONS, default='uniform')
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--output', metavar='PATH', help='write the report to a file instead of stdout')
    parser.add_argument('--plot', action='store_true', help='show the hull in a matplotlib window')
    parser.add_argument('--save-plot', metavar='PATH', help='save the hull plot to an image file')
    parser.add_argument('--log-level', choices=LOG_LEVELS, default='WARNING')
    return parser


def run(args: argparse.Namespace) -> str:
    if args.random is not None:
        points = generate_random_points(args.random, args.distribution, seed=args.seed)
        log.info('Generated %d points (%s)', len(points), args.distribution)
    else:
        points = read_points(args.input)

    start_time = time.time()
    hull = GrahamScan().compute_hull(points)
    area = polygon_area(hull)
    log.info('Hull of %d points computed in %.6f sec', len(points), time.time() - start_time)

    report = hull_report(hull, area)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(report + '\n')
        log.info('Report saved to %s', args.output)
    else:
        print(report)

    if args.save_plot or args.plot:
        from visualization import plot_hull, save_hull_plot

        if args.save_plot:
            save_hull_plot(args.save_plot, points, hull, area)
            log.info('Plot saved to %s', args.save_plot)
        if args.plot:
            import matplotlib.pyplot as plt

            plot_hull(points, hull, area)
            plt.show()

    return report


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    set_level(args.log_level)

    try:
        run(args)
    except (ValueError, OSError) as e:
        log.error('%s', e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
