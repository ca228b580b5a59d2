import argparse
import logging
import os
import sys

from svgpathtools import svg2paths

from svgtween.path.parser import PathError
from svgtween.path.utils import log
from svgtween.tween import Config, interpolate_path, frames


def progress(value):
    try:
        t = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError('t should be a number')
    if not 0 <= t <= 1:
        raise argparse.ArgumentTypeError('t should be between 0 and 1')
    return t


def frame_count(value):
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('The number of frames should be an integer')
    if count < 2:
        raise argparse.ArgumentTypeError('At least 2 frames are needed')
    return count


def path_source(value):
    """A `d` string, or an SVG file whose first path is used"""
    if value.lower().endswith('.svg') and os.path.isfile(value):
        paths, attributes = svg2paths(value)
        for attribute in attributes:
            if 'd' in attribute:
                return attribute['d']
        raise argparse.ArgumentTypeError('No path found in %s' % value)
    return value


def parse_args(args=None):
    parser = argparse.ArgumentParser(description='Interpolate between two SVG paths')
    parser.add_argument('start', type=path_source, help='Path `d` string or SVG file at t=0')
    parser.add_argument('end', type=path_source, help='Path `d` string or SVG file at t=1')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-n', dest='steps', type=frame_count, default=5,
                       help='Number of evenly spaced frames')
    group.add_argument('-t', dest='times', type=progress, action='append',
                       metavar='T', help='Progress value in [0, 1], can be repeated')
    parser.add_argument('--strict', action='store_true',
                        help='Fail on commands with missing parameters')
    parser.add_argument('-v', dest='verbose', action='store_true')
    ns = parser.parse_args(args)

    return (ns.start, ns.end, ns.times or ns.steps, ns.strict, ns.verbose)


class StrictConfig(Config):
    strict = True


def tween(start, end, times, strict=False, out=None):
    out = out or sys.stdout
    config = StrictConfig if strict else Config

    if isinstance(times, int):
        for t, d in frames(start, end, times, config=config):
            print('%s\t%s' % (t, d), file=out)
        return

    interpolator = interpolate_path(start, end, config=config)
    for t in times:
        print('%s\t%s' % (t, interpolator(t)), file=out)


def main(args=None):
    start, end, times, strict, verbose = parse_args(args)

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    try:
        tween(start, end, times, strict)
    except PathError as e:
        log(str(e), logging.ERROR)
        sys.exit(1)


if __name__ == '__main__':
    main()
