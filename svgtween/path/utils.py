import logging
import math


def parseFloat(f):
    try:
        return float(f)
    except (TypeError, ValueError):
        return math.nan


def array_of_length(length, value=None):
    return [value] * length


logger = logging.getLogger('svgtween')


def log(msg, level=logging.DEBUG):
    logger.log(level, msg)
