import re

from svgtween.path.interpolate import format_number
from svgtween.path.pathseg import SEGMENT_CLASSES, create_segment, is_closepath
from svgtween.path.utils import parseFloat, log


class Config:
    strict = False  # raise ArityMismatchError instead of filling missing params with nan


class PathError(ValueError):
    pass


class InvalidCommandError(PathError):
    pass


class ArityMismatchError(PathError):
    pass


COMMANDS = set('MmLlHhVvCcSsQqTtAa')
CLOSE_RE = re.compile('[Zz]')
# remove spaces after letters, as seen in IE
LETTER_SPACE_RE = re.compile(r'([MLCSTQAHV])\s*', re.IGNORECASE)
# e/E are exponents, not commands
COMMAND_SPLIT_RE = re.compile('(?=[A-DF-Za-df-z])')
PARAMS_SPLIT_RE = re.compile(r'[\s,]+')


def normalize_path(pathdef):
    if pathdef is None:
        return ''
    pathdef = CLOSE_RE.sub('', pathdef)
    pathdef = LETTER_SPACE_RE.sub(r'\1', pathdef)
    return pathdef.strip()


def path_is_closed(pathdef):
    """True when pathdef ends with Z or z.

    A missing or blank path counts as closed too, so that it never stops the
    other path of a pair from keeping its Z: both ('', 'M0,0Z') and
    (None, 'M0,0Z') tween with a trailing Z.
    """
    if pathdef is None:
        return True
    pathdef = pathdef.rstrip()
    return pathdef == '' or pathdef[-1] in 'Zz'


def tokenize_path(pathdef):
    """Split a normalized `d` string so each command (e.g. L10,20) is its own entry"""
    if pathdef == '':
        return []
    return [token for token in COMMAND_SPLIT_RE.split(pathdef) if token.strip()]


def command_from_string(token, strict=None):
    if strict is None:
        strict = Config.strict

    token = token.strip()
    letter = token[0]
    if letter not in COMMANDS:
        raise InvalidCommandError("Invalid command %r in path segment %r" % (letter, token))

    params = SEGMENT_CLASSES[letter.upper()].params
    args = [a for a in PARAMS_SPLIT_RE.split(token[1:]) if a != '']

    if len(args) < len(params):
        if strict:
            raise ArityMismatchError("Command %r expects %s parameters, got %s" % (
                letter, len(params), len(args)))
        log('%s: missing parameters, filling with nan' % token)
        args += [None] * (len(params) - len(args))

    return create_segment(letter, *(parseFloat(a) for a in args[:len(params)]))


def parse_path(pathdef, strict=None):
    """Parse a path `d` attribute into a list of command objects.

    Relative commands keep their lower case letter. Any Z is dropped, see
    path_is_closed to find out whether the path was closed.
    """
    tokens = tokenize_path(normalize_path(pathdef))
    return [command_from_string(token, strict) for token in tokens]


def command_to_string(command):
    return command.pathSegTypeAsLetter + ','.join(format_number(v) for v in command.values)


def serialize_path(commands, closed=False):
    d = ''.join(command_to_string(command) for command in commands if not is_closepath(command))
    if closed:
        d += 'Z'
    return d
