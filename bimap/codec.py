"""Serialization of a BidirectionalMap as a flat sequence.

Each pair contributes two consecutive elements, left then right:

    {'A': 1, 'B': 2}  <->  ['A', 1, 'B', 2]

Decoding goes through the unique pairs constructor, so a stream holding a
repeated left or right value is rejected as a whole.
"""
import json
import logging

from bimap.bidict import BidirectionalMap, DuplicateKeyError

logger = logging.getLogger(__name__)

JSON_SEPARATORS = (',', ':')


class DecodeError(ValueError):
    pass


def encode(bimap):
    flat = []
    for left, right in bimap:
        flat.append(left)
        flat.append(right)
    return flat


def _fail(msg):
    logger.debug('Rejecting serialized map: %s', msg)
    raise DecodeError(msg)


def _check_type(value, expected, side, idx):
    if expected is None:
        return
    matches = isinstance(value, _as_tuple(expected))
    # bool is an int subclass, but a JSON true is not a number
    if isinstance(value, bool) and bool not in _as_tuple(expected):
        matches = False
    if not matches:
        _fail('Element %d (%s) expected %s, got %s: %r'
              % (idx, side, _type_name(expected), type(value).__name__, value))


def _as_tuple(expected):
    return expected if isinstance(expected, tuple) else (expected, )


def _type_name(expected):
    return ' or '.join(t.__name__ for t in _as_tuple(expected))


def decode(sequence, left_type=None, right_type=None):
    if not isinstance(sequence, (list, tuple)):
        _fail('Expected a flat list of alternating left and right values, got %s'
              % type(sequence).__name__)
    if len(sequence) % 2:
        _fail('Odd number of elements (%d): every left value needs a right value'
              % len(sequence))

    pairs = []
    for idx in range(0, len(sequence), 2):
        left, right = sequence[idx], sequence[idx + 1]
        _check_type(left, left_type, 'left', idx)
        _check_type(right, right_type, 'right', idx + 1)
        pairs.append((left, right))

    try:
        return BidirectionalMap.from_unique_pairs(pairs)
    except DuplicateKeyError as e:
        logger.debug('Rejecting serialized map: %s', e)
        raise DecodeError(str(e)) from e
    except TypeError as e:
        # unhashable element, e.g. a JSON array or object
        logger.debug('Rejecting serialized map: %s', e)
        raise DecodeError('Unhashable element in serialized map: %s' % e) from e


def dumps(bimap, **kwargs):
    kwargs.setdefault('separators', JSON_SEPARATORS)
    return json.dumps(encode(bimap), **kwargs)


def loads(text, left_type=None, right_type=None):
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug('Rejecting serialized map: %s', e)
        raise DecodeError('Malformed JSON: %s' % e) from e
    return decode(data, left_type=left_type, right_type=right_type)
