from bimap.bidict import BidirectionalMap, Pair, Position, DuplicateKeyError, StalePositionError  # noqa
from bimap.codec import encode, decode, dumps, loads, DecodeError  # noqa
from bimap.parsing.literal import LiteralSyntaxError  # noqa
