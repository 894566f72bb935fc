from typing import Any, Generic, NamedTuple, TypeVar

L = TypeVar('L')
R = TypeVar('R')


class DuplicateKeyError(ValueError):
    pass


class StalePositionError(LookupError):
    pass


class Pair(NamedTuple):
    left: Any
    right: Any


class Position:
    """Opaque handle to one pair in a map's left->right traversal order.

    Only valid for the map that issued it and only until that map is mutated.
    """
    __slots__ = ('_owner', '_generation', '_offset')

    def __init__(self, owner, generation, offset) -> None:
        self._owner = owner
        self._generation = generation
        self._offset = offset

    def _comparable(self, other):
        if not isinstance(other, Position):
            return False
        if other._owner is not self._owner or other._generation != self._generation:
            raise StalePositionError('Positions belong to different maps or snapshots')
        return True

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return (self._owner is other._owner and self._generation == other._generation
                and self._offset == other._offset)

    def __hash__(self):
        return hash((id(self._owner), self._generation, self._offset))

    def __lt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._offset < other._offset

    def __le__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._offset <= other._offset

    def __repr__(self):
        return f'<Position:{self._offset}@{self._generation}>'


class BidirectionalMap(Generic[L, R]):
    """One-to-one mapping between left and right values.

    Two dicts are kept mutually inverse: `_left_to_right` and `_right_to_left`.
    They are private, every write goes through `associate` or one of the
    `disassociate_*` methods. Lookups in either direction are O(1).

    Example::

        >>> bm = BidirectionalMap.from_dict({'A': 1, 'B': 2})
        >>> bm.lookup_right(2)
        'B'
        >>> bm.associate('A', 2)
        (1, 'B')
        >>> bm
        BidirectionalMap({'A': 2})
    """

    def __init__(self, pairs=None, minimum_capacity=0) -> None:
        # dicts do not preallocate, the hint is only validated
        if minimum_capacity < 0:
            raise ValueError('minimum_capacity must be non negative, got %r' % minimum_capacity)
        self._left_to_right = {}
        self._right_to_left = {}
        self._generation = 0
        self._snapshot = None
        if pairs is not None:
            for left, right in pairs:
                if left in self._left_to_right or right in self._right_to_left:
                    raise DuplicateKeyError(
                        'Sequence of left-right value pairs contains duplicate keys: (%r, %r)'
                        % (left, right))
                self.associate(left, right)

    @classmethod
    def from_unique_pairs(cls, pairs):
        return cls(pairs)

    @classmethod
    def from_dict(cls, mapping):
        return cls(mapping.items())

    @staticmethod
    def from_string(text):
        # import here to avoid circular import error
        from bimap.parsing.literal import parser
        return parser.parse(text)

    @classmethod
    def _from_storage(cls, left_to_right, right_to_left):
        obj = cls.__new__(cls)
        obj._left_to_right = left_to_right
        obj._right_to_left = right_to_left
        obj._generation = 0
        obj._snapshot = None
        return obj

    # -- Associations

    def associate(self, left, right):
        """Pairs `left` with `right`, evicting whatever either was paired with.

        The pair keyed by `left` is removed first, then the pair keyed by
        `right` is looked up in what remains. Returns
        `(previous_right, previous_left)`, with None for a side that displaced
        nothing.
        """
        # both must be hashable before anything is evicted
        hash(left)
        hash(right)
        previous_right = self.disassociate_left(left)
        previous_left = self.disassociate_right(right)
        self._left_to_right[left] = right
        self._right_to_left[right] = left
        self._touch()
        return previous_right, previous_left

    def disassociate_left(self, left, default=None):
        if left not in self._left_to_right:
            return default
        right = self._left_to_right.pop(left)
        del self._right_to_left[right]
        self._touch()
        return right

    def disassociate_right(self, right, default=None):
        if right not in self._right_to_left:
            return default
        left = self._right_to_left.pop(right)
        del self._left_to_right[left]
        self._touch()
        return left

    def disassociate_all(self, keep_capacity=False):
        # dicts cannot keep or release capacity on request, the flag is accepted
        # and ignored. Clearing in place keeps views from left_values() and
        # items() in sync either way.
        self._left_to_right.clear()
        self._right_to_left.clear()
        self._touch()

    def set_left(self, left, right):
        """Associates `left` with `right`, or disassociates `left` when `right` is None."""
        if right is None:
            self.disassociate_left(left)
        else:
            self.associate(left, right)

    def set_right(self, right, left):
        """Associates `right` with `left`, or disassociates `right` when `left` is None."""
        if left is None:
            self.disassociate_right(right)
        else:
            self.associate(left, right)

    def _touch(self):
        self._generation += 1
        self._snapshot = None

    # -- Lookups

    def lookup_left(self, left, default=None):
        return self._left_to_right.get(left, default)

    def lookup_right(self, right, default=None):
        return self._right_to_left.get(right, default)

    def contains_left(self, left):
        return left in self._left_to_right

    def contains_right(self, right):
        return right in self._right_to_left

    def left_values(self):
        return self._left_to_right.keys()

    def right_values(self):
        return self._right_to_left.keys()

    def items(self):
        return self._left_to_right.items()

    @property
    def count(self):
        return len(self._left_to_right)

    @property
    def is_empty(self):
        return not self._left_to_right

    def __len__(self):
        return len(self._left_to_right)

    def __iter__(self):
        for left, right in self._left_to_right.items():
            yield Pair(left, right)

    def __contains__(self, pair):
        try:
            left, right = pair
        except (TypeError, ValueError):
            return False
        try:
            return left in self._left_to_right and self._left_to_right[left] == right
        except TypeError:
            # unhashable left
            return False

    # -- Positions

    def _offsets(self):
        # Built lazily once per generation, dropped by _touch
        if self._snapshot is None:
            keys = list(self._left_to_right)
            self._snapshot = (keys, {k: i for i, k in enumerate(keys)})
        return self._snapshot

    def _check(self, position):
        if not isinstance(position, Position):
            raise TypeError('Expected a Position, got %s' % type(position).__name__)
        if position._owner is not self:
            raise StalePositionError('Position %r was issued by another map' % position)
        if position._generation != self._generation:
            raise StalePositionError('Position %r was invalidated by a mutation' % position)

    @property
    def start_index(self):
        return Position(self, self._generation, 0)

    @property
    def end_index(self):
        return Position(self, self._generation, len(self._left_to_right))

    def index_after(self, position):
        self._check(position)
        if position._offset >= len(self._left_to_right):
            raise IndexError('Cannot advance past end_index')
        return Position(self, self._generation, position._offset + 1)

    def index_for_left(self, left):
        """Position of the pair keyed by `left`, or None.

        The first positional call after a mutation builds an offset table in
        O(n); later calls against the same generation are O(1). A loop that
        mutates before every lookup therefore pays O(n) per step.
        """
        if left not in self._left_to_right:
            return None
        _, offsets = self._offsets()
        return Position(self, self._generation, offsets[left])

    def index_for_right(self, right):
        if right not in self._right_to_left:
            return None
        return self.index_for_left(self._right_to_left[right])

    def __getitem__(self, position):
        self._check(position)
        keys, _ = self._offsets()
        if position._offset >= len(keys):
            raise IndexError('end_index does not refer to a pair')
        left = keys[position._offset]
        return Pair(left, self._left_to_right[left])

    # -- Copies

    def inverse(self):
        return BidirectionalMap._from_storage(dict(self._right_to_left), dict(self._left_to_right))

    def copy(self):
        return self._from_storage(dict(self._left_to_right), dict(self._right_to_left))

    __copy__ = copy

    # -- Equality & description

    def __eq__(self, other):
        if not isinstance(other, BidirectionalMap):
            return NotImplemented
        return self._left_to_right == other._left_to_right

    __hash__ = None

    def __repr__(self):
        return f'{type(self).__name__}({self._left_to_right!r})'

    def __str__(self):
        return str(self._left_to_right)
