import operator


class VEBError(Exception):
    pass


class InvalidUniverse(VEBError, ValueError):
    pass


class KeyOutOfRange(VEBError, IndexError):
    def __init__(self, key, universe):
        super().__init__("key {} is outside the universe [0, {})".format(key, universe))
        self.key = key
        self.universe = universe


def next_power_of_two(n):
    return 1 << (n - 1).bit_length()


def floor_root(u):
    return 1 << ((u.bit_length() - 1) // 2)


def ceil_root(u):
    return 1 << (u.bit_length() // 2)


class VEB:
    """
    Van Emde Boas tree over the integer universe [0, u)
    The minimum of every node is kept only in that node and never pushed into
    its clusters or summary, so a singleton answers every query in O(1).
    Attributes:
        u (int): Universe size, a power of two >= 2
        requested_u (int): The universe size asked for at construction
        min (int): Smallest key, meaningless while empty
        max (int): Largest key, meaningless while empty
        empty (bool): Whether the node holds no key
        n (int): Number of keys held by the node
        summary (VEB): Tree over the cluster indices that are non-empty
        clusters (list): Child trees of size floor_root(u), None until first used
    """
    __slots__ = ('u', 'requested_u', 'min', 'max', 'empty', 'n',
                 'summary', 'clusters', '_lower')

    def __init__(self, u):
        u = operator.index(u)
        if u < 1:
            raise InvalidUniverse("u cannot be less than 1 --- u = " + str(u))
        self.requested_u = u
        self.u = max(2, next_power_of_two(u))
        self._lower = floor_root(self.u)
        self._reset()

    def _reset(self):
        self.min = 0
        self.max = 0
        self.empty = True
        self.n = 0
        self.summary = None
        self.clusters = None
        if self.u > 2:
            self.summary = VEB(ceil_root(self.u))
            self.clusters = [None] * ceil_root(self.u)

    def high(self, x):
        return x // self._lower

    def low(self, x):
        return x % self._lower

    def index(self, x, y):
        return x * self._lower + y

    def _cluster(self, h):
        # built on first use; a cluster that empties again is kept for reuse
        cluster = self.clusters[h]
        if cluster is None:
            cluster = VEB(self._lower)
            self.clusters[h] = cluster
        return cluster

    def _check_key(self, key):
        key = operator.index(key)
        if key < 0 or key >= self.u:
            raise KeyOutOfRange(key, self.u)
        return key

    # Queries

    def is_empty(self):
        return self.empty

    def minimum(self):
        return None if self.empty else self.min

    def maximum(self):
        return None if self.empty else self.max

    def search(self, key):
        return self._member(self._check_key(key))

    def successor(self, key):
        """
        Smallest key strictly greater than the given one
        Input:
            key (int): Any key of the universe, member or not
        Output:
            (int or None): The successor, None when there is none
        """
        return self._successor(self._check_key(key))

    def predecessor(self, key):
        """
        Largest key strictly smaller than the given one
        Input:
            key (int): Any key of the universe, member or not
        Output:
            (int or None): The predecessor, None when there is none
        """
        return self._predecessor(self._check_key(key))

    # Updates

    def insert(self, key):
        """
        Add a key. Inserting a key that is already present changes nothing.
        Output:
            (bool): True if the key was added
        """
        key = self._check_key(key)
        if self._member(key):
            return False
        self._insert(key)
        return True

    def remove(self, key):
        """
        Delete a key. Removing a key that is not present changes nothing.
        Output:
            (bool): True if the key was removed
        """
        key = self._check_key(key)
        if not self._member(key):
            return False
        self._delete(key)
        return True

    def clear(self):
        self._reset()

    # Recursive workers. Keys are assumed in range, _insert assumes the key
    # is absent and _delete assumes it is present.

    def _member(self, x):
        if self.empty:
            return False
        if x == self.min or x == self.max:
            return True
        if self.u == 2:
            return False
        cluster = self.clusters[self.high(x)]
        if cluster is None:
            return False
        return cluster._member(self.low(x))

    def _empty_insert(self, x):
        self.min = x
        self.max = x
        self.empty = False
        self.n = 1

    def _insert(self, x):
        if self.empty:
            self._empty_insert(x)
            return
        if x < self.min:
            x, self.min = self.min, x
        if self.u > 2:
            h = self.high(x)
            cluster = self._cluster(h)
            if cluster.empty:
                self.summary._insert(h)
                cluster._empty_insert(self.low(x))
            else:
                cluster._insert(self.low(x))
        if x > self.max:
            self.max = x
        self.n += 1

    def _delete(self, x):
        if self.min == self.max:
            self.min = 0
            self.max = 0
            self.empty = True
            self.n = 0
            return
        self.n -= 1
        if self.u == 2:
            self.min = 1 - x
            self.max = self.min
            return
        if x == self.min:
            if self.summary.empty:
                self.min = self.max
                return
            first = self.summary.min
            x = self.index(first, self.clusters[first].min)
            self.min = x
        h = self.high(x)
        cluster = self.clusters[h]
        cluster._delete(self.low(x))
        if cluster.empty:
            self.summary._delete(h)
            if x == self.max:
                if self.summary.empty:
                    self.max = self.min
                else:
                    last = self.summary.max
                    self.max = self.index(last, self.clusters[last].max)
        elif x == self.max:
            self.max = self.index(h, cluster.max)

    def _successor(self, x):
        if self.empty:
            return None
        if self.u == 2:
            if x == 0 and self.max == 1:
                return 1
            return None
        if x < self.min:
            return self.min
        h = self.high(x)
        l = self.low(x)
        cluster = self.clusters[h]
        if cluster is not None and not cluster.empty and l < cluster.max:
            return self.index(h, cluster._successor(l))
        succcluster = self.summary._successor(h)
        if succcluster is None:
            return None
        return self.index(succcluster, self.clusters[succcluster].min)

    def _predecessor(self, x):
        if self.empty:
            return None
        if self.u == 2:
            if x == 1 and self.min == 0:
                return 0
            return None
        if x > self.max:
            return self.max
        h = self.high(x)
        l = self.low(x)
        cluster = self.clusters[h]
        if cluster is not None and not cluster.empty and l > cluster.min:
            return self.index(h, cluster._predecessor(l))
        predcluster = self.summary._predecessor(h)
        if predcluster is None:
            # only the deferred minimum can lie below x
            if x > self.min:
                return self.min
            return None
        return self.index(predcluster, self.clusters[predcluster].max)

    # Python protocol

    def __len__(self):
        return self.n

    def __bool__(self):
        return not self.empty

    def __contains__(self, key):
        key = operator.index(key)
        if key < 0 or key >= self.u:
            return False
        return self._member(key)

    def __iter__(self):
        x = self.minimum()
        while x is not None:
            yield x
            x = self._successor(x)

    def __reversed__(self):
        x = self.maximum()
        while x is not None:
            yield x
            x = self._predecessor(x)

    def __repr__(self):
        return "VEB(u={}, n={})".format(self.u, self.n)
