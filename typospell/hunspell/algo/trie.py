from collections import defaultdict


class Leaf:     # pylint: disable=too-few-public-methods,missing-class-docstring
    def __init__(self):
        self.payloads = []
        self.children = defaultdict(Leaf)


class Trie:
    """
    `Trie <https://en.wikipedia.org/wiki/Trie>`_ is a data structure for effective prefix search. It
    is used to store dictionary stems, prefixes and suffixes. For example, if we have suffixes "s",
    "ions", "ications", they are stored (reversed) this way:

    .. code-block:: text

        root
        +-s           ... metadata for suffix "s"
          +-noi       ... metadata for suffix "ions"
              +-taci  ... metadata for suffix "ications"

    So, for the word "complications", we can receive all its possible suffixes (all three) in one
    pass through trie. The same way, for the misspelled "catts" all dictionary stems it might have
    started from ("cat", "catt") are fetched at once.
    """
    def __init__(self, data=None):
        self.root = Leaf()
        if data:
            for key, val in data.items():
                self.set(key, val)

    def put(self, path, payload):
        cur = self.root
        for p in path:
            cur = cur.children[p]

        cur.payloads.append(payload)

    def set(self, path, payloads):
        cur = self.root
        for p in path:
            cur = cur.children[p]

        cur.payloads = payloads

    def lookup(self, path):
        """
        Yields payloads of all keys that are prefixes of ``path`` (including the empty key and
        ``path`` itself), shortest first.
        """
        cur = self.root
        yield from cur.payloads
        for p in path:
            # Note: can't use cur.children[p] to check, it is defaultdict
            if p not in cur.children:
                return
            cur = cur.children[p]
            yield from cur.payloads
