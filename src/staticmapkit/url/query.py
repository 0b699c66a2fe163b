from urllib.parse import quote

from staticmapkit.constants import SAFE_QUERY_CHARS


class QueryParams:
    """
    Ordered query parameters that allow the same key more than once.

    The Static Maps API takes one ``path`` parameter per polyline, which a
    plain key -> value mapping cannot hold.
    """

    def __init__(self, pairs=None):
        self._pairs = []
        for key, value in pairs or []:
            self.add(key, value)

    def set(self, key, value):
        """Replace the first ``key`` in place, or append it when absent."""
        for i, (existing, _) in enumerate(self._pairs):
            if existing == key:
                self._pairs[i] = (key, str(value))
                return self
        self._pairs.append((key, str(value)))
        return self

    def add(self, key, value):
        """Append ``key=value`` even if ``key`` is already present."""
        self._pairs.append((key, str(value)))
        return self

    def encode(self):
        """Render as ``k=v&k=v`` keeping ``,``, ``|`` and ``:`` literal."""
        return "&".join(
            f"{quote(key, safe='')}={quote(value, safe=SAFE_QUERY_CHARS)}"
            for key, value in self._pairs
        )

    def __iter__(self):
        return iter(self._pairs)

    def __len__(self):
        return len(self._pairs)


def encode_url(base_url, params):
    """Join ``base_url`` and the encoded ``params`` into one URL."""
    if not len(params):
        return base_url
    return f"{base_url}?{params.encode()}"
