"""Hash table of integer keys with separate chaining."""

from __future__ import annotations


class ChainedHashTable:
    """Integer keys hashed by remainder into a fixed number of chains."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._chains: list[list[int]] = [[] for _ in range(capacity)]

    def bucket_index(self, key: int) -> int:
        """Return the chain that ``key`` belongs to."""
        return key % self.capacity

    def insert(self, key: int) -> None:
        """Append ``key`` to the end of its chain."""
        self._chains[self.bucket_index(key)].append(key)

    def search(self, key: int) -> int | None:
        """Return the 1-based position of ``key`` in its chain, or None."""
        chain = self._chains[self.bucket_index(key)]
        for position, stored in enumerate(chain, start=1):
            if stored == key:
                return position
        return None

    def delete(self, key: int) -> bool:
        """Remove the first occurrence of ``key``; tell whether one was found."""
        chain = self._chains[self.bucket_index(key)]
        try:
            chain.remove(key)
        except ValueError:
            return False
        return True

    def buckets(self) -> tuple[tuple[int, ...], ...]:
        """Return the contents of every chain in bucket order."""
        return tuple(tuple(chain) for chain in self._chains)

    def format(self) -> str:
        """Render one line per bucket, ``-`` marking an empty one."""
        lines = []
        for index, chain in enumerate(self._chains):
            body = "".join(f"{key}  " for key in chain) if chain else "-"
            lines.append(f"[{index}]   {body}\n")
        return "".join(lines)

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._chains)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None