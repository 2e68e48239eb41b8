"""
Chain merging

Splices coordinate sequences that share an endpoint into maximal chains.
Used to assemble relation members into rings and continuous lines.
"""

from typing import List, Optional, Sequence

from .elements import Coordinate

Chain = List[Coordinate]


class ChainMerger:
    """
    Merges undirected coordinate chains on shared endpoints

    The chain list is scanned in order for the first pair (i, j), i < j,
    with a common endpoint. The pair is joined into chain i, chain j is
    removed and the scan restarts from the beginning. Merging stops when
    a full scan finds nothing to join, so the result depends only on the
    input order.
    """

    def merge(self, segments: Sequence[Sequence[Coordinate]]) -> List[Chain]:
        """
        Merge segments into maximal chains

        Args:
            segments: Ordered coordinate sequences, e.g. way node coordinates

        Returns:
            List of merged chains, in the order they stabilized
        """
        chains = [list(segment) for segment in segments if segment]

        merged = True
        while merged:
            merged = False
            for i in range(len(chains)):
                for j in range(i + 1, len(chains)):
                    joined = self.join(chains[i], chains[j])
                    if joined is None:
                        continue
                    chains[i] = joined
                    del chains[j]
                    merged = True
                    break
                if merged:
                    break

        return chains

    @staticmethod
    def join(first: Chain, second: Chain) -> Optional[Chain]:
        """
        Join two chains at a shared endpoint

        The shared coordinate appears once in the result. Returns None
        when the chains have no endpoint in common.
        """
        if first[-1] == second[0]:
            return first + second[1:]
        if first[-1] == second[-1]:
            return first + second[-2::-1]
        if first[0] == second[-1]:
            return second + first[1:]
        if first[0] == second[0]:
            return first[::-1] + second[1:]
        return None

    @staticmethod
    def is_closed(chain: Sequence[Coordinate]) -> bool:
        return len(chain) >= 2 and chain[0] == chain[-1]
