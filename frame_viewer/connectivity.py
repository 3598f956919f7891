"""
Connection counting and endpoint detection.

A node is an ENDPOINT when exactly one member touches it (the free end of a
cantilever, the tip of a chain). Endpoints get an extra marker in the scene.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, Set

from .model import Member

logger = logging.getLogger(__name__)


def connection_counts(members: Iterable[Member]) -> Dict[str, int]:
    """
    Count how many members reference each node identifier.
    
    Both ends of every member are counted, so a self-loop (start == end)
    adds two to the same key. Identifiers are counted as written, whether or
    not a node with that identifier exists. Empty identifiers (None) are
    not counted.
    
    Parameters:
    -----------
    members : Iterable[Member]
        All members of the dataset
    
    Returns:
    --------
    Dict[str, int]
        {node_id: number of member ends at that node}
    """
    counts: Counter = Counter()
    for member in members:
        if member.start is not None:
            counts[member.start] += 1
        if member.end is not None:
            counts[member.end] += 1
    return dict(counts)


def endpoint_ids(counts: Dict[str, int]) -> Set[str]:
    """Identifiers of nodes touched by exactly one member."""
    endpoints = {node_id for node_id, n in counts.items() if n == 1}
    logger.debug(f"{len(endpoints)} endpoints among {len(counts)} referenced nodes")
    return endpoints
