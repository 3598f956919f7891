"""
FRAME MODEL DEFINITIONS: Node, Member and FrameDataset
======================================================

PURPOSE:
--------
This module defines the data structures decoded from a frame workbook:
- Node: an identified point in 3D space
- Member: a connection between two node identifiers
- FrameDataset: the members and nodes of one upload, with node lookup

A member only references its nodes BY IDENTIFIER. The reference may not
resolve (typo in the sheet, deleted node row): such members are kept in the
dataset exactly as read and dropped later, when the scene is composed.

All types are frozen. A new upload builds a new dataset; nothing is
mutated in place.
"""

import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """
    A node (joint) in 3D space.
    
    Parameters:
    -----------
    id : str
        Identifier as written in the nodes sheet ("1", "N12", ...)
        
    x, y, z : float
        Global coordinates. Missing or non-numeric cells are read as 0.
    
    Examples:
    ---------
    >>> n0 = Node("1", 0.0, 0.0, 0.0)
    >>> n0.position
    array([0., 0., 0.])
    """
    id: str
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    
    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True)
class Member:
    """
    A structural member connecting two nodes.
    
    Parameters:
    -----------
    start : Optional[str]
        Identifier of the start node (None if the cell was empty)
        
    end : Optional[str]
        Identifier of the end node (None if the cell was empty)
    """
    start: Optional[str]
    end: Optional[str]
    
    @property
    def label(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class FrameDataset:
    """
    Members and nodes decoded from a single workbook.
    
    Duplicate node identifiers resolve to the FIRST row carrying them;
    later duplicates are logged and ignored by lookup.
    """
    members: Tuple[Member, ...] = field(default_factory=tuple)
    nodes: Tuple[Node, ...] = field(default_factory=tuple)
    
    @classmethod
    def empty(cls) -> 'FrameDataset':
        return cls()
    
    @property
    def is_empty(self) -> bool:
        return not self.members and not self.nodes
    
    @cached_property
    def node_lookup(self) -> Dict[str, Node]:
        """Map node identifier -> Node (first occurrence wins)."""
        lookup: Dict[str, Node] = {}
        for node in self.nodes:
            if node.id in lookup:
                logger.warning(f"Duplicate node identifier '{node.id}' ignored")
                continue
            lookup[node.id] = node
        return lookup
    
    @property
    def unique_nodes(self) -> Tuple[Node, ...]:
        return tuple(self.node_lookup.values())
    
    def resolve(self, member: Member) -> Optional[Tuple[Node, Node]]:
        """
        Look up both nodes of a member.
        
        Returns:
        --------
        Optional[Tuple[Node, Node]]
            (start_node, end_node), or None if either identifier does not
            match a node in this dataset.
        """
        start = self.node_lookup.get(member.start) if member.start is not None else None
        end = self.node_lookup.get(member.end) if member.end is not None else None
        if start is None or end is None:
            return None
        return start, end
