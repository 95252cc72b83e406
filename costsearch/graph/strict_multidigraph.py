"""Strict multi-directed graph that serves as the search engine's edge store.

`StrictMultiDiGraph` extends `networkx.MultiDiGraph` with explicit node
management, unique integer edge keys and the successor-enumeration contract
the algorithms consume: `weighted_successors(node)` returns ``(neighbor,
cost)`` pairs, one per outgoing edge, in insertion order.

The edge attribute holding the cost is a graph attribute, ``cost_attr``,
defaulting to ``"cost"``:

    g = StrictMultiDiGraph(cost_attr="latency")
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]

DEFAULT_COST_ATTR = "cost"


class StrictMultiDiGraph(nx.MultiDiGraph):
    """A multi-directed graph with strict mutation rules.

    This class enforces:
      - Edges never create missing endpoints (ValueError).
      - Nodes and edge keys are unique (ValueError on duplicates).
      - Removing a missing node or edge raises ValueError.
      - Auto-assigned edge keys are monotonically increasing integers.
    """

    def __init__(self, *args, **kwargs) -> None:
        kwargs.setdefault("cost_attr", DEFAULT_COST_ATTR)
        super().__init__(*args, **kwargs)
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._next_edge_id: int = 0

    @property
    def cost_attr(self) -> str:
        """Name of the edge attribute read by `weighted_successors`."""
        return self.graph.get("cost_attr", DEFAULT_COST_ATTR)

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return the next unused integer edge key (arguments are ignored)."""
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node.

        Raises:
            ValueError: If the node already exists.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def remove_node(self, n: NodeID) -> None:
        """Remove a node with all incident edges.

        Raises:
            ValueError: If the node does not exist.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        for e_id in [k for k, (s, t, _, _) in self._edges.items() if n in (s, t)]:
            del self._edges[e_id]
        super().remove_node(n)

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add a directed edge between two existing nodes.

        Self-loops and parallel edges are allowed. An explicit integer key
        advances the auto-key counter past it.

        Args:
            u_for_edge: Source node.
            v_for_edge: Target node.
            key: Unique edge key; generated when omitted.
            **attr: Edge attributes, typically including the cost attribute.

        Returns:
            EdgeID: The key of the new edge.

        Raises:
            ValueError: If an endpoint is missing or the key is taken.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],  # pyright: ignore[reportArgumentType]
        )
        return key

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """Remove a directed edge by its key.

        Raises:
            ValueError: If no edge has this key.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        src_node, dst_node, _, _ = self._edges.pop(key)
        super().remove_edge(src_node, dst_node, key=key)

    #
    # Queries
    #
    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Return all edges as ``{key: (src, dst, key, attrs)}``."""
        return self._edges

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """List the keys of all edges from ``u`` to ``v`` (empty if none)."""
        if u not in self.succ or v not in self.succ[u]:
            return []
        return list(self.succ[u][v].keys())

    def weighted_successors(self, node: NodeID) -> List[Tuple[NodeID, Any]]:
        """Enumerate outgoing edges of ``node`` as ``(neighbor, cost)`` pairs.

        Parallel edges produce one pair each. Edges without the cost
        attribute are skipped.

        Raises:
            KeyError: If the node does not exist.
        """
        if node not in self._succ:
            raise KeyError(f"Node '{node}' is not in the graph.")
        cost_attr = self.cost_attr
        return [
            (neighbor, attrs[cost_attr])
            for neighbor, edges_map in self._succ[node].items()
            for attrs in edges_map.values()
            if cost_attr in attrs
        ]

    def self_loop_costs(self, node: NodeID) -> List[Any]:
        """Return the costs of every self-loop on ``node``."""
        return [cost for neighbor, cost in self.weighted_successors(node) if neighbor == node]
