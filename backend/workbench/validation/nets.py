"""Net building and resolution.

Turns explicit wires plus the implicit bus ties of prototyping boards into
an undirected graph keyed by ``(component_id, terminal_id)`` tuples, then
partitions it into electrical nets with a breadth-first flood fill.

Pure Python. Deterministic. No I/O.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from workbench.catalog import (
    PROTOBOARD_COLUMNS,
    PROTOBOARD_RAILS,
    PROTOBOARD_STRIP_GROUPS,
    rail_terminal,
    strip_terminal,
)
from workbench.schemas.circuit import Component, ComponentType, Terminal, TerminalKey, Wire

Graph = dict[TerminalKey, list[TerminalKey]]


def _connect(graph: Graph, a: TerminalKey, b: TerminalKey) -> None:
    graph.setdefault(a, []).append(b)
    graph.setdefault(b, []).append(a)


def _bus_ties(component: Component) -> list[tuple[TerminalKey, TerminalKey]]:
    """Internal connections of a prototyping board, as linear chains."""
    ties: list[tuple[str, str]] = []  # terminal ids on this board

    for rail in PROTOBOARD_RAILS:
        for col in range(1, PROTOBOARD_COLUMNS):
            ties.append((rail_terminal(rail, col), rail_terminal(rail, col + 1)))

    for group in PROTOBOARD_STRIP_GROUPS:
        for col in range(1, PROTOBOARD_COLUMNS + 1):
            for upper, lower in zip(group, group[1:]):
                ties.append((strip_terminal(upper, col), strip_terminal(lower, col)))

    return [((component.id, a), (component.id, b)) for a, b in ties]


def build_nets(components: Iterable[Component], wires: Iterable[Wire]) -> Graph:
    """Build the connectivity graph from wires and bus components."""
    graph: Graph = {}

    for wire in wires:
        _connect(graph, wire.start.key, wire.end.key)

    for component in components:
        if component.type != ComponentType.PROTOBOARD.value:
            continue
        for a, b in _bus_ties(component):
            _connect(graph, a, b)

    return graph


def resolve_nets(graph: Graph) -> tuple[dict[TerminalKey, int], dict[int, set[TerminalKey]]]:
    """Partition the graph into connected components.

    Returns (terminal key → net id, net id → terminal keys). Net ids only
    carry meaning through equality.
    """
    terminal_to_net: dict[TerminalKey, int] = {}
    net_to_terminals: dict[int, set[TerminalKey]] = {}
    next_id = 0

    for start in graph:
        if start in terminal_to_net:
            continue

        members: set[TerminalKey] = {start}
        terminal_to_net[start] = next_id
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in graph.get(current, ()):
                if neighbor not in terminal_to_net:
                    terminal_to_net[neighbor] = next_id
                    members.add(neighbor)
                    queue.append(neighbor)

        net_to_terminals[next_id] = members
        next_id += 1

    return terminal_to_net, net_to_terminals


class NetMap:
    """Read-only view over resolved nets."""

    __slots__ = ("_terminal_to_net", "_net_to_terminals")

    def __init__(
        self,
        terminal_to_net: dict[TerminalKey, int],
        net_to_terminals: dict[int, set[TerminalKey]],
    ):
        self._terminal_to_net = terminal_to_net
        self._net_to_terminals = {
            net_id: frozenset(
                Terminal(component_id=component_id, terminal_id=terminal_id)
                for component_id, terminal_id in keys
            )
            for net_id, keys in net_to_terminals.items()
        }

    @classmethod
    def from_circuit(cls, components: Iterable[Component], wires: Iterable[Wire]) -> NetMap:
        return cls(*resolve_nets(build_nets(components, wires)))

    def net_id(self, component_id: str, terminal_id: str) -> int | None:
        return self._terminal_to_net.get((component_id, terminal_id))

    def get_net(self, component_id: str, terminal_id: str) -> frozenset[Terminal]:
        """Terminals sharing a net with the given one; empty if unwired."""
        net_id = self.net_id(component_id, terminal_id)
        if net_id is None:
            return frozenset()
        return self._net_to_terminals[net_id]

    def same_net(self, a: Terminal, b: Terminal) -> bool:
        net_a = self.net_id(a.component_id, a.terminal_id)
        return net_a is not None and net_a == self.net_id(b.component_id, b.terminal_id)

    def nets(self) -> list[frozenset[Terminal]]:
        return list(self._net_to_terminals.values())

    def __len__(self) -> int:
        return len(self._net_to_terminals)
