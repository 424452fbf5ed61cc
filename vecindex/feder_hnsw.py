"""Visualisation records for a hierarchical graph index: build and search views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class NodeInfo:
    """A node and the ids it links to."""

    id: int = 0
    neighbors: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id_": self.id, "neighbors_": list(self.neighbors)}


@dataclass
class LevelLinkGraph:
    """The nodes of one level of the graph."""

    level: int = 0
    nodes: list[NodeInfo] = field(default_factory=list)

    def add_node_info(self, id_: int, links) -> None:
        self.nodes.append(NodeInfo(id_, list(links)))

    def to_dict(self) -> dict[str, Any]:
        return {"level_": self.level, "nodes_": [node.to_dict() for node in self.nodes]}


@dataclass
class HNSWMeta:
    """Index view: build parameters and an overview of the upper levels."""

    ef_construction: int = 0
    M: int = 0
    num_elem: int = 0
    num_levels: int = 0
    enter_point_id: int = 0
    num_overview_levels: int = 0
    overview_hier_graph: list[LevelLinkGraph] = field(default_factory=list)

    def add_level_link_graph(self, level: int) -> None:
        self.overview_hier_graph.append(LevelLinkGraph(level))

    def add_node_info(self, level: int, id_: int, links) -> None:
        """Add a node to the most recently added level, which must be ``level``."""
        if not self.overview_hier_graph:
            raise ValueError("no level has been added")
        current = self.overview_hier_graph[-1]
        if current.level != level:
            raise ValueError(f"last level is {current.level}, not {level}")
        current.add_node_info(id_, links)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ef_construction_": self.ef_construction,
            "M_": self.M,
            "num_elem_": self.num_elem,
            "num_levels_": self.num_levels,
            "enter_point_id_": self.enter_point_id,
            "num_overview_levels_": self.num_overview_levels,
            "overview_hier_graph_": [g.to_dict() for g in self.overview_hier_graph],
        }


@dataclass
class LevelVisitRecord:
    """Edges followed on one level during a search."""

    level: int = 0
    records: list[tuple[int, int, float]] = field(default_factory=list)

    def add_visit_record(self, id_from: int, id_to: int, distance: float) -> None:
        self.records.append((id_from, id_to, distance))

    def to_dict(self) -> dict[str, Any]:
        return {"level_": self.level, "records_": [list(r) for r in self.records]}


@dataclass
class HNSWVisitInfo:
    """Search view: visit records per level, in the order levels were searched."""

    infos: list[LevelVisitRecord] = field(default_factory=list)

    def add_level_visit_record(self, level: int) -> None:
        self.infos.append(LevelVisitRecord(level))

    def add_visit_record(self, level: int, id_from: int, id_to: int, dist: float) -> None:
        """Record an edge on the most recently added level, which must be ``level``."""
        if not self.infos:
            raise ValueError("no level has been added")
        current = self.infos[-1]
        if current.level != level:
            raise ValueError(f"last level is {current.level}, not {level}")
        current.add_visit_record(id_from, id_to, dist)

    def to_dict(self) -> dict[str, Any]:
        return {"infos_": [info.to_dict() for info in self.infos]}


@dataclass
class FederResult:
    """Visit information collected during one search and the ids it touched."""

    visit_info: HNSWVisitInfo = field(default_factory=HNSWVisitInfo)
    id_set: set[int] = field(default_factory=set)