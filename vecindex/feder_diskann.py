"""Visualisation records for a disk-based graph index: build and search views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DiskANNBuildConfig:
    """Parameters the index was built with."""

    data_path: str = ""
    max_degree: int = 0
    search_list_size: int = 0
    pq_code_budget_gb: float = 0.0
    build_dram_budget_gb: float = 0.0
    num_threads: int = 0
    disk_pq_dims: int = 0
    accelerate_build: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "data_path": self.data_path,
            "max_degree": self.max_degree,
            "search_list_size": self.search_list_size,
            "pq_code_budget_gb": self.pq_code_budget_gb,
            "build_dram_budget_gb": self.build_dram_budget_gb,
            "num_threads": self.num_threads,
            "disk_pq_dims": self.disk_pq_dims,
            "accelerate_build": self.accelerate_build,
        }


@dataclass
class DiskANNMeta:
    """Index view: build parameters, element count and graph entry point ids."""

    build_params: DiskANNBuildConfig = field(default_factory=DiskANNBuildConfig)
    num_elem: int = 0
    entry_ids: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "build_params_": self.build_params.to_dict(),
            "num_elem_": self.num_elem,
            "entry_points_": list(self.entry_ids),
        }


@dataclass
class DiskANNQueryConfig:
    """Parameters a search ran with."""

    k: int = 0
    search_list_size: int = 0
    beamwidth: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "k": self.k,
            "search_list_size": self.search_list_size,
            "beamwidth": self.beamwidth,
        }


@dataclass
class TopCandidateInfo:
    """A candidate visited during search, with the neighbours it expanded."""

    id: int = 0
    distance: float = 0.0
    neighbors: list[tuple[int, float]] = field(default_factory=list)

    def add_neighbor(self, id_: int, distance: float) -> None:
        self.neighbors.append((id_, distance))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id_": self.id,
            "real_distance_from_q_": self.distance,
            "neighbors_": [[nid, ndist] for nid, ndist in self.neighbors],
        }


@dataclass
class DiskANNVisitInfo:
    """Search view: the query parameters and every candidate visited in order."""

    query_params: DiskANNQueryConfig = field(default_factory=DiskANNQueryConfig)
    infos: list[TopCandidateInfo] = field(default_factory=list)

    def set_query_config(self, k: int, search_list_size: int, beamwidth: int) -> None:
        self.query_params = DiskANNQueryConfig(k, search_list_size, beamwidth)

    def add_top_candidate_info(self, id_: int, dist: float) -> None:
        self.infos.append(TopCandidateInfo(id_, dist))

    def add_top_candidate_neighbor(self, id_: int, nid: int, ndist: float) -> None:
        """Record a neighbour of the most recently added candidate, which must be ``id_``."""
        if not self.infos:
            raise ValueError("no candidate has been added")
        current = self.infos[-1]
        if current.id != id_:
            raise ValueError(f"last candidate is {current.id}, not {id_}")
        current.add_neighbor(nid, ndist)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query_params_": self.query_params.to_dict(),
            "infos_": [info.to_dict() for info in self.infos],
        }


@dataclass
class FederResult:
    """Visit information collected during one search and the ids it touched."""

    visit_info: DiskANNVisitInfo = field(default_factory=DiskANNVisitInfo)
    id_set: set[int] = field(default_factory=set)