"""Visualisation records for an inverted-file index: clusters and centroids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ClusterInfo:
    """One cluster: its id, member ids and centroid."""

    id: int = 0
    node_ids: list[int] = field(default_factory=list)
    centroid_vec: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id_": self.id,
            "node_ids_": list(self.node_ids),
            "centroid_vec_": list(self.centroid_vec),
        }


@dataclass
class IVFFlatMeta:
    """Index view: list count, dimension, total vectors and the clusters."""

    nlist: int = 0
    dim: int = 0
    ntotal: int = 0
    clusters: list[ClusterInfo] = field(default_factory=list)

    def add_cluster(self, id_: int, node_ids, centroid) -> None:
        """Add a cluster; its centroid must have ``dim`` components."""
        centroid_vec = [float(v) for v in centroid]
        if len(centroid_vec) != self.dim:
            raise ValueError(
                f"centroid has {len(centroid_vec)} components, expected {self.dim}"
            )
        self.clusters.append(ClusterInfo(id_, [int(i) for i in node_ids], centroid_vec))

    def to_dict(self) -> dict[str, Any]:
        return {
            "nlist_": self.nlist,
            "dim_": self.dim,
            "ntotal_": self.ntotal,
            "clusters_": [c.to_dict() for c in self.clusters],
        }