import json

import numpy as np
import pytest

from vecindex.feder_ivfflat import ClusterInfo, IVFFlatMeta


def test_cluster_info_to_dict():
    c = ClusterInfo(1, [4, 5], [0.5, 1.5])
    assert c.to_dict() == {"id_": 1, "node_ids_": [4, 5], "centroid_vec_": [0.5, 1.5]}


def test_add_cluster_copies_inputs():
    meta = IVFFlatMeta(2, 3, 10)
    ids = np.array([1, 2, 3], dtype=np.int64)
    centroid = np.array([0.25, 0.5, 0.75], dtype=np.float32)
    meta.add_cluster(0, ids, centroid)
    ids[0] = 99
    cluster = meta.clusters[0]
    assert cluster.node_ids == [1, 2, 3]
    assert cluster.centroid_vec == [0.25, 0.5, 0.75]


def test_add_cluster_rejects_wrong_dimension():
    meta = IVFFlatMeta(1, 3, 0)
    with pytest.raises(ValueError):
        meta.add_cluster(0, [], [1.0, 2.0])


def test_meta_to_dict_round_trips_through_json():
    meta = IVFFlatMeta(2, 2, 3)
    meta.add_cluster(0, [0, 2], [0.0, 1.0])
    meta.add_cluster(1, [1], [2.0, 3.0])
    d = meta.to_dict()
    assert d["nlist_"] == 2
    assert d["dim_"] == 2
    assert d["ntotal_"] == 3
    assert [c["id_"] for c in d["clusters_"]] == [0, 1]
    assert json.loads(json.dumps(d)) == d