"""Names of index types, dataset keys, index parameters and metrics."""

from __future__ import annotations

INDEX_INVALID = ""

INDEX_FAISS_BIN_IDMAP = "BIN_FLAT"
INDEX_FAISS_BIN_IVFFLAT = "BIN_IVF_FLAT"

INDEX_FAISS_IDMAP = "FLAT"
INDEX_FAISS_IVFFLAT = "IVF_FLAT"
INDEX_FAISS_IVFFLAT_CC = "IVF_FLAT_CC"
INDEX_FAISS_IVFPQ = "IVF_PQ"
INDEX_FAISS_SCANN = "SCANN"
INDEX_FAISS_IVFSQ8 = "IVF_SQ8"

INDEX_FAISS_GPU_IDMAP = "GPU_FAISS_FLAT"
INDEX_FAISS_GPU_IVFFLAT = "GPU_FAISS_IVF_FLAT"
INDEX_FAISS_GPU_IVFPQ = "GPU_FAISS_IVF_PQ"
INDEX_FAISS_GPU_IVFSQ8 = "GPU_FAISS_IVF_SQ8"

INDEX_RAFT_IVFFLAT = "GPU_RAFT_IVF_FLAT"
INDEX_RAFT_IVFPQ = "GPU_RAFT_IVF_PQ"
INDEX_RAFT_CAGRA = "GPU_RAFT_CAGRA"

INDEX_HNSW = "HNSW"
INDEX_DISKANN = "DISKANN"

META_INDEX_TYPE = "index_type"
META_METRIC_TYPE = "metric_type"
META_DIM = "dim"
META_TENSOR = "tensor"
META_ROWS = "rows"
META_IDS = "ids"
META_DISTANCE = "distance"
META_LIMS = "lims"
META_TOPK = "k"
META_RADIUS = "radius"
META_RANGE_FILTER = "range_filter"
META_INPUT_IDS = "input_ids"
META_OUTPUT_TENSOR = "output_tensor"
META_DEVICE_ID = "gpu_id"
META_NUM_BUILD_THREAD = "num_build_thread"
META_TRACE_VISIT = "trace_visit"
META_JSON_INFO = "json_info"
META_JSON_ID_SET = "json_id_set"

PARAM_NPROBE = "nprobe"
PARAM_NLIST = "nlist"
PARAM_NBITS = "nbits"
PARAM_M = "m"
PARAM_SSIZE = "ssize"
PARAM_REORDER_K = "reorder_k"
PARAM_WITH_RAW_DATA = "with_raw_data"

PARAM_EFCONSTRUCTION = "efConstruction"
PARAM_HNSW_M = "M"
PARAM_EF = "ef"
PARAM_SEED_EF = "seed_ef"
PARAM_OVERVIEW_LEVELS = "overview_levels"

METRIC_IP = "IP"
METRIC_L2 = "L2"
METRIC_COSINE = "COSINE"
METRIC_HAMMING = "HAMMING"
METRIC_JACCARD = "JACCARD"
METRIC_SUBSTRUCTURE = "SUBSTRUCTURE"
METRIC_SUPERSTRUCTURE = "SUPERSTRUCTURE"


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def is_metric_type(name: str, metric_type: str) -> bool:
    """Compare a metric name with a metric type, ignoring ASCII case."""
    return _ascii_lower(name) == _ascii_lower(metric_type)