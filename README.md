# vecindex

Building blocks for vector similarity indexes, in plain Python with numpy.

## What is inside

- `vecindex.errors`: the `Status` codes, the `KnowhereError` exception that carries a `status` and a `message`, and `check(condition, message)`, which raises `KnowhereError` when the condition is false.
- `vecindex.params`: string constants for index types (`INDEX_HNSW`, `INDEX_FAISS_IVFFLAT`, ...), dataset keys (`META_*`), index parameters (`PARAM_*`) and metrics (`METRIC_L2`, `METRIC_IP`, `METRIC_COSINE`, ...). It also has `is_metric_type(name, metric_type)`, which compares two metric names and ignores ASCII case.
- `vecindex.binaryset`: `Binary` (bytes with a size), `BinarySet`, a named collection of binaries with `append`, `get_by_name`, `get_by_names`, `erase`, `clear`, `in` and `len`, and `copy_binary`.
- `vecindex.bitset`: `BitsetView`, a read-only view over a packed filter bitset with `test`, `count`, `byte_size`, `empty`, `len` and `to_string`. `test` treats an index past the end as set.
- `vecindex.config`: declarative parameter sets. `Config.declare(name, kind)` returns an `Entry` that you set up by chaining calls (`set_default`, `set_range`, `allow_empty_without_default`, `description`, `for_train`, `for_search`, ...). `Config.load(json, param_type)` fills and checks the values that the given `ParamType` uses. `BaseConfig` declares the parameters every index shares: `metric_type`, `k`, `num_build_thread`, `radius`, `range_filter`, `trace_visit`, `enable_mmap` and `for_tuning`.
- `vecindex.distances`: single-precision vector operations:
  - `l2sqr`, `inner_product`, `l1`, `linf` and `norm_l2sqr` on single vectors;
  - `l2sqr_ny` and `inner_products_ny` for one vector against the rows of a matrix;
  - `madd`, which computes `a + bf * b`;
  - `madd_and_argmin`, which also returns the index of the first minimum below 1e20, or -1.
- `vecindex.file_manager`: the abstract `FileManager` and `LocalFileManager`, which only records file names in memory and never touches the disk.
- `vecindex.blocking_queue`: `BlockingQueue`, a thread-safe FIFO queue with a default capacity of 32. `put` waits while the queue is full. `take`, `front` and `back` wait while it is empty.
- `vecindex.utils`: `hash_vec` and `hash_binary_vec`, which give 64-bit hashes of float and packed binary vectors, and `round_down`.
- `vecindex.feder_hnsw`, `vecindex.feder_ivfflat`, `vecindex.feder_diskann`: dataclasses that record an index's structure and the visits made during a search. Each has a `to_dict()` that gives a JSON-ready dict.
- `vecindex.thread_pool`: `ThreadPool`, a fixed-size worker pool. `push` returns a `concurrent.futures.Future`, and `push` blocks once 16 tasks per thread are waiting. There are also process-wide build and search pools, set up with `init_global_build_thread_pool` / `init_global_search_thread_pool` and fetched with `get_global_build_thread_pool` / `get_global_search_thread_pool`.

## Install

```
pip install .
```

## Example

```python
import numpy as np

from vecindex.config import BaseConfig, ParamType
from vecindex.distances import l2sqr_ny
from vecindex.errors import KnowhereError

cfg = BaseConfig()
cfg.load({"metric_type": "L2", "k": 3}, ParamType.SEARCH)

query = [0.0, 0.0]
base = [[1.0, 0.0], [3.0, 4.0], [0.5, 0.5], [2.0, 2.0]]

distances = l2sqr_ny(query, base)
top_k = np.argsort(distances, kind="stable")[: cfg["k"]]

try:
    cfg.load({"k": 0}, ParamType.SEARCH)
except KnowhereError as err:
    print(err.status.name, err.message)  # out_of_range_in_json ...
```

`Config.load` raises `KnowhereError` when a parameter is missing, has the wrong type or is out of range. The error's `status` says which check failed.

## What it does not do

This package has the pieces an index is built from, but it has no index itself. It does not train or build indexes, run searches, serialize indexes to files or collect result sets. It offers no command-line tool and no server.

## Tests

```
pip install ".[test]"
pytest
```