"""Building blocks for vector similarity indexes: status codes, parameter configs, bitsets, binary sets, distances, queues, thread pools and visit-trace records."""

__version__ = "0.1.0"