"""
Benchmark suite for laxjson rewriting performance.

Compares rewrite-then-decode pipelines built on strict JSON libraries:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures rewriting speed and memory usage across different document shapes.
"""
