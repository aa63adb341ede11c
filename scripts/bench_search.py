#!/usr/bin/env python3
"""Benchmark search: latency (p50, p95, p99) and QPS.

Usage:
    export API_URL=http://localhost:8000
    python scripts/bench_search.py [--num-docs 200] [--num-queries 50] [--use-llm]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx

_SENTENCES = [
    "Sentence-aware chunking keeps related statements together.",
    "Embeddings are cached for the lifetime of the process.",
    "Retrieval returns the most similar chunks above a threshold.",
    "Context expansion widens a snippet with nearby document text.",
]


def _document_text(i: int) -> str:
    return " ".join(f"Document {i}. {s}" for s in _SENTENCES)


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark search")
    parser.add_argument("--num-docs", type=int, default=200, help="Documents to ingest before search")
    parser.add_argument("--num-queries", type=int, default=50, help="Number of search requests")
    parser.add_argument("--limit", type=int, default=8, help="Results per search")
    parser.add_argument("--use-llm", action="store_true", help="Request LLM answers")
    parser.add_argument("--output", type=str, default="results/bench_search.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")

    with httpx.Client(timeout=60.0) as client:
        print(f"Seeding {args.num_docs} documents...")
        for i in range(args.num_docs):
            client.post(
                f"{api_url}/v1/documents",
                json={"name": f"bench_{i}.txt", "content": _document_text(i)},
            ).raise_for_status()

    latencies: list[float] = []
    errors = 0
    print(f"Running {args.num_queries} search requests...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for i in range(args.num_queries):
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/v1/search",
                json={
                    "query": _SENTENCES[i % len(_SENTENCES)],
                    "limit": args.limit,
                    "use_llm": args.use_llm,
                },
            )
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful searches.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Search benchmark (documents={args.num_docs}, queries={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
