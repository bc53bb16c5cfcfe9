#!/usr/bin/env python3
"""
trigram Benchmarks
==================

Times ``similarity`` on two long sentences, with plain string equality as a
point of reference, and ``find_words_iter`` on a long haystack.

Run benchmarks:
    python examples/benchmarks.py
"""

import time
from dataclasses import dataclass
from typing import Callable

import trigram as tg

S1 = "This is a longer string. It contains complete sentences."
S2 = "This is a longish string. It contains complete sentences."


@dataclass
class BenchmarkResult:
    name: str
    iterations: int
    seconds: float

    @property
    def per_call_us(self) -> float:
        return self.seconds / self.iterations * 1e6


def run(name: str, func: Callable[[], object], iterations: int) -> BenchmarkResult:
    func()  # warm up
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    return BenchmarkResult(name, iterations, time.perf_counter() - start)


def main():
    haystack = " ".join(["lorem ipsum dolor sit amet"] * 200) + " buffalow"
    results = [
        run("similarity", lambda: tg.similarity(S1, S2), 20_000),
        run("string equality", lambda: S1 == S2, 20_000),
        run("find_words (5K chars)", lambda: tg.find_words("buffalo", haystack), 5),
        run("first match only", lambda: next(tg.find_words_iter("lorem", haystack)), 1_000),
    ]

    print(f"{'benchmark':<24} {'iterations':>10} {'per call':>14}")
    print("-" * 50)
    for r in results:
        print(f"{r.name:<24} {r.iterations:>10} {r.per_call_us:>11.2f} us")


if __name__ == "__main__":
    main()
