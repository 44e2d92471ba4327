"""Benchmark the Pluma lexer and renderer.

Run with:
    pytest benchmarks/benchmark_pluma.py -v --benchmark-only
"""

import io

import pytest

from pluma import HtmlGenerator, Lexer, render_many


@pytest.mark.benchmark(group="lex-large-doc")
@pytest.mark.parametrize("buffer_size", [64, 4096])
def test_benchmark_lexer(benchmark, large_source, buffer_size):
    def lex_all():
        return sum(1 for _ in Lexer(io.BytesIO(large_source), buffer_size=buffer_size))

    count = benchmark(lex_all)
    assert count > 0


@pytest.mark.benchmark(group="render-large-doc")
def test_benchmark_render(benchmark, large_document):
    generator = HtmlGenerator()

    html = benchmark(render_many, large_document, generator=generator)
    assert html.count("<strong>") == len(large_document)
