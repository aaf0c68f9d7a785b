"""Benchmark full rule pipelines over prose.

Run with:
    pytest benchmarks/benchmark_pipeline.py -v --benchmark-only
"""

try:
    import pytest

    from rulelex import lex, str_to_tokens, process_rule
    from rulelex.rules import ab_rule, int_rules, word_rules

    @pytest.mark.benchmark(group="pipeline")
    def test_benchmark_word_rules_paragraph(benchmark, paragraph):
        """Benchmark the word pipeline on one paragraph."""
        benchmark(lex, paragraph, word_rules())

    @pytest.mark.benchmark(group="pipeline")
    def test_benchmark_word_rules_large(benchmark, large_document):
        """Benchmark the word pipeline on a large document."""
        benchmark(lex, large_document, word_rules())

    @pytest.mark.benchmark(group="pipeline")
    def test_benchmark_int_rules_large(benchmark, large_document):
        """Benchmark the integer pipeline on a large document."""
        benchmark(lex, large_document, int_rules())

    @pytest.mark.benchmark(group="single-pass")
    def test_benchmark_seed_tokens(benchmark, large_document):
        """Baseline: cost of building the seed tokens alone."""
        benchmark(str_to_tokens, large_document)

    @pytest.mark.benchmark(group="single-pass")
    def test_benchmark_ab_rule(benchmark, large_document):
        """One merging pass with two-token windows."""
        tokens = str_to_tokens(large_document)
        benchmark(process_rule, ab_rule, tokens)

except ImportError:
    pass  # pytest not available
