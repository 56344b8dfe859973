"""Test suite for tweenkit.

Test Structure:
- unit/: Unit tests, one directory per package
  - easing/: Evaluator, formula table, sampling, taxonomy
  - iteration/, scene/, components/, profiling/: Peripheral helpers
  - config/, utils/, cli/: Ambient stack
"""
