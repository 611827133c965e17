"""Statistical computation engine.

Submodules, leaf-first:
- typing: TypedColumn and type inference
- statistics: descriptive summaries
- missingness: per-column and joint missing-value analysis
- correlation: pairwise Pearson correlation matrix
- comparison: dataset-to-dataset deltas
"""
