"""
Plot Topics - Test Suite

Test modules organized by functionality:
- unit/preprocessing/ - Corpus builder, normalizer, empty-document filter
- unit/features/ - Term-frequency matrix, LDA trainer, metrics, selector, result tables
- unit/ - Configuration and parallel utilities
"""
