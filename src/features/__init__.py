"""
Feature Engineering Module

This package contains the topic modeling components for the movie plot corpus.

Available features:
- Document-term frequency matrix
- LDA topic models, topic-count metrics and result tables

Usage:
    from src.features.topic_modeling import TopicModelingPipeline

    result = TopicModelingPipeline().run(plots, num_topics=10)
"""

# Lazy imports keep `import src.features` free of gensim start-up cost
# Use explicit imports: from src.features.topic_modeling import TopicModelingPipeline
