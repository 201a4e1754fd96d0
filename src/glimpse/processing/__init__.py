"""Heuristic analyzers: sentiment, text statistics, image classification, PDF text."""
