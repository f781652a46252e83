"""
Application layer - Builds the dataset and runs the lab pipeline.
"""
