"""
Infrastructure layer - Logging, configuration, error handling and console reporting.
"""
