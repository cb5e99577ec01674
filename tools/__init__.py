"""
Elasticsearch tool layers: primitives and flows.
"""
