"""Observability - Prometheus counters for model activity."""
