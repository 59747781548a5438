"""
INFRASTRUCTURE LAYER - In-memory storage behind the domain ports.
"""
