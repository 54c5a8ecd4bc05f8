"""SCC/CAC partitioning, influence-power and interaction scoring of directed social graphs."""

__version__ = "0.1.0"