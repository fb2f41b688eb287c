# Vedic chart - Orchestration
from .chart import ChartResult, compute_chart, generate_chart

__all__ = ["ChartResult", "compute_chart", "generate_chart"]
