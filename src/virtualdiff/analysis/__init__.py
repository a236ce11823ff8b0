"""Simulation analysis tools."""

from virtualdiff.analysis.comparison import compare_diff_modes
from virtualdiff.analysis.export import export_kpi_json, export_trace_csv
from virtualdiff.analysis.kpi import KpiSummary, compute_kpis
from virtualdiff.analysis.plots import export_standard_plots

__all__ = [
    "KpiSummary",
    "compare_diff_modes",
    "compute_kpis",
    "export_kpi_json",
    "export_standard_plots",
    "export_trace_csv",
]
