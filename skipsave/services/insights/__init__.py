from skipsave.services.insights.aggregation import DashboardSummary, build_dashboard, daily_series, streak
from skipsave.services.insights.sparkline import render_sparkline

__all__ = ["DashboardSummary", "build_dashboard", "daily_series", "render_sparkline", "streak"]
