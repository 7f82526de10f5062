"""
Domain services composed from the repositories
"""

from src.api.services.financial_summary import FinancialSummaryService, summarize_expenses, project_revenue
from src.api.services.dashboard import DashboardService

__all__ = [
    'FinancialSummaryService',
    'DashboardService',
    'summarize_expenses',
    'project_revenue'
]
