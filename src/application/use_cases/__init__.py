"""Application use cases package."""

from .get_account_balances import (
    AccountBalancesView,
    GetAccountBalancesUseCase,
)
from .get_dashboard import DashboardView, GetDashboardUseCase
from .get_financial_alerts import FinancialAlerts, GetFinancialAlertsUseCase
from .get_monthly_trend import GetMonthlyTrendUseCase, MonthlyTrendPoint
from .get_period_summary import GetPeriodSummaryUseCase, PeriodSummary

__all__ = [
    "AccountBalancesView",
    "GetAccountBalancesUseCase",
    "DashboardView",
    "GetDashboardUseCase",
    "FinancialAlerts",
    "GetFinancialAlertsUseCase",
    "GetMonthlyTrendUseCase",
    "MonthlyTrendPoint",
    "GetPeriodSummaryUseCase",
    "PeriodSummary",
]
