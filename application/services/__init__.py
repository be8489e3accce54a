from .rate_service import RateService, normalize_rates
from .summary_service import SummaryService

__all__ = ['RateService', 'SummaryService', 'normalize_rates']
