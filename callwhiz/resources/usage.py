"""
CallWhiz Python SDK - Usage Resource

This module provides methods for usage statistics, credits and limits.
"""

from __future__ import annotations

from typing import Any, Optional

from callwhiz.config import Endpoints, Limits
from callwhiz.resources.base import BaseResource


class UsageResource(BaseResource):
    """
    Resource for usage and account information.

    Example:
        >>> usage = client.usage.get(period="week")
        >>> balance = client.usage.get_credit_balance()
    """

    def get(
        self,
        period: Optional[str] = Limits.DEFAULT_USAGE_PERIOD,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Any:
        """
        Get API usage statistics.

        Args:
            period: Aggregation period (e.g. "day", "week", "month").
                Defaults to "month" when not given.
            from_date: Start of the reporting window (ISO format)
            to_date: End of the reporting window (ISO format)

        Returns:
            Usage statistics
        """
        params = {"period": period or Limits.DEFAULT_USAGE_PERIOD}
        if from_date:
            params["from_date"] = from_date
        if to_date:
            params["to_date"] = to_date

        return self._get(Endpoints.USAGE, params=params)

    def get_credit_balance(self) -> Any:
        """Get the current credit balance."""
        return self._get(Endpoints.USAGE_CREDITS)

    def get_account_limits(self) -> Any:
        """Get account limits and quotas."""
        return self._get(Endpoints.USAGE_LIMITS)
