"""Global email statistics."""

from datetime import date
from urllib.parse import urlencode

import httpx

from sendgrid_sdk.resources.base import Resource, build_payload
from sendgrid_sdk.resources.models import StatsAggregation, StatsQuery


class GlobalStats(Resource):
    endpoint = "v3/stats"

    async def get(
        self,
        start_date: date | str,
        end_date: date | str | None = None,
        aggregated_by: StatsAggregation | None = None,
    ) -> httpx.Response:
        """Retrieve global email statistics between two dates.

        Args:
            start_date: First day to include (date or YYYY-MM-DD).
            end_date: Last day to include. Defaults to today on the server.
            aggregated_by: Group results by 'day', 'week' or 'month'.

        Returns:
            The API response.

        Raises:
            SendGridValidationError: If the dates or aggregation are invalid.
        """
        params = build_payload(
            StatsQuery,
            start_date=start_date,
            end_date=end_date,
            aggregated_by=aggregated_by,
        )
        return await self._dispatcher.get(f"{self._path()}?{urlencode(params)}")
