"""
Shortage reporting for MRP.

Sorts netted requirements, separates the shortages and computes the
headline counters shown above the requirements plan.
"""

from decimal import Decimal
from typing import Iterable, Optional

from mrp.models.requirements import (
    DataIssue,
    MaterialRequirement,
    MrpResult,
    MrpSummary,
)


def shortage_sort_key(requirement: MaterialRequirement) -> tuple[Decimal, str, str]:
    """Largest net requirement first, then by name and id for stable output."""
    return (-requirement.net_requirement, requirement.material_name, requirement.material_id)


class ShortageReporter:
    """Classifies and summarizes netted material requirements."""

    def shortages(
        self, requirements: Iterable[MaterialRequirement]
    ) -> list[MaterialRequirement]:
        """Return requirements with a positive net requirement, sorted."""
        return sorted(
            (r for r in requirements if r.net_requirement > 0),
            key=shortage_sort_key,
        )

    def summarize(
        self,
        requirements: list[MaterialRequirement],
        shortages: list[MaterialRequirement],
        active_orders: int,
    ) -> MrpSummary:
        """Build the summary counters.

        Args:
            requirements: All netted requirements
            shortages: The shortage subset
            active_orders: Number of orders in an active status

        Returns:
            MrpSummary (totals add quantities across units)
        """
        return MrpSummary(
            active_orders=active_orders,
            material_count=len(requirements),
            shortage_count=len(shortages),
            total_net=sum((s.net_requirement for s in shortages), Decimal("0")),
            total_required=sum((r.gross_required for r in requirements), Decimal("0")),
            units=sorted({s.unit for s in shortages}),
        )

    def report(
        self,
        requirements: Iterable[MaterialRequirement],
        active_orders: int,
        warnings: Optional[list[DataIssue]] = None,
    ) -> MrpResult:
        """Produce the full planning result.

        Args:
            requirements: Netted requirements in any order
            active_orders: Number of orders in an active status
            warnings: Data issues found while reading the inputs

        Returns:
            MrpResult with requirements and shortages in report order
        """
        ordered = sorted(requirements, key=shortage_sort_key)
        shortages = self.shortages(ordered)
        return MrpResult(
            requirements=ordered,
            shortages=shortages,
            summary=self.summarize(ordered, shortages, active_orders),
            warnings=list(warnings or []),
        )
