"""Business logic services for the MRP web interface."""

from web.services.mrp_service import MrpService, get_mrp_service

__all__ = ["MrpService", "get_mrp_service"]
