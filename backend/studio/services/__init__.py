from studio.services.availability import AvailabilityService

__all__ = ["AvailabilityService"]
