"""Service layer: decode operations wrapped in ServiceResult.

Services depend on the domain layer and config; commands depend on services.
"""
