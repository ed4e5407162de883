from .bulk_logistics_client import BulkLogisticsClient

__all__ = ["BulkLogisticsClient"]
