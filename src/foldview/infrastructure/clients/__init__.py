from .rcsb_client import RCSBClient

__all__ = ["RCSBClient"]
