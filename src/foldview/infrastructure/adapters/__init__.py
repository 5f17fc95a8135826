from .biopython_adapter import BiopythonAdapter

__all__ = ["BiopythonAdapter"]
