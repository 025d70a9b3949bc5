from .importer import load, Res

__all__ = ["load", "Res"]
