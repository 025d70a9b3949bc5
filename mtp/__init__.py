from . import attacks, crypto_constructor, data, utils

__all__ = ["attacks", "crypto_constructor", "data", "utils"]
