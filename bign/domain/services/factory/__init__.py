from .number_factory import NumberFactory

__all__ = [
    "NumberFactory",
]
